"""
CLI script to search PDF files and export the matches to CSV.

Usage:
    python scripts/search_pdfs.py report.pdf --terms "invoice, total"
    python scripts/search_pdfs.py a.pdf b.pdf --terms invoice --output matches.csv
    python scripts/search_pdfs.py docs/*.pdf --terms invoice --config path/to/config.json
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pdflyzer.core import get_config, get_logger, ConfigurationError
from pdflyzer.core.config_loader import reload_config
from pdflyzer.results import count_by_term
from pdflyzer.session import Workspace


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search PDF files for one or more terms and export the matches"
    )

    parser.add_argument(
        "files",
        nargs="+",
        help="PDF files to search"
    )

    parser.add_argument(
        "--terms",
        required=True,
        help="Comma-separated search terms"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="CSV file to write (default: derived from the file names)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output"
    )

    return parser.parse_args()


def progress_callback(current: int, total: int, filename: str) -> None:
    """Print progress to console."""
    percent = (current / total) * 100 if total > 0 else 0
    bar_width = 30
    filled = int(bar_width * current / total) if total > 0 else 0
    bar = "=" * filled + "-" * (bar_width - filled)

    print(f"\r[{bar}] {percent:5.1f}% ({current}/{total}) {filename[:40]:<40}", end="", flush=True)


def main():
    """Main entry point for the search CLI."""
    args = parse_args()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            sys.exit(1)

    try:
        config = reload_config(Path(args.config)) if args.config else get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    logger = get_logger(__name__)

    uploads = []
    for name in args.files:
        path = Path(name)
        if not path.is_file():
            print(f"Error: File not found: {path}")
            sys.exit(1)
        uploads.append((path.name, path.read_bytes()))

    print("=" * 60)
    print("PDFlyzer - Search")
    print("=" * 60)
    print(f"Files:             {len(uploads):,}")
    print(f"Terms:             {args.terms}")
    print(f"Context chars:     {config.search.context_chars}")
    print("=" * 60)

    workspace = Workspace(config=config)

    notice = workspace.load_files(
        uploads,
        progress_callback=None if args.quiet else progress_callback
    )

    if not args.quiet:
        print("\n")

    print(f"{notice.title}: {notice.description}")
    if notice.is_error:
        sys.exit(1)

    notice = workspace.search(args.terms)
    print(f"{notice.title}: {notice.description}")
    if notice.is_error:
        sys.exit(1)

    counts = count_by_term(workspace.store.all())

    print("-" * 60)
    for term in workspace.terms:
        print(f"{term:<30} {counts.get(term, 0):>6,} matches")
    print("-" * 60)

    content, file_name, notice = workspace.export()

    if content is None:
        print(f"{notice.title}: {notice.description}")
        sys.exit(0)

    output = Path(args.output or file_name)
    output.write_bytes(content)

    logger.info(f"Wrote {len(workspace.store.highlighted())} matches to {output}")

    print(f"CSV written:       {output}")
    print("=" * 60)

    sys.exit(0)


if __name__ == "__main__":
    main()

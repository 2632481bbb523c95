"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, PDFs generated in memory with PyMuPDF,
and mock configurations to ensure tests are isolated and safe.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Callable, Generator, Sequence

import fitz

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


SAMPLE_PAGE_TEXT = "Hello world, hello there:World"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="pdflyzer_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "logs_directory": str(logs_dir)
        },
        "extraction": {
            "primary_backend": "pypdf",
            "fallback_backend": "pdfplumber",
            "supported_extensions": [".pdf"]
        },
        "search": {
            "context_chars": 50
        },
        "render": {
            "default_scale": 1.0,
            "min_scale": 0.5,
            "max_scale": 2.0,
            "zoom_step": 0.25,
            "highlight_delay_ms": 10,
            "match_color": "rgba(0, 0, 255, 0.4)",
            "next_word_color": "rgba(255, 165, 0, 0.4)"
        },
        "export": {
            "default_filename": "test_results.csv",
            "encoding": "utf-8"
        },
        "gui": {
            "page_title": "Test PDFlyzer",
            "multi_file": True,
            "results_preview_chars": 80
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from pdflyzer.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from pdflyzer.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False


@pytest.fixture
def configured(temp_config, reset_config_singleton):
    """
    Load the temporary config as the global configuration.

    Returns:
        The Config instance built from temp_config.
    """
    from pdflyzer.core.config_loader import get_config
    return get_config(temp_config)


@pytest.fixture
def make_pdf() -> Callable[[Sequence[str]], bytes]:
    """
    Factory building a PDF in memory, one page per string.

    An empty string yields a page without any text.
    """
    def _make(pages: Sequence[str]) -> bytes:
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text, fontsize=12)
        data = doc.tobytes()
        doc.close()
        return data

    return _make


@pytest.fixture
def sample_pdf_bytes(make_pdf) -> bytes:
    """Single-page PDF with SAMPLE_PAGE_TEXT."""
    return make_pdf([SAMPLE_PAGE_TEXT])


@pytest.fixture
def multi_page_pdf_bytes(make_pdf) -> bytes:
    """Three pages: an invoice header, a blank page, and a total."""
    return make_pdf([
        "Invoice number: 42 issued to ACME",
        "",
        "Total: 100 EUR due within 30 days"
    ])


@pytest.fixture
def blank_pdf_bytes(make_pdf) -> bytes:
    """PDF whose only page has no text layer."""
    return make_pdf([""])


@pytest.fixture
def corrupt_pdf_bytes() -> bytes:
    return b"This is not a PDF file at all"

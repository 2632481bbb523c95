"""
Workspace orchestrating one user session.

Owns the loaded documents, the single annotation store of the current
result batch, the selection state and the viewer position. Every
operation returns a Notice; a failed operation leaves the previous
documents and results untouched.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..annotation import AnnotationStore, SelectionController
from ..core import (
    Config,
    ExportError,
    ExtractionError,
    Notice,
    SearchError,
    empty_search_notice,
    error_notice,
    get_config,
    get_logger,
    no_matches_notice,
    success_notice,
    validation_notice
)
from ..extraction import Document, PDFExtractor
from ..extraction.extractor import ProgressCallback, read_upload
from ..results import export_filename, serialize, to_table
from ..search import AnnotatedMatch, MatchEngine, normalize_terms
from .navigation import ViewerState

logger = get_logger(__name__)


class Workspace:
    """
    State and operations behind the user interface.

    A new upload replaces the document set and discards results; a new
    search replaces the result batch. There is never more than one
    AnnotationStore alive for the current batch.
    """

    def __init__(
        self,
        extractor: PDFExtractor = None,
        engine: MatchEngine = None,
        config: Config = None
    ):
        """
        Initialize an empty workspace.

        Args:
            extractor: Text extractor; built from config when omitted.
            engine: Match engine; built from config when omitted.
            config: Configuration; the global config when omitted.
        """
        self.config = config or get_config()
        self._extractor = extractor
        self.engine = engine or MatchEngine(context_chars=self.config.search.context_chars)

        render_cfg = self.config.render
        self.viewer = ViewerState(
            scale=render_cfg.default_scale,
            default_scale=render_cfg.default_scale,
            min_scale=render_cfg.min_scale,
            max_scale=render_cfg.max_scale,
            zoom_step=render_cfg.zoom_step
        )

        self.documents: List[Document] = []
        self.terms: List[str] = []
        self.store = AnnotationStore()
        self.selection = SelectionController()
        self.file_filter: Optional[int] = None
        self.batch = 0  # bumped whenever the result set is replaced

    @property
    def extractor(self) -> PDFExtractor:
        if self._extractor is None:
            self._extractor = PDFExtractor()
        return self._extractor

    @property
    def single_file_mode(self) -> bool:
        return not self.config.gui.multi_file

    @property
    def active_document(self) -> Optional[Document]:
        if not self.documents:
            return None
        return self.documents[self.viewer.file_index]

    def load_files(
        self,
        files: Iterable[Any],
        progress_callback: Optional[ProgressCallback] = None
    ) -> Notice:
        """
        Extract uploads and make them the current document set.

        With a single upload, its extraction error is reported. With
        several, unreadable files are skipped and counted.

        Args:
            files: (file_name, bytes) pairs or upload objects.
            progress_callback: Optional callable(current, total, file_name).

        Returns:
            Outcome notice.
        """
        uploads = list(files)

        if not uploads:
            return validation_notice("No files selected", "Choose one or more PDF files.")

        if len(uploads) == 1:
            try:
                file_name, data = read_upload(uploads[0])
                if progress_callback:
                    progress_callback(1, 1, file_name)
                documents = [self.extractor.extract_document(data, file_name, file_index=0)]
            except ExtractionError as e:
                logger.error(f"Upload failed: {e.message}")
                return error_notice("Error uploading PDFs", e.message)
        else:
            documents = self.extractor.extract_all(uploads, progress_callback)

        if not documents:
            return error_notice(
                "Error uploading PDFs",
                "None of the files contained extractable text."
            )

        self._replace_documents(documents)

        description = f"{len(documents)} file(s) ready to be searched."
        skipped = len(uploads) - len(documents)
        if skipped:
            description += f" {skipped} file(s) could not be read and were skipped."

        logger.info(f"Loaded {len(documents)} documents ({skipped} skipped)")

        return success_notice("PDFs uploaded successfully", description)

    def search(self, terms: Sequence[str]) -> Notice:
        """
        Run a search over all loaded documents.

        The new result batch replaces the previous one, even when empty.

        Args:
            terms: Search terms (list, or comma-separated string).

        Returns:
            Outcome notice.
        """
        if not self.documents:
            return empty_search_notice()

        terms = normalize_terms(terms)
        if not terms:
            return validation_notice("No search terms", "Add at least one word or phrase.")

        try:
            records = self.engine.search(self.documents, terms)
        except SearchError as e:
            logger.error(f"Search failed for {e.terms}: {e.message}")
            return error_notice("Search error", "An error occurred while searching the PDFs.")

        self.terms = terms
        self.store = AnnotationStore(records)
        self.batch += 1
        self.selection.reset()

        logger.info(f"Search {terms}: {len(records)} matches")

        if not records:
            return no_matches_notice()

        return success_notice("Search completed", f"Found {len(records)} matches.")

    def export(self) -> Tuple[Optional[bytes], str, Notice]:
        """
        Serialize highlighted matches to CSV.

        Returns:
            (csv_bytes or None, file_name, notice).
        """
        file_name = export_filename(
            [doc.file_name for doc in self.documents],
            default=self.config.export.default_filename
        )

        matches = self.store.highlighted()
        if not matches:
            return None, file_name, validation_notice(
                "Nothing to export",
                "There are no highlighted matches to export."
            )

        try:
            table = to_table(matches, single_file=self.single_file_mode)
            content = serialize(table, encoding=self.config.export.encoding)
        except ExportError as e:
            logger.error(f"Export failed: {e.message}")
            return None, file_name, error_notice(
                "Export failed",
                "An error occurred while exporting to CSV."
            )

        logger.info(f"Exported {len(table)} matches to {file_name}")

        return content, file_name, success_notice(
            "Export successful",
            f"Results exported as {file_name}"
        )

    def visible_matches(self) -> List[AnnotatedMatch]:
        """Matches shown in the results panel, honoring the file filter."""
        return self.store.for_file(self.file_filter)

    def page_matches(self) -> List[AnnotatedMatch]:
        """Matches on the page currently shown in the viewer."""
        if not self.documents:
            return []
        return self.store.for_page(self.viewer.file_index, self.viewer.page_number)

    def set_file_filter(self, file_index: Optional[int]) -> None:
        """
        Restrict the results panel to one document, or None for all.

        Choosing a document also shows it in the viewer.
        """
        if file_index is not None and not 0 <= file_index < len(self.documents):
            return

        self.file_filter = file_index
        if file_index is not None:
            self.select_file(file_index)

    def select_file(self, file_index: int) -> bool:
        """Show a document in the viewer, resetting page, zoom and selection."""
        if not 0 <= file_index < len(self.documents):
            return False

        if file_index != self.viewer.file_index:
            self.viewer.open(file_index, self.documents[file_index].page_count)
            self.selection.reset()
        return True

    def go_to_page(self, page_number: int) -> bool:
        moved = self.viewer.go_to(page_number)
        if moved:
            self.selection.reset()
        return moved

    def next_page(self) -> bool:
        return self.go_to_page(self.viewer.page_number + 1)

    def prev_page(self) -> bool:
        return self.go_to_page(self.viewer.page_number - 1)

    def go_to_match(self, match_id: str) -> bool:
        """Show the page holding a match."""
        match = self.store.get(match_id)
        if match is None:
            return False

        self.select_file(match.file_index)
        self.go_to_page(match.page_number)
        return True

    def zoom_in(self) -> float:
        return self.viewer.zoom_in()

    def zoom_out(self) -> float:
        return self.viewer.zoom_out()

    def _replace_documents(self, documents: List[Document]) -> None:
        self.documents = documents
        self.terms = []
        self.store = AnnotationStore()
        self.selection.reset()
        self.file_filter = None
        self.batch += 1
        self.viewer.open(0, documents[0].page_count)

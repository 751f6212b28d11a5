from pathlib import PurePath

from plagcheck.config.settings import Settings
from plagcheck.extraction.base import BaseTextExtractor
from plagcheck.extraction.docx_adapter import DocxAdapter
from plagcheck.extraction.exceptions import UnsupportedFileTypeError
from plagcheck.extraction.pdfplumber_adapter import PdfPlumberAdapter
from plagcheck.extraction.plain_text_adapter import PlainTextAdapter
from plagcheck.extraction.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Creates the extractor for a file name, honoring the configured PDF engine."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    def __init__(self, settings: Settings) -> None:
        engine = settings.pdf_engine.lower()
        if engine not in self.PDF_ADAPTERS:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(self.PDF_ADAPTERS)}"
            )
        self._pdf_engine = engine

    def for_file(self, file_name: str | None) -> BaseTextExtractor:
        extension = PurePath(file_name or "").suffix.lower().lstrip(".")
        if extension == "pdf":
            return self.PDF_ADAPTERS[self._pdf_engine]()
        if extension == "docx":
            return DocxAdapter()
        if extension == "txt":
            return PlainTextAdapter()
        raise UnsupportedFileTypeError(
            f"Unsupported file type: '{extension or 'none'}'. Supported types: PDF, DOCX, TXT"
        )

import io

from docx import Document

from plagcheck.extraction.base import BaseTextExtractor
from plagcheck.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts paragraph text from DOCX using python-docx."""

    def extract(self, data: bytes) -> str:
        try:
            document = Document(io.BytesIO(data))
            return "\n".join(p.text for p in document.paragraphs).strip()
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc

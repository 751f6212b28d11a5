from plagcheck.extraction.base import BaseTextExtractor
from plagcheck.extraction.exceptions import ExtractionError


class PlainTextAdapter(BaseTextExtractor):
    """Decodes UTF-8 text files (a leading BOM is dropped)."""

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"File is not valid UTF-8 text: {exc}") from exc

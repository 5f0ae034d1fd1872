import math
import re
import unicodedata
from typing import Optional

_CID_RE = re.compile(r"\(cid:\d+\)")
_TRAILING_WS = re.compile(r"[ \t\f\v]+\n")
_BLANK_RUNS = re.compile(r"\n{3,}")


def normalize_text(s: str) -> str:
    return " ".join(s.strip().lower().split())


def collapse_whitespace(s: str) -> str:
    return " ".join(s.split())


def normalize_document_text(text: str) -> str:
    """Clean decoder output: NFKC, glyph artifacts, line endings, blank runs."""
    text = unicodedata.normalize("NFKC", text or "")
    text = _CID_RE.sub("", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _TRAILING_WS.sub("\n", text + "\n")
    text = _BLANK_RUNS.sub("\n\n", text)
    return text.strip()


PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"

MIME_ALIASES = {
    "pdf": PDF_MIME,
    "application/x-pdf": PDF_MIME,
    "docx": DOCX_MIME,
    "txt": TEXT_MIME,
    "text": TEXT_MIME,
}


def normalize_mime_type(mime_type: Optional[str]) -> Optional[str]:
    if mime_type is None:
        return None
    mt = mime_type.split(";", 1)[0].strip().lower()
    if not mt:
        return None
    return MIME_ALIASES.get(mt, mt)


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards
    return int(math.floor(value + 0.5))

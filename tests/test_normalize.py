"""
Tests for text and MIME normalisation helpers.
"""

from resumeats.normalize import (
    DOCX_MIME,
    PDF_MIME,
    TEXT_MIME,
    normalize_document_text,
    normalize_mime_type,
    normalize_text,
    round_half_up,
)


class TestNormalizeDocumentText:
    def test_line_endings(self):
        assert normalize_document_text("a\r\nb\rc") == "a\nb\nc"

    def test_trailing_spaces(self):
        assert normalize_document_text("a   \nb\t\n") == "a\nb"

    def test_blank_runs_collapsed(self):
        assert normalize_document_text("a\n\n\n\n\nb") == "a\n\nb"

    def test_nfkc(self):
        # full-width letters and the 'fi' ligature
        assert normalize_document_text("Ｐｙｔｈｏｎ ﬁle") == "Python file"

    def test_none(self):
        assert normalize_document_text(None) == ""


class TestNormalizeMimeType:
    def test_aliases(self):
        assert normalize_mime_type("pdf") == PDF_MIME
        assert normalize_mime_type("application/x-pdf") == PDF_MIME
        assert normalize_mime_type("DOCX") == DOCX_MIME
        assert normalize_mime_type("txt") == TEXT_MIME

    def test_parameters_dropped(self):
        assert normalize_mime_type("text/plain; charset=UTF-8") == TEXT_MIME

    def test_empty(self):
        assert normalize_mime_type(None) is None
        assert normalize_mime_type("  ") is None

    def test_unknown_kept(self):
        assert normalize_mime_type("Image/PNG") == "image/png"


class TestHelpers:
    def test_normalize_text(self):
        assert normalize_text("  Senior   Engineer ") == "senior engineer"

    def test_round_half_up(self):
        assert round_half_up(62.5) == 63
        assert round_half_up(0.5) == 1
        assert round_half_up(62.4999) == 62
        assert round_half_up(0.0) == 0

"""
Error types raised by the resume analysis core.

Only document extraction raises. Segmentation and scoring degrade to
zero/empty results instead, so a malformed résumé shows up as a low score
rather than an exception.
"""

from typing import Optional


class ResumeAtsError(Exception):
    """Base class for all resumeats errors."""
    pass


class UnsupportedFormat(ResumeAtsError):
    """Raised when a document's MIME type is not one we can decode."""

    def __init__(self, mime_type: Optional[str]):
        self.mime_type = mime_type
        super().__init__(f"Unsupported document format: {mime_type!r}")


class ExtractionFailed(ResumeAtsError):
    """Raised when a supported document cannot be turned into text.

    Covers corrupt files, encrypted PDFs, and documents that decode but
    contain no text at all. Not retryable: the same bytes fail the same way.
    """

    def __init__(self, mime_type: Optional[str], reason: str):
        self.mime_type = mime_type
        self.reason = reason
        super().__init__(f"Failed to extract text ({mime_type}): {reason}")

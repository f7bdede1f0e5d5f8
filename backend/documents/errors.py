"""Error taxonomy for term generation. Routes map status_code onto the HTTP response."""
from __future__ import annotations


class DocumentError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LookupNotFound(DocumentError):
    """Unknown document or condominium id."""
    status_code = 404


class AssetNotFound(DocumentError):
    """Template or letterhead file missing on disk."""
    status_code = 500


class RenderError(DocumentError):
    """Chromium could not be launched, load the document or export the PDF."""
    status_code = 500


class SubstitutionGap(DocumentError):
    status_code = 422

    def __init__(self, tokens: list[str]):
        super().__init__(f"Unresolved template placeholders: {', '.join(tokens)}")
        self.tokens = list(tokens)


class AttachmentTooLarge(DocumentError):
    status_code = 413


class UnsupportedMediaType(DocumentError):
    status_code = 400


class UnknownLayout(DocumentError):
    status_code = 400

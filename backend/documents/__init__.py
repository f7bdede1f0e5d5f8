"""Term assembly: placeholder substitution, letterhead composition and PDF rendering."""

from documents.errors import (
    AssetNotFound,
    AttachmentTooLarge,
    DocumentError,
    LookupNotFound,
    RenderError,
    SubstitutionGap,
    UnknownLayout,
    UnsupportedMediaType,
)

__all__ = [
    "AssetNotFound",
    "AttachmentTooLarge",
    "DocumentError",
    "LookupNotFound",
    "RenderError",
    "SubstitutionGap",
    "UnknownLayout",
    "UnsupportedMediaType",
]

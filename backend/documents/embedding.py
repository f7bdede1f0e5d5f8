"""Turn image bytes into data: URIs so the composed HTML needs no file or network access."""
from __future__ import annotations

import base64
import os

from models import Attachment

from .errors import AttachmentTooLarge, UnsupportedMediaType

ALLOWED_IMAGE_CONTENT_TYPES = {"image/png", "image/jpeg", "image/gif", "image/webp", "image/svg+xml"}
_EXTENSION_CONTENT_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
}
MAX_ATTACHMENT_BYTES = int(os.environ.get("MAX_ATTACHMENT_BYTES", "5000000"))


def embed(content: bytes | None, media_type: str) -> str:
    if not content:
        return ""
    payload = base64.b64encode(content).decode("ascii")
    return f"data:{media_type};base64,{payload}"


def resolve_media_type(attachment: Attachment) -> str:
    content_type = (attachment.media_type or "").lower().strip()
    if content_type == "image/jpg":
        content_type = "image/jpeg"
    if content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
        name = (attachment.filename or "").lower().strip()
        for ext, guessed in _EXTENSION_CONTENT_TYPES.items():
            if name.endswith(ext):
                content_type = guessed
                break
    if content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
        raise UnsupportedMediaType(
            f"Attachment {attachment.filename or ''!r} must be PNG, JPG, GIF, WEBP or SVG"
        )
    return content_type


def embed_attachment(attachment: Attachment | None, max_bytes: int | None = None) -> str:
    """Data URI for an uploaded image, or "" when nothing was uploaded."""
    if attachment is None or not attachment.content:
        return ""
    limit = MAX_ATTACHMENT_BYTES if max_bytes is None else max_bytes
    if len(attachment.content) > limit:
        raise AttachmentTooLarge(
            f"Attachment {attachment.filename or ''!r} exceeds {limit} bytes"
        )
    return embed(attachment.content, resolve_media_type(attachment))

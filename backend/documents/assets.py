"""
Read term templates and the letterhead images from disk.
TEMPLATES_DIR holds the HTML templates named in termosign.documentos;
LETTERHEAD_DIR holds cabecalho.png (header) and rodape.png (footer).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .errors import AssetNotFound

_BACKEND_DIR = Path(__file__).resolve().parents[1]
TEMPLATES_DIR = Path(os.environ.get("TEMPLATES_DIR", str(_BACKEND_DIR / "templates")))
LETTERHEAD_DIR = Path(os.environ.get("LETTERHEAD_DIR", str(_BACKEND_DIR / "assets")))
HEADER_FILENAME = "cabecalho.png"
FOOTER_FILENAME = "rodape.png"


@dataclass(frozen=True)
class Letterhead:
    header: bytes
    footer: bytes
    media_type: str = "image/png"


def load_bytes(path: Path | str) -> bytes:
    p = Path(path)
    if not p.is_file():
        raise AssetNotFound(f"Asset not found: {p.name}")
    return p.read_bytes()


def load_text(path: Path | str) -> str:
    try:
        return load_bytes(path).decode("utf-8")
    except UnicodeDecodeError as e:
        raise AssetNotFound(f"Asset is not valid UTF-8: {Path(path).name}") from e


def load_template(template_file: str, templates_dir: Path | None = None) -> str:
    """Read a template by file name. Names resolving outside the templates dir are treated as missing."""
    base = (templates_dir or TEMPLATES_DIR).resolve()
    path = (base / template_file).resolve()
    if base not in path.parents:
        raise AssetNotFound(f"Asset not found: {template_file}")
    return load_text(path)


@lru_cache(maxsize=1)
def get_letterhead() -> Letterhead:
    """Letterhead pair, read once per process. Failed loads are not memoised."""
    return Letterhead(
        header=load_bytes(LETTERHEAD_DIR / HEADER_FILENAME),
        footer=load_bytes(LETTERHEAD_DIR / FOOTER_FILENAME),
    )

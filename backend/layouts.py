"""In-repo layout registry. TERM_LAYOUT picks the default used when a request names none."""
from __future__ import annotations

import os

from documents.errors import UnknownLayout
from models_layout import LayoutConfig, PaginationStrategy

DEFAULT_LAYOUT_ID = os.environ.get("TERM_LAYOUT", "table_flow").strip() or "table_flow"

LAYOUTS: dict[str, LayoutConfig] = {
    "table_flow": LayoutConfig(
        layout_id="table_flow",
        strategy=PaginationStrategy.TABLE_FLOW,
        header_band_cm=4.0,
        footer_band_cm=3.5,
        content_padding_cm=2.0,
    ),
    "native": LayoutConfig(
        layout_id="native",
        strategy=PaginationStrategy.NATIVE_HEADER_FOOTER,
        margin_top_cm=5.0,
        margin_bottom_cm=4.0,
        margin_side_cm=2.0,
    ),
}


def get_layout(layout_id: str | None = None) -> LayoutConfig:
    key = (layout_id or "").strip() or DEFAULT_LAYOUT_ID
    layout = LAYOUTS.get(key)
    if layout is None:
        raise UnknownLayout(f"Unknown layout: {key}")
    return layout


def list_layouts() -> list[LayoutConfig]:
    return list(LAYOUTS.values())

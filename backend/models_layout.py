"""Page layout configuration for letterhead pagination."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PaginationStrategy(str, Enum):
    # Letterhead lives in <thead>/<tfoot> of a layout table; page margins are zero.
    TABLE_FLOW = "table_flow"
    # Letterhead goes to Chromium's headerTemplate/footerTemplate; margins reserve the bands.
    NATIVE_HEADER_FOOTER = "native_header_footer"


class LayoutConfig(BaseModel):
    """How the letterhead repeats across pages and how much room it takes."""
    layout_id: str
    strategy: PaginationStrategy = PaginationStrategy.TABLE_FLOW
    page_format: str = "A4"
    # table_flow: in-document band heights and horizontal body padding
    header_band_cm: float = Field(default=4.0, gt=0)
    footer_band_cm: float = Field(default=3.5, gt=0)
    content_padding_cm: float = Field(default=2.0, ge=0)
    # native_header_footer: page margins; header/footer images are sized to fill them
    margin_top_cm: float = Field(default=5.0, gt=0)
    margin_bottom_cm: float = Field(default=4.0, gt=0)
    margin_side_cm: float = Field(default=2.0, ge=0)
    font_family: str = "'Helvetica', 'Arial', sans-serif"
    font_size_pt: float = Field(default=11.0, gt=0)

"""
Utility functions for formatting and display.
"""

from typing import Optional

from .types import ExtractedAttributes

def fmt_confidence(value: float) -> str:
    """Format a 0-1 confidence as a percentage (values outside the range shown as-is)."""
    return f"{value * 100:.0f}%"

def fmt_price_usd(n: Optional[float]) -> str:
    return "$0" if n is None else f"${n:,.0f}"

def md_attributes_table(attrs: ExtractedAttributes) -> str:
    """Create markdown table for extracted attributes."""
    rows = ["| Make | Body type | Color | Confidence |",
            "|---|---|---|---:|"]
    rows.append(f"| {attrs.make or '-'} | {attrs.body_type or '-'} | {attrs.color or '-'} | {fmt_confidence(attrs.confidence)} |")
    return "\n".join(rows)

def md_cars_table(cars: list[dict]) -> str:
    """Create markdown table for matching cars."""
    rows = ["| ID | Car | Body type | Color | Price |",
            "|---|---|---|---|---:|"]
    for c in cars:
        rows.append(f"| `{c['car_id']}` | {c['year']} {c['make']} {c['model']} | {c['body_type']} | {c['color']} | {fmt_price_usd(c['price'])} |")
    return "\n".join(rows)

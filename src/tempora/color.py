# SPDX-License-Identifier: MIT

import re
from typing import Optional

# Default colors for items without a resolvable tag color
MEETING_DEFAULT_COLOR = "#3b82f6"
ACTION_DEFAULT_COLOR = "#22c55e"

# Fallback for tag chips whose stored color is malformed
TAG_FALLBACK_COLOR = "#6b7280"

# Terminal accents for the rich views
OVERDUE_COLOR = "red"
NOW_INDICATOR_COLOR = "bright_red"
WEEKEND_COLOR = "bright_black"

# Share of the item color kept in the background tint
BACKGROUND_TINT_ALPHA = 0.15

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


def is_valid_hex(color: Optional[str]) -> bool:
    return color is not None and _HEX_PATTERN.fullmatch(color) is not None


def normalize_hex(color: str) -> str:
    """Return the color as lowercase '#rrggbb'. Raises ValueError if malformed."""
    match = _HEX_PATTERN.fullmatch(color) if color is not None else None
    if match is None:
        raise ValueError(f"not a 6-digit hex color: {color!r}")
    return f"#{match.group(1).lower()}"


def hex_to_rgb(color: str) -> tuple[float, float, float]:
    """Convert a hex color to RGB components scaled to [0, 1]."""
    digits = normalize_hex(color)[1:]
    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def saturation(color: str) -> float:
    """HSV saturation of a hex color: (max - min) / max, 0 for black."""
    components = hex_to_rgb(color)
    maximum = max(components)
    minimum = min(components)
    if maximum == 0:
        return 0.0
    return (maximum - minimum) / maximum


def with_alpha(color: str, alpha: float) -> str:
    """Append an alpha channel to a hex color, e.g. '#3b82f6' -> '#3b82f626'."""
    alpha = min(1.0, max(0.0, alpha))
    return f"{normalize_hex(color)}{round(alpha * 255):02x}"

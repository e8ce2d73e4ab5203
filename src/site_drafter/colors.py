"""WCAG 2.x contrast arithmetic for brand colours."""

from __future__ import annotations

import string

RGB = tuple[int, int, int]

# slate-900; malformed input is scored against this instead of raising
FALLBACK_RGB: RGB = (15, 23, 42)

_HEX = frozenset(string.hexdigits)


def hex_to_rgb(value: str) -> RGB:
    """Parse ``#rgb`` / ``#rrggbb`` (hash optional) into 8-bit channels."""
    digits = (value or "").replace("#", "").strip()
    if len(digits) not in (3, 6) or not set(digits) <= _HEX:
        return FALLBACK_RGB
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    r, g, b = (_linearize(channel) for channel in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: str, second: str) -> float:
    """Contrast ratio between two hex colours, in the range 1.0..21.0.

    The lighter colour is always the numerator, so argument order does not
    matter. The result is rounded to 6 decimals to absorb float noise in the
    luminance weights (black on white is exactly 21.0).
    """
    l1 = relative_luminance(hex_to_rgb(first))
    l2 = relative_luminance(hex_to_rgb(second))
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    return round((lighter + 0.05) / (darker + 0.05), 6)


__all__ = ["FALLBACK_RGB", "contrast_ratio", "hex_to_rgb", "relative_luminance"]

"""
Copyright 2026 mirror-box-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from typing import Tuple

from .constants import (
    MIN_VIRTUAL_OPACITY,
    OPACITY_STEP_PER_DEPTH,
    VIEWER_FILL,
    VIRTUAL_FILL_LIGHTEN_AMOUNT,
    VIRTUAL_VIEWER_FILL_FALLBACK,
    VIRTUAL_VIEWER_FILL_FOR_DEFAULT,
)


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert a '#rrggbb' or '#rgb' color string to an RGB tuple.

    Args:
        hex_color (str): CSS hex color

    Returns:
        tuple: (r, g, b) values from 0-255

    Raises:
        ValueError: If the string is not a hex color.
    """
    if not isinstance(hex_color, str) or not hex_color.startswith('#'):
        raise ValueError(f"Expected a hex color like '#ff6b6b', got {hex_color!r}")
    digits = hex_color[1:]
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Expected a hex color like '#ff6b6b', got {hex_color!r}")
    value = int(digits, 16)
    return ((value >> 16) & 255, (value >> 8) & 255, value & 255)


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    """Convert an RGB tuple to a '#rrggbb' string."""
    return '#' + ''.join(f'{channel:02x}' for channel in rgb)


def lighten_color(hex_color: str, amount: int = VIRTUAL_FILL_LIGHTEN_AMOUNT) -> str:
    """
    Lighten a hex color by adding `amount` to every channel (clamped at 255).

    Args:
        hex_color (str): CSS hex color
        amount (int): Value added to each of r, g and b

    Returns:
        str: The lightened '#rrggbb' color
    """
    r, g, b = hex_to_rgb(hex_color)
    return rgb_to_hex(tuple(min(255, channel + amount) for channel in (r, g, b)))


def virtual_viewer_fill(original_fill: str) -> str:
    """Fill used for every virtual copy of a viewer with the given fill."""
    if original_fill == VIEWER_FILL:
        return VIRTUAL_VIEWER_FILL_FOR_DEFAULT
    return VIRTUAL_VIEWER_FILL_FALLBACK


def depth_to_opacity(depth: int) -> float:
    """
    Opacity of a virtual entity at the given reflection depth.

    Fades by OPACITY_STEP_PER_DEPTH per level and never drops below
    MIN_VIRTUAL_OPACITY, so it is non-increasing in depth.
    """
    return max(MIN_VIRTUAL_OPACITY, 1 - depth * OPACITY_STEP_PER_DEPTH)

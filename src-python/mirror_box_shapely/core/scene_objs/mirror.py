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

from typing import Dict, Any, Optional, TYPE_CHECKING

from shapely.geometry import LineString

from .base_scene_obj import BaseSceneObj
from ..constants import MIRROR_STROKE, MIRROR_STROKE_WIDTH
from ..geometry import geometry

if TYPE_CHECKING:
    from ..scene import Scene

_COORDINATE_KEYS = ('x1', 'y1', 'x2', 'y2')


class UnsupportedMirrorOrientation(ValueError):
    """Raised for a mirror that is neither horizontal nor vertical."""


class Mirror(BaseSceneObj):
    """
    Axis-aligned mirror segment forming part of the box boundary.

    Exactly one of `x1 == x2` (vertical) or `y1 == y2` (horizontal) holds.
    This is checked on construction and again whenever a single coordinate
    is reassigned, so the reflection engine can rely on it without
    re-validating inside the recursion.

    Mirrors are compared by identity. Two mirrors with identical coordinates
    are still distinct mirrors for the purpose of reflection chains.

    Attributes:
        x1, y1 (float): First endpoint
        x2, y2 (float): Second endpoint
        stroke (str): Display stroke color
        stroke_width (float): Display stroke width
    """

    type = 'Mirror'

    serializable_defaults = {
        'x1': None,
        'y1': None,
        'x2': None,
        'y2': None,
        'stroke': MIRROR_STROKE,
        'stroke_width': MIRROR_STROKE_WIDTH,
    }

    def __init__(self, scene: Optional['Scene'] = None,
                 json_obj: Optional[Dict[str, Any]] = None, **kwargs) -> None:
        """
        Initialize a mirror.

        Args:
            scene: The scene containing this mirror (optional)
            json_obj: Optional JSON serialization data
            **kwargs: Property overrides, e.g. x1=100, y1=0, x2=100, y2=600

        Raises:
            ValueError: If a coordinate is missing.
            UnsupportedMirrorOrientation: If the segment is not axis-aligned
                or has zero length.
        """
        merged = dict(json_obj or {})
        merged.update(kwargs)
        super().__init__(scene, merged)

        for key in _COORDINATE_KEYS:
            if getattr(self, key) is None:
                raise ValueError(f"Mirror requires coordinate '{key}'")
        self._check_orientation(self.x1, self.y1, self.x2, self.y2)
        self._frozen = True

    @staticmethod
    def _check_orientation(x1: float, y1: float, x2: float, y2: float) -> None:
        if (x1 == x2) == (y1 == y2):
            raise UnsupportedMirrorOrientation(
                f"Mirror ({x1}, {y1})-({x2}, {y2}) must be "
                f"either horizontal or vertical with non-zero length"
            )

    def __setattr__(self, name: str, value: Any) -> None:
        # Single-coordinate edits are checked; use move() to shift a mirror
        if name in _COORDINATE_KEYS and getattr(self, '_frozen', False):
            coords = {key: getattr(self, key) for key in _COORDINATE_KEYS}
            coords[name] = value
            self._check_orientation(coords['x1'], coords['y1'], coords['x2'], coords['y2'])
        super().__setattr__(name, value)

    def move(self, diff_x: float, diff_y: float) -> bool:
        """
        Translate both endpoints by the given displacement.

        Returns:
            True, indicating the movement was successful.
        """
        self._frozen = False
        try:
            self.x1 = self.x1 + diff_x
            self.y1 = self.y1 + diff_y
            self.x2 = self.x2 + diff_x
            self.y2 = self.y2 + diff_y
        finally:
            self._frozen = True
        return True

    def is_horizontal(self) -> bool:
        """True if the mirror lies on a line y = const."""
        return self.y1 == self.y2

    def is_vertical(self) -> bool:
        """True if the mirror lies on a line x = const."""
        return self.x1 == self.x2

    @property
    def line_coordinate(self) -> float:
        """The x of a vertical mirror's line, or the y of a horizontal one."""
        return self.x1 if self.is_vertical() else self.y1

    def get_length(self) -> float:
        """Length of the mirror segment."""
        return geometry.distance({'x': self.x1, 'y': self.y1},
                                 {'x': self.x2, 'y': self.y2})

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.x1, self.y1), (self.x2, self.y2)])

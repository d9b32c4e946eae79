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

from .base_scene_obj import BaseSceneObj
from ..constants import (
    VIEWER_BUFFER_RESOLUTION,
    VIEWER_FILL,
    VIEWER_RADIUS,
    VIEWER_STROKE,
    VIEWER_STROKE_WIDTH,
)
from ..geometry import geometry

if TYPE_CHECKING:
    from ..scene import Scene


class Viewer(BaseSceneObj):
    """
    The observer inside the mirror box, drawn as a circle.

    Attributes:
        x, y (float): Center of the viewer
        radius (float): Radius of the viewer circle
        fill (str): Fill color
        stroke (str): Stroke color
        stroke_width (float): Stroke width
    """

    type = 'Viewer'

    serializable_defaults = {
        'x': 0.0,
        'y': 0.0,
        'radius': VIEWER_RADIUS,
        'fill': VIEWER_FILL,
        'stroke': VIEWER_STROKE,
        'stroke_width': VIEWER_STROKE_WIDTH,
    }

    def __init__(self, scene: Optional['Scene'] = None,
                 json_obj: Optional[Dict[str, Any]] = None, **kwargs) -> None:
        merged = dict(json_obj or {})
        merged.update(kwargs)
        super().__init__(scene, merged)

        if self.radius <= 0:
            raise ValueError(f"Viewer radius must be > 0, got {self.radius}")

    def get_position(self) -> Dict[str, float]:
        """Center of the viewer as a point dict."""
        return {'x': self.x, 'y': self.y}

    def move(self, diff_x: float, diff_y: float) -> bool:
        self.x = self.x + diff_x
        self.y = self.y + diff_y
        return True

    def to_shapely(self):
        """Shapely polygon approximating the viewer circle."""
        return geometry.point(self.x, self.y).to_shapely().buffer(
            self.radius, VIEWER_BUFFER_RESOLUTION)

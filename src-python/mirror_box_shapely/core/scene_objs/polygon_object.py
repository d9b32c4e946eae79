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

from shapely.geometry import Polygon

from .base_scene_obj import BaseSceneObj
from ..colors import hex_to_rgb
from ..constants import POLYGON_FILL, POLYGON_STROKE, POLYGON_STROKE_WIDTH
from ..geometry import geometry

if TYPE_CHECKING:
    from ..scene import Scene


class PolygonObject(BaseSceneObj):
    """
    A real polygonal object placed inside the mirror box.

    Vertex order defines the edges. The reflection engine only reads the
    current vertices; moving the object is done through `move`.

    Attributes:
        vertices (list): Ordered list of {'x': ..., 'y': ...} dicts (at least 3)
        fill (str): Fill color as '#rrggbb'
        stroke (str): Stroke color
        stroke_width (float): Stroke width
    """

    type = 'PolygonObject'

    serializable_defaults = {
        'vertices': [],
        'fill': POLYGON_FILL,
        'stroke': POLYGON_STROKE,
        'stroke_width': POLYGON_STROKE_WIDTH,
    }

    def __init__(self, scene: Optional['Scene'] = None,
                 json_obj: Optional[Dict[str, Any]] = None, **kwargs) -> None:
        """
        Initialize a polygon object.

        Args:
            scene: The scene containing this object (optional)
            json_obj: Optional JSON serialization data
            **kwargs: Property overrides, e.g. vertices=[...], fill='#4ecdc4'

        Raises:
            ValueError: If fewer than 3 vertices are given, or if fill is not
                a hex color (virtual copies derive their fill from it).
        """
        merged = dict(json_obj or {})
        merged.update(kwargs)
        super().__init__(scene, merged)

        if len(self.vertices) < 3:
            raise ValueError(
                f"PolygonObject needs at least 3 vertices, got {len(self.vertices)}"
            )
        hex_to_rgb(self.fill)
        self.vertices = [{'x': v['x'], 'y': v['y']} for v in self.vertices]

    def move(self, diff_x: float, diff_y: float) -> bool:
        """
        Translate every vertex by the given displacement.

        Args:
            diff_x: The x-coordinate displacement.
            diff_y: The y-coordinate displacement.

        Returns:
            True, indicating the movement was successful.
        """
        self.vertices = [
            {'x': v['x'] + diff_x, 'y': v['y'] + diff_y} for v in self.vertices
        ]
        return True

    def get_center(self) -> Dict[str, float]:
        """Average of the vertices."""
        return geometry.vertex_average(self.vertices)

    def to_shapely(self) -> Polygon:
        """Convert to Shapely Polygon."""
        return geometry.polygon_to_shapely(self.vertices)

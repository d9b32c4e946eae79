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

from typing import Dict, List, Sequence, Tuple, TYPE_CHECKING

from shapely.geometry import Polygon

from ..colors import depth_to_opacity, lighten_color
from ..constants import VIRTUAL_STROKE, VIRTUAL_STROKE_DASHARRAY, VIRTUAL_STROKE_WIDTH
from ..geometry import geometry

if TYPE_CHECKING:
    from .mirror import Mirror
    from .polygon_object import PolygonObject


class VirtualObject:
    """
    Virtual image of a real polygon produced by one reflection chain.

    A virtual object is a disposable projection: the reflection engine builds
    a fresh set on every pass and never mutates one in place. It refers back
    to its real object by uuid only.

    Attributes:
        original_uuid (str): uuid of the real PolygonObject
        reflection_chain (tuple): Mirrors applied, in order
        mirror_indices (tuple): Position of each chain mirror in the scene's mirror list
        depth (int): Length of the reflection chain
        vertices (list): Reflected vertices, same order as the original's
        fill (str): Lightened version of the original fill
        opacity (float): max(0.3, 1 - depth * 0.2)
        stroke, stroke_width, stroke_dasharray: Dashed outline styling
        is_visible (bool): Rendering flag, owned by the caller
    """

    def __init__(self, original_object: 'PolygonObject',
                 reflection_chain: Sequence['Mirror'],
                 vertices: List[Dict[str, float]],
                 mirror_indices: Sequence[int] = ()) -> None:
        self.original_uuid: str = original_object.uuid
        self.reflection_chain: Tuple['Mirror', ...] = tuple(reflection_chain)
        self.mirror_indices: Tuple[int, ...] = tuple(mirror_indices)
        self.depth: int = len(self.reflection_chain)
        self.vertices: List[Dict[str, float]] = vertices

        self.fill: str = lighten_color(original_object.fill)
        self.stroke: str = VIRTUAL_STROKE
        self.stroke_width: float = VIRTUAL_STROKE_WIDTH
        self.stroke_dasharray: str = VIRTUAL_STROKE_DASHARRAY
        self.opacity: float = depth_to_opacity(self.depth)

        self.is_visible: bool = True

    def set_visible(self, visible: bool) -> None:
        self.is_visible = visible

    def get_center(self) -> Dict[str, float]:
        """Average of the vertices."""
        return geometry.vertex_average(self.vertices)

    def to_shapely(self) -> Polygon:
        """Convert to Shapely Polygon."""
        return geometry.polygon_to_shapely(self.vertices)

    def __repr__(self) -> str:
        return (f"<VirtualObject of {self.original_uuid[:8]} "
                f"depth={self.depth} chain={list(self.mirror_indices)}>")

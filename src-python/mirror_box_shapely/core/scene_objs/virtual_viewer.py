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

from typing import Dict, Sequence, Tuple, TYPE_CHECKING

from ..colors import depth_to_opacity, virtual_viewer_fill
from ..constants import (
    VIEWER_BUFFER_RESOLUTION,
    VIRTUAL_STROKE,
    VIRTUAL_STROKE_DASHARRAY,
    VIRTUAL_STROKE_WIDTH,
)
from ..geometry import geometry

if TYPE_CHECKING:
    from .mirror import Mirror
    from .viewer import Viewer


class VirtualViewer:
    """
    Virtual image of the viewer produced by one reflection chain.

    Same contract as VirtualObject, specialized to a circle.
    """

    def __init__(self, original_viewer: 'Viewer',
                 reflection_chain: Sequence['Mirror'],
                 position: Dict[str, float],
                 mirror_indices: Sequence[int] = ()) -> None:
        self.original_uuid: str = original_viewer.uuid
        self.reflection_chain: Tuple['Mirror', ...] = tuple(reflection_chain)
        self.mirror_indices: Tuple[int, ...] = tuple(mirror_indices)
        self.depth: int = len(self.reflection_chain)

        self.x: float = position['x']
        self.y: float = position['y']
        self.radius: float = original_viewer.radius

        self.fill: str = virtual_viewer_fill(original_viewer.fill)
        self.stroke: str = VIRTUAL_STROKE
        self.stroke_width: float = VIRTUAL_STROKE_WIDTH
        self.stroke_dasharray: str = VIRTUAL_STROKE_DASHARRAY
        self.opacity: float = depth_to_opacity(self.depth)

        self.is_visible: bool = True

    def get_position(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}

    def set_visible(self, visible: bool) -> None:
        self.is_visible = visible

    def to_shapely(self):
        """Shapely polygon approximating the virtual viewer circle."""
        return geometry.point(self.x, self.y).to_shapely().buffer(
            self.radius, VIEWER_BUFFER_RESOLUTION)

    def __repr__(self) -> str:
        return (f"<VirtualViewer of {self.original_uuid[:8]} "
                f"depth={self.depth} at ({self.x}, {self.y})>")

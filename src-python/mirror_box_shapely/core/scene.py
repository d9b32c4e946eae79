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
import uuid as uuid_module
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_MAX_DEPTH
from .reflection_engine import validate_max_depth
from .scene_objs.mirror import Mirror
from .scene_objs.polygon_object import PolygonObject
from .scene_objs.viewer import Viewer


class Scene:
    """
    Container for the mirrors, real objects and viewer of a mirror box, plus
    the reflection settings.

    The scene owns the real entities. The reflection engine only reads them;
    virtual entities are produced by the Simulator and are not stored here.

    Attributes:
        mirrors (list): Mirrors, in the order the engine visits them
        objects (list): Real polygon objects
        viewer (Viewer or None): The observer, if any
        max_depth (int): Maximum reflection depth (validated, >= 0)
        error (str or None): Error message if loading or simulation failed
        warning (str or None): Warning message from the last simulation
        name (str or None): Optional name for the scene (used in exports)
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """Initialize an empty scene."""
        self.mirrors: List[Mirror] = []
        self.objects: List[PolygonObject] = []
        self.viewer: Optional[Viewer] = None
        self._max_depth = validate_max_depth(max_depth)
        self.error: Optional[str] = None
        self.warning: Optional[str] = None
        self.name: Optional[str] = None
        self._uuid: str = str(uuid_module.uuid4())

    @property
    def max_depth(self) -> int:
        """Get the maximum reflection depth."""
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        """
        Set the maximum reflection depth.

        Raises:
            ValueError: If value is not an integer >= 0. Negative values are
                rejected, not clamped.
        """
        self._max_depth = validate_max_depth(value)

    @property
    def uuid(self) -> str:
        """Unique identifier of this scene instance."""
        return self._uuid

    def get_display_name(self) -> str:
        """
        Returns the user-defined name if set, otherwise "Scene" with a short
        UUID suffix.
        """
        if self.name:
            return self.name
        return f"Scene_{self._uuid[:8]}"

    # =========================================================================
    # Entity management
    # =========================================================================

    def add_mirror(self, mirror: Mirror) -> Mirror:
        mirror.scene = self
        self.mirrors.append(mirror)
        return mirror

    def remove_mirror(self, mirror: Mirror) -> None:
        """Remove a mirror (by identity) if present."""
        self.mirrors = [m for m in self.mirrors if m is not mirror]

    def add_object(self, obj: PolygonObject) -> PolygonObject:
        obj.scene = self
        self.objects.append(obj)
        return obj

    def remove_object(self, obj: PolygonObject) -> None:
        """Remove a real object (by identity) if present."""
        self.objects = [o for o in self.objects if o is not obj]

    def set_viewer(self, viewer: Optional[Viewer]) -> None:
        """Place the viewer, or remove it with None."""
        if viewer is not None:
            viewer.scene = self
        self.viewer = viewer

    def get_object_by_uuid(self, uuid: str):
        """Find a real object or the viewer by uuid, or None."""
        for obj in self.objects:
            if obj.uuid == uuid:
                return obj
        if self.viewer is not None and self.viewer.uuid == uuid:
            return self.viewer
        return None

    def clear(self) -> None:
        """Remove all mirrors, objects and the viewer."""
        self.mirrors = []
        self.objects = []
        self.viewer = None
        self.error = None
        self.warning = None

    # =========================================================================
    # Scene setup helpers
    # =========================================================================

    def create_mirror_box(self, left: float, top: float, right: float, bottom: float) -> List[Mirror]:
        """
        Add four mirrors forming a closed rectangular box.

        Mirrors are added in the order top, right, bottom, left.

        Args:
            left, top, right, bottom: Box edges

        Returns:
            The four new mirrors.
        """
        if left >= right or top == bottom:
            raise ValueError(
                f"Invalid mirror box: left={left}, right={right}, top={top}, bottom={bottom}"
            )
        box = [
            Mirror(x1=left, y1=top, x2=right, y2=top),
            Mirror(x1=right, y1=top, x2=right, y2=bottom),
            Mirror(x1=right, y1=bottom, x2=left, y2=bottom),
            Mirror(x1=left, y1=bottom, x2=left, y2=top),
        ]
        for mirror, label in zip(box, ('Top', 'Right', 'Bottom', 'Left')):
            mirror.name = f"{label} Mirror"
            self.add_mirror(mirror)
        return box

    def create_sample_objects(self) -> List[PolygonObject]:
        """Add the demo triangle and square."""
        triangle = PolygonObject(
            vertices=[{'x': 150, 'y': 300}, {'x': 250, 'y': 300}, {'x': 200, 'y': 200}],
            fill='#ff6b6b',
        )
        triangle.name = 'Triangle'
        square = PolygonObject(
            vertices=[{'x': 100, 'y': 450}, {'x': 180, 'y': 450},
                      {'x': 180, 'y': 530}, {'x': 100, 'y': 530}],
            fill='#4ecdc4',
        )
        square.name = 'Square'
        self.add_object(triangle)
        self.add_object(square)
        return [triangle, square]

    # =========================================================================
    # Serialization
    # =========================================================================

    def serialize(self) -> Dict[str, Any]:
        """JSON-compatible dict of the scene."""
        return {
            'name': self.name,
            'max_depth': self._max_depth,
            'mirrors': [m.serialize() for m in self.mirrors],
            'objects': [o.serialize() for o in self.objects],
            'viewer': self.viewer.serialize() if self.viewer is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Scene':
        """
        Rebuild a scene from `serialize()` output.

        Raises:
            ValueError: On invalid depth or geometry (including
                UnsupportedMirrorOrientation for angled mirrors).
        """
        scene = cls(max_depth=data.get('max_depth', DEFAULT_MAX_DEPTH))
        scene.name = data.get('name')
        for mirror_data in data.get('mirrors', []):
            scene.add_mirror(Mirror(scene, mirror_data))
        for obj_data in data.get('objects', []):
            scene.add_object(PolygonObject(scene, obj_data))
        if data.get('viewer') is not None:
            scene.set_viewer(Viewer(scene, data['viewer']))
        return scene

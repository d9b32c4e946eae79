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

import json
import copy
import uuid as uuid_module
from typing import Optional, Dict, Any


class BaseSceneObj:
    """
    Base class for the real entities of a mirror box scene (mirrors, polygon
    objects and the viewer).

    This class provides:
    - Serialization/deserialization driven by `serializable_defaults`
    - Object identification (uuid and optional human-readable name)
    - A default `move` that subclasses override
    """

    type: str = ''
    """The type of the object."""

    serializable_defaults: Dict[str, Any] = {}
    """
    The default values of the properties of the object which are to be serialized.
    If some property is default, it will not be serialized and will be
    deserialized to the default value.

    Points are stored as dictionaries {'x': ..., 'y': ...}, not as Point instances.
    """

    def __init__(self, scene, json_obj: Optional[Dict[str, Any]] = None):
        """
        Initialize the base scene object.

        Args:
            scene: The scene the object belongs to (may be None for free-standing objects).
            json_obj: The JSON object to be deserialized, if any.
        """
        self.scene = scene

        self._uuid: str = str(uuid_module.uuid4())
        """Auto-generated unique identifier for this object instance."""

        self._name: Optional[str] = None
        """Optional human-readable name for the object."""

        serializable_defaults = self.__class__.serializable_defaults
        if json_obj:
            known_keys = ['type', 'name'] + list(serializable_defaults.keys())
            for key in json_obj:
                if key not in known_keys and scene is not None and hasattr(scene, 'error'):
                    scene.error = (
                        f"Unknown object key '{key}' for type '{self.__class__.type}'"
                    )
            for prop_name, default_value in serializable_defaults.items():
                if prop_name in json_obj:
                    setattr(self, prop_name, copy.deepcopy(json_obj[prop_name]))
                else:
                    setattr(self, prop_name, copy.deepcopy(default_value))
            self._name = json_obj.get('name')
        else:
            for prop_name, default_value in serializable_defaults.items():
                setattr(self, prop_name, copy.deepcopy(default_value))

    def serialize(self) -> Dict[str, Any]:
        """
        Serializes the object to a JSON-compatible dictionary.

        Returns:
            The serialized dictionary object.
        """
        json_obj = {'type': self.__class__.type}
        for prop_name, default_value in self.__class__.serializable_defaults.items():
            current_value = getattr(self, prop_name)
            if json.dumps(current_value, sort_keys=True) != json.dumps(default_value, sort_keys=True):
                json_obj[prop_name] = copy.deepcopy(current_value)
        if self._name:
            json_obj['name'] = self._name
        return json_obj

    def move(self, diff_x: float, diff_y: float) -> bool:
        """
        Move the object by the given displacement.

        Args:
            diff_x: The x-coordinate displacement.
            diff_y: The y-coordinate displacement.

        Returns:
            True if the movement was applied.
        """
        return False

    @property
    def uuid(self) -> str:
        """
        Get the unique identifier for this object.

        The UUID is auto-generated when the object is created and remains
        constant for the lifetime of the object instance.
        """
        return self._uuid

    @property
    def name(self) -> Optional[str]:
        """Get the human-readable name of the object, or None."""
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = value

    def get_display_name(self) -> str:
        """
        Get a display name for the object.

        Returns the user-defined name if set, otherwise returns a combination
        of the object type and a short UUID suffix for identification.

        Returns:
            A string suitable for display (e.g., "Left Wall" or "Mirror_a1b2c3d4").
        """
        if self._name:
            return self._name
        type_name = self.__class__.type or self.__class__.__name__
        return f"{type_name}_{self._uuid[:8]}"

    def __repr__(self) -> str:
        display = self.get_display_name()
        type_name = self.__class__.type or self.__class__.__name__
        return f"<{type_name} '{display}'>"

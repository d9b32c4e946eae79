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

from .base_scene_obj import BaseSceneObj
from .mirror import Mirror, UnsupportedMirrorOrientation
from .polygon_object import PolygonObject
from .viewer import Viewer
from .virtual_object import VirtualObject
from .virtual_viewer import VirtualViewer

__all__ = ['BaseSceneObj', 'Mirror', 'UnsupportedMirrorOrientation', 'PolygonObject', 'Viewer', 'VirtualObject', 'VirtualViewer']

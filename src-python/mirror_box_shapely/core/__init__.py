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

from .geometry import geometry, Point, Geometry
from . import constants
from .colors import lighten_color, virtual_viewer_fill, depth_to_opacity
from .scene_objs import (
    Mirror, UnsupportedMirrorOrientation, PolygonObject, Viewer,
    VirtualObject, VirtualViewer,
)
from .reflection_engine import (
    ReflectionEngine, ReflectionResult,
    reflect_point, reflect_polygon, reflect_through_chain,
    mirror_reflection_matrix, chain_affine_matrix, apply_affine, expected_chain_count,
    generate_virtual_objects, generate_virtual_viewers,
    calculate_all_reflections, calculate_all_reflections_with_viewer,
    update_virtual_objects, update_virtual_viewers,
)
from .reflection_lineage import ReflectionLineage
from .scene import Scene
from .simulator import Simulator
from .svg_renderer import SVGRenderer

__all__ = [
    'geometry', 'Point', 'Geometry',
    'constants',
    'lighten_color', 'virtual_viewer_fill', 'depth_to_opacity',
    'Mirror', 'UnsupportedMirrorOrientation', 'PolygonObject', 'Viewer',
    'VirtualObject', 'VirtualViewer',
    'ReflectionEngine', 'ReflectionResult',
    'reflect_point', 'reflect_polygon', 'reflect_through_chain',
    'mirror_reflection_matrix', 'chain_affine_matrix', 'apply_affine', 'expected_chain_count',
    'generate_virtual_objects', 'generate_virtual_viewers',
    'calculate_all_reflections', 'calculate_all_reflections_with_viewer',
    'update_virtual_objects', 'update_virtual_viewers',
    'ReflectionLineage',
    'Scene',
    'Simulator',
    'SVGRenderer',
]

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

"""
Reflection engine for a box of axis-aligned mirrors.

The engine enumerates every reflection chain (ordered sequence of mirrors,
never the same mirror twice in a row) up to a depth bound, and materializes
one virtual entity per chain. Geometry is folded forward through the chain:
the depth-2 image for chain [A, B] is reflect(reflect(original, A), B).

Cost: with m mirrors the number of chains of length d is m * (m - 1)^(d - 1),
so the output grows exponentially with depth. Callers bound it through
`max_depth` (1 or 2 for interactive use); there is no cancellation.

All functions are pure and synchronous. Virtual entities are rebuilt on
every call and never mutated in place.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, TypeVar, TYPE_CHECKING

import numpy as np

from .geometry import geometry
from .scene_objs.mirror import UnsupportedMirrorOrientation
from .scene_objs.virtual_object import VirtualObject
from .scene_objs.virtual_viewer import VirtualViewer

if TYPE_CHECKING:
    from .scene_objs.mirror import Mirror
    from .scene_objs.polygon_object import PolygonObject
    from .scene_objs.viewer import Viewer

logger = logging.getLogger(__name__)

Point = Dict[str, float]
G = TypeVar('G')
E = TypeVar('E')


@dataclass
class ReflectionResult:
    """
    Output of one reflection pass over a scene.

    Attributes:
        virtual_objects: Virtual polygons, object-major then pre-order per object
        virtual_viewers: Virtual viewers, pre-order (empty when there is no viewer)
    """
    virtual_objects: List[VirtualObject] = field(default_factory=list)
    virtual_viewers: List[VirtualViewer] = field(default_factory=list)

    @property
    def entity_count(self) -> int:
        return len(self.virtual_objects) + len(self.virtual_viewers)


def validate_max_depth(max_depth: int) -> int:
    """
    Check a reflection depth bound.

    Raises:
        ValueError: If max_depth is not an integer or is negative. It is
            never clamped.
    """
    if isinstance(max_depth, bool) or not isinstance(max_depth, (int, np.integer)):
        raise ValueError(f"max_depth must be an integer, got {max_depth!r}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    return int(max_depth)


# =============================================================================
# Reflection primitives
# =============================================================================

def reflect_point(point: Point, mirror: 'Mirror') -> Point:
    """
    Reflect a point across the line of an orthogonal mirror.

    Args:
        point: {'x': ..., 'y': ...}
        mirror: Mirror (or any object with x1, y1, is_vertical, is_horizontal)

    Returns:
        A new point dict; the input is not modified.

    Raises:
        UnsupportedMirrorOrientation: If the mirror is neither vertical nor
            horizontal. Returning the point unchanged would silently shorten
            the chain, so this always raises.
    """
    if mirror.is_vertical():
        return {'x': 2 * mirror.x1 - point['x'], 'y': point['y']}
    if mirror.is_horizontal():
        return {'x': point['x'], 'y': 2 * mirror.y1 - point['y']}
    raise UnsupportedMirrorOrientation(
        f"Cannot reflect across non-orthogonal mirror "
        f"({mirror.x1}, {mirror.y1})-({mirror.x2}, {mirror.y2})"
    )


def reflect_polygon(vertices: Sequence[Point], mirror: 'Mirror') -> List[Point]:
    """
    Reflect every vertex of a polygon, preserving vertex order.

    Order (and therefore edge connectivity) is kept; winding flips, which
    does not matter for drawing the boundary.
    """
    return [reflect_point(v, mirror) for v in vertices]


def reflect_through_chain(vertices: Sequence[Point], chain: Sequence['Mirror']) -> List[Point]:
    """
    Apply the reflections of a chain in order, one step at a time.

    Args:
        vertices: Starting vertices
        chain: Mirrors to reflect across, first to last

    Returns:
        The final reflected vertices
    """
    current = [{'x': v['x'], 'y': v['y']} for v in vertices]
    for mirror in chain:
        current = reflect_polygon(current, mirror)
    return current


# =============================================================================
# Affine form of a chain
# =============================================================================

def mirror_reflection_matrix(mirror: 'Mirror') -> np.ndarray:
    """
    3x3 homogeneous matrix of the reflection across a mirror's line.

    Raises:
        UnsupportedMirrorOrientation: For non-orthogonal mirrors.
    """
    if mirror.is_vertical():
        return np.array([[-1.0, 0.0, 2.0 * mirror.x1],
                         [0.0, 1.0, 0.0],
                         [0.0, 0.0, 1.0]])
    if mirror.is_horizontal():
        return np.array([[1.0, 0.0, 0.0],
                         [0.0, -1.0, 2.0 * mirror.y1],
                         [0.0, 0.0, 1.0]])
    raise UnsupportedMirrorOrientation(
        f"Cannot build a reflection matrix for non-orthogonal mirror "
        f"({mirror.x1}, {mirror.y1})-({mirror.x2}, {mirror.y2})"
    )


def chain_affine_matrix(chain: Sequence['Mirror']) -> np.ndarray:
    """
    Compose the reflections of a chain into a single affine matrix.

    The first mirror of the chain is applied first, i.e. for [A, B] the
    result is M_B @ M_A. An empty chain gives the identity.
    """
    matrix = np.eye(3)
    for mirror in chain:
        matrix = mirror_reflection_matrix(mirror) @ matrix
    return matrix


def apply_affine(matrix: np.ndarray, vertices: Sequence[Point]) -> List[Point]:
    """Apply a 3x3 homogeneous matrix to a list of point dicts."""
    arr = geometry.vertices_to_array(vertices)
    return geometry.array_to_vertices(arr @ matrix.T)


def expected_chain_count(mirror_count: int, max_depth: int) -> int:
    """
    Number of chains the search produces for one real entity.

    Sum over d = 1..max_depth of m * (m - 1)^(d - 1).
    """
    max_depth = validate_max_depth(max_depth)
    if mirror_count <= 0:
        return 0
    return sum(mirror_count * (mirror_count - 1) ** (d - 1) for d in range(1, max_depth + 1))


# =============================================================================
# Chain-tree search
# =============================================================================

def _expand_chains(
    geometry_value: G,
    mirrors: Sequence['Mirror'],
    max_depth: int,
    reflect: Callable[[G, 'Mirror'], G],
    emit: Callable[[List['Mirror'], List[int], G], E],
) -> List[E]:
    """
    Depth-first enumeration of all legal reflection chains.

    For every node the mirrors are tried in list order. A mirror is skipped
    when it is the same instance as the last mirror of the chain. Each
    generated node is emitted before its children, so the output is
    pre-order and stable for a given input.

    Args:
        geometry_value: Geometry of the real entity
        mirrors: Mirrors of the scene
        max_depth: Maximum chain length
        reflect: Reflects the geometry across one mirror
        emit: Builds the output entity from (chain, indices, reflected geometry)

    Returns:
        Emitted entities for every chain of length 1..max_depth
    """
    results: List[E] = []

    def expand(current: G, depth: int, chain: List['Mirror'], indices: List[int]) -> None:
        if depth >= max_depth:
            return
        for index, mirror in enumerate(mirrors):
            if chain and chain[-1] is mirror:
                continue
            reflected = reflect(current, mirror)
            new_chain = chain + [mirror]
            new_indices = indices + [index]
            results.append(emit(new_chain, new_indices, reflected))
            expand(reflected, depth + 1, new_chain, new_indices)

    expand(geometry_value, 0, [], [])
    return results


def generate_virtual_objects(obj: 'PolygonObject', mirrors: Sequence['Mirror'],
                             max_depth: int = 2) -> List[VirtualObject]:
    """
    All virtual images of one real polygon, depths 1..max_depth.

    Args:
        obj: The real PolygonObject
        mirrors: Mirrors of the scene (list order fixes output order)
        max_depth: Maximum reflection depth (>= 0)

    Returns:
        One VirtualObject per chain, in pre-order. Empty when max_depth is 0
        or there are no mirrors.
    """
    max_depth = validate_max_depth(max_depth)
    virtual_objects = _expand_chains(
        list(obj.vertices), list(mirrors), max_depth,
        reflect_polygon,
        lambda chain, indices, vertices: VirtualObject(obj, chain, vertices, indices),
    )
    logger.debug("Generated %d virtual objects for %s (depth %d, %d mirrors)",
                 len(virtual_objects), obj.uuid[:8], max_depth, len(mirrors))
    return virtual_objects


def generate_virtual_viewers(viewer: Optional['Viewer'], mirrors: Sequence['Mirror'],
                             max_depth: int = 2) -> List[VirtualViewer]:
    """
    All virtual images of the viewer. A missing viewer gives an empty list.
    """
    max_depth = validate_max_depth(max_depth)
    if viewer is None:
        return []
    virtual_viewers = _expand_chains(
        viewer.get_position(), list(mirrors), max_depth,
        reflect_point,
        lambda chain, indices, position: VirtualViewer(viewer, chain, position, indices),
    )
    logger.debug("Generated %d virtual viewers (depth %d, %d mirrors)",
                 len(virtual_viewers), max_depth, len(mirrors))
    return virtual_viewers


def calculate_all_reflections(objects: Sequence['PolygonObject'], mirrors: Sequence['Mirror'],
                              max_depth: int = 2) -> List[VirtualObject]:
    """Virtual objects for every real object, object-major."""
    max_depth = validate_max_depth(max_depth)
    all_virtual_objects: List[VirtualObject] = []
    for obj in objects:
        all_virtual_objects.extend(generate_virtual_objects(obj, mirrors, max_depth))
    return all_virtual_objects


def calculate_all_reflections_with_viewer(objects: Sequence['PolygonObject'],
                                          viewer: Optional['Viewer'],
                                          mirrors: Sequence['Mirror'],
                                          max_depth: int = 2) -> ReflectionResult:
    """Virtual objects and virtual viewers for a whole scene."""
    return ReflectionResult(
        virtual_objects=calculate_all_reflections(objects, mirrors, max_depth),
        virtual_viewers=generate_virtual_viewers(viewer, mirrors, max_depth),
    )


# =============================================================================
# Updates after movement
# =============================================================================

def update_virtual_objects(virtual_objects: Sequence[VirtualObject],
                           objects: Sequence['PolygonObject']) -> List[VirtualObject]:
    """
    Recompute virtual objects from the current geometry of their originals.

    Each chain is replayed in full against the original's current vertices,
    so deep images stay correct. Virtual objects whose original is no longer
    in `objects` are dropped.

    Returns:
        New VirtualObject instances with the same chains.
    """
    by_uuid = {obj.uuid: obj for obj in objects}
    updated: List[VirtualObject] = []
    for vo in virtual_objects:
        original = by_uuid.get(vo.original_uuid)
        if original is None:
            continue
        vertices = reflect_through_chain(original.vertices, vo.reflection_chain)
        updated.append(VirtualObject(original, vo.reflection_chain, vertices, vo.mirror_indices))
    return updated


def update_virtual_viewers(virtual_viewers: Sequence[VirtualViewer],
                           viewer: Optional['Viewer']) -> List[VirtualViewer]:
    """Recompute virtual viewers from the viewer's current position."""
    if viewer is None:
        return []
    updated: List[VirtualViewer] = []
    for vv in virtual_viewers:
        if vv.original_uuid != viewer.uuid:
            continue
        position = reflect_through_chain([viewer.get_position()], vv.reflection_chain)[0]
        updated.append(VirtualViewer(viewer, vv.reflection_chain, position, vv.mirror_indices))
    return updated


class ReflectionEngine:
    """
    Namespace bundling the reflection functions, for callers that prefer
    `ReflectionEngine.reflect_point(...)` over module-level imports.
    """
    reflect_point = staticmethod(reflect_point)
    reflect_polygon = staticmethod(reflect_polygon)
    reflect_through_chain = staticmethod(reflect_through_chain)
    chain_affine_matrix = staticmethod(chain_affine_matrix)
    generate_virtual_objects = staticmethod(generate_virtual_objects)
    generate_virtual_viewers = staticmethod(generate_virtual_viewers)
    calculate_all_reflections = staticmethod(calculate_all_reflections)
    calculate_all_reflections_with_viewer = staticmethod(calculate_all_reflections_with_viewer)
    update_virtual_objects = staticmethod(update_virtual_objects)
    update_virtual_viewers = staticmethod(update_virtual_viewers)

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

import logging
from typing import Optional, TYPE_CHECKING

from .constants import MAX_VIRTUAL_ENTITIES_WARNING
from .reflection_engine import (
    ReflectionResult,
    calculate_all_reflections_with_viewer,
    expected_chain_count,
    validate_max_depth,
)

if TYPE_CHECKING:
    from .scene import Scene
    from .scene_objs.polygon_object import PolygonObject

logger = logging.getLogger(__name__)


class Simulator:
    """
    Runs the reflection engine over a scene.

    Every call to `run()` rebuilds all virtual entities from the current
    geometry of the real entities. Movement goes through `move_object` /
    `move_viewer`, which move the real entity and return a fresh result, so
    callers never hold on to stale virtual geometry.

    Attributes:
        scene (Scene): The scene to simulate
        max_virtual_entities (int): Expected entity count above which a
            scene warning is set (the run still completes)
        verbose (int): Verbosity level
        last_result (ReflectionResult or None): Result of the latest run
    """

    def __init__(self, scene: 'Scene', verbose: int = 0,
                 max_virtual_entities: int = MAX_VIRTUAL_ENTITIES_WARNING) -> None:
        """
        Initialize the simulator.

        Args:
            scene (Scene): The scene to simulate
            verbose (int): Verbosity level (default: 0)
                0 = silent
                1 = print a summary per run
                2 = also print every virtual entity
            max_virtual_entities (int): Warning threshold on the number of
                virtual entities (default: 5000)
        """
        self.scene: 'Scene' = scene
        self.max_virtual_entities: int = max_virtual_entities
        self.verbose: int = verbose
        self.last_result: Optional[ReflectionResult] = None

    def expected_entity_count(self) -> int:
        """Number of virtual entities the next run will produce."""
        per_entity = expected_chain_count(len(self.scene.mirrors), self.scene.max_depth)
        real_count = len(self.scene.objects) + (1 if self.scene.viewer is not None else 0)
        return per_entity * real_count

    def run(self) -> ReflectionResult:
        """
        Compute all virtual objects and virtual viewers of the scene.

        Returns:
            ReflectionResult with virtual_objects and virtual_viewers
        """
        self.scene.error = None
        self.scene.warning = None
        max_depth = validate_max_depth(self.scene.max_depth)

        expected = self.expected_entity_count()
        if expected > self.max_virtual_entities:
            self.scene.warning = (
                f"Reflection depth {max_depth} with {len(self.scene.mirrors)} mirrors "
                f"produces {expected} virtual entities (threshold {self.max_virtual_entities})"
            )
            logger.warning(self.scene.warning)

        result = calculate_all_reflections_with_viewer(
            self.scene.objects, self.scene.viewer, self.scene.mirrors, max_depth)
        self.last_result = result

        logger.debug("Scene %s: %d virtual objects, %d virtual viewers",
                     self.scene.get_display_name(),
                     len(result.virtual_objects), len(result.virtual_viewers))
        if self.verbose >= 1:
            print(f"[Simulator] {self.scene.get_display_name()}: depth={max_depth}, "
                  f"mirrors={len(self.scene.mirrors)}, "
                  f"virtual objects={len(result.virtual_objects)}, "
                  f"virtual viewers={len(result.virtual_viewers)}")
        if self.verbose >= 2:
            for entity in result.virtual_objects + result.virtual_viewers:
                print(f"  {entity!r} opacity={entity.opacity:.2f}")

        return result

    def move_object(self, obj: 'PolygonObject', diff_x: float, diff_y: float) -> ReflectionResult:
        """
        Move a real object and recompute the reflections.

        Raises:
            ValueError: If the object is not part of the scene.
        """
        if not any(o is obj for o in self.scene.objects):
            raise ValueError(f"{obj!r} is not in scene {self.scene.get_display_name()}")
        obj.move(diff_x, diff_y)
        return self.run()

    def move_viewer(self, diff_x: float, diff_y: float) -> ReflectionResult:
        """
        Move the viewer and recompute the reflections.

        Raises:
            ValueError: If the scene has no viewer.
        """
        if self.scene.viewer is None:
            raise ValueError(f"Scene {self.scene.get_display_name()} has no viewer")
        self.scene.viewer.move(diff_x, diff_y)
        return self.run()

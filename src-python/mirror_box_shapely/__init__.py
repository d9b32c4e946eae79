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

Mirror Box Shapely
==================

Recursive reflections inside a box of axis-aligned mirrors, using Shapely
for geometry interop.

Main modules:
- core: Reflection engine, scene objects, Scene, Simulator, SVG renderer
- analysis: Export utilities
- examples: Example scenes and demonstrations

Quick start:
    from mirror_box_shapely import Scene, Simulator
    scene = Scene(max_depth=2)
    scene.create_mirror_box(50, 50, 750, 750)
    scene.create_sample_objects()
    result = Simulator(scene).run()
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.scene import Scene
from .core.simulator import Simulator
from .core.reflection_engine import ReflectionEngine, ReflectionResult

__all__ = [
    'Scene',
    'Simulator',
    'ReflectionEngine',
    'ReflectionResult',
    '__version__',
]

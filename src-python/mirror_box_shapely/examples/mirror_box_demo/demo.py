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
Mirror Box Demo - Virtual images in a closed box of mirrors

Setup:
- A 300 x 300 mirror box centered in an 800 x 800 canvas
- The sample triangle and square inside the box
- A viewer near the bottom right corner
- Reflection depth 2

Expected behavior:
- 4 first-order images and 12 second-order images per real entity
- Second-order images are fainter (opacity 0.6) than first-order ones (0.8)
- After moving the triangle, every virtual triangle follows it
"""

import sys
import os
import logging

# Add parent directories to path to import mirror_box_shapely
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from mirror_box_shapely.core.scene import Scene
from mirror_box_shapely.core.scene_objs import Viewer
from mirror_box_shapely.core.simulator import Simulator
from mirror_box_shapely.core.svg_renderer import SVGRenderer
from mirror_box_shapely.core.reflection_lineage import ReflectionLineage
from mirror_box_shapely.analysis import save_virtual_entities_csv


def main():
    """Run the mirror box demonstration."""
    logging.basicConfig(level=logging.INFO)

    print("Mirror Box Demo - Virtual images in a closed box of mirrors")
    print("=" * 60)

    scene = Scene(max_depth=2)
    scene.name = "Mirror Box Demo"
    scene.create_mirror_box(left=250, top=250, right=550, bottom=550)

    triangle, square = scene.create_sample_objects()
    # Sample objects are laid out for a full-canvas box; bring them inside
    triangle.move(130, 80)
    square.move(230, -30)

    scene.set_viewer(Viewer(x=480, y=480, radius=12))

    simulator = Simulator(scene, verbose=1)
    result = simulator.run()

    lineage = ReflectionLineage()
    lineage.register_all(result.virtual_objects + result.virtual_viewers)
    stats = lineage.get_lineage_statistics()
    print(f"Depth counts: {stats['depth_counts']}")
    print(f"Average branching factor: {stats['branching_factor_avg']:.2f}")

    output_dir = os.path.dirname(os.path.abspath(__file__))

    renderer = SVGRenderer(width=800, height=800)
    renderer.draw_scene(scene, result, draw_labels=True)
    svg_file = os.path.join(output_dir, 'mirror_box.svg')
    renderer.save(svg_file)
    print(f"SVG saved to: {svg_file}")

    # Drag the triangle and recompute
    result = simulator.move_object(triangle, 40, 0)
    renderer = SVGRenderer(width=800, height=800)
    renderer.draw_scene(scene, result)
    moved_file = os.path.join(output_dir, 'mirror_box_moved.svg')
    renderer.save(moved_file)
    print(f"SVG after move saved to: {moved_file}")

    csv_file = save_virtual_entities_csv(result, output_dir)
    print(f"CSV exported to: {csv_file}")

    if scene.warning:
        print(f"Warning: {scene.warning}")


if __name__ == '__main__':
    main()

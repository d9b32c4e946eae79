"""
===============================================================================
LINEAGE, CSV EXPORT AND SVG RENDERING - Feature Verification Test
===============================================================================

Tests the consumers of a reflection result:

1. ReflectionLineage: parent/children/ancestors, statistics, NetworkX export
2. save_virtual_entities_csv: one row per chain
3. SVGRenderer: layers, virtual element metadata, visibility flag

USAGE
-----
    python -m mirror_box_shapely.developer_tests.test_lineage_export_render

===============================================================================
"""

import sys
import os
import csv
import tempfile

import pytest

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from mirror_box_shapely.core.scene import Scene
from mirror_box_shapely.core.simulator import Simulator
from mirror_box_shapely.core.scene_objs import Viewer
from mirror_box_shapely.core.reflection_lineage import ReflectionLineage
from mirror_box_shapely.core.svg_renderer import SVGRenderer
from mirror_box_shapely.analysis import save_virtual_entities_csv
from mirror_box_shapely.analysis.saving import CSV_COLUMNS


def build_test_scene(max_depth=2):
    """Mirror box with the sample objects and a viewer."""
    scene = Scene(max_depth=max_depth)
    scene.create_mirror_box(left=0, top=0, right=800, bottom=800)
    scene.create_sample_objects()
    scene.set_viewer(Viewer(x=600, y=600))
    return scene


def run_simulation(scene):
    return Simulator(scene).run()


# =============================================================================
# LINEAGE
# =============================================================================

def test_lineage_tree_structure():
    scene = build_test_scene(max_depth=3)
    result = run_simulation(scene)
    triangle = scene.objects[0]

    lineage = ReflectionLineage()
    lineage.register_all(result.virtual_objects)
    assert lineage.entity_count == 2 * 52

    deep = lineage.get(triangle.uuid, (0, 1, 2))
    assert deep is not None and deep.depth == 3
    parent = lineage.get_parent(deep)
    assert parent.mirror_indices == (0, 1)
    assert [a.mirror_indices for a in lineage.get_ancestors(deep)] == [(0,), (0, 1)]
    assert lineage.get_parent(lineage.get(triangle.uuid, (0,))) is None

    children = lineage.get_children(parent)
    assert [c.mirror_indices for c in children] == [(0, 1, 0), (0, 1, 2), (0, 1, 3)]


def test_lineage_roots_and_leaves():
    scene = build_test_scene(max_depth=2)
    result = run_simulation(scene)
    lineage = ReflectionLineage()
    lineage.register_all(result.virtual_objects + result.virtual_viewers)

    assert len(lineage.get_roots()) == 3 * 4
    assert len(lineage.get_roots(scene.viewer.uuid)) == 4
    assert len(lineage.get_leaves()) == 3 * 12
    assert all(leaf.depth == 2 for leaf in lineage.get_leaves())
    assert len(lineage.get_by_depth(1)) == 12


def test_lineage_statistics():
    scene = build_test_scene(max_depth=2)
    result = run_simulation(scene)
    lineage = ReflectionLineage()
    lineage.register_all(result.virtual_objects + result.virtual_viewers)
    stats = lineage.get_lineage_statistics()

    assert stats['entity_count'] == 48
    assert stats['original_count'] == 3
    assert stats['root_count'] == 12
    assert stats['leaf_count'] == 36
    assert stats['max_depth'] == 2
    assert stats['depth_counts'] == {1: 12, 2: 36}
    assert stats['branching_factor_avg'] == 3.0


def test_empty_lineage_statistics():
    stats = ReflectionLineage().get_lineage_statistics()
    assert stats['entity_count'] == 0
    assert stats['max_depth'] == 0
    assert stats['branching_factor_avg'] == 0.0


def test_lineage_to_networkx():
    nx = pytest.importorskip('networkx')
    scene = build_test_scene(max_depth=2)
    result = run_simulation(scene)
    lineage = ReflectionLineage()
    lineage.register_all(result.virtual_objects)

    G = lineage.to_networkx()
    assert isinstance(G, nx.DiGraph)
    assert G.number_of_nodes() == 32
    # One edge per depth-2 entity
    assert G.number_of_edges() == 24
    assert nx.is_directed_acyclic_graph(G)
    key = (scene.objects[0].uuid, (0, 1))
    assert G.nodes[key]['depth'] == 2


# =============================================================================
# CSV EXPORT
# =============================================================================

def test_csv_export():
    scene = build_test_scene(max_depth=1)
    result = run_simulation(scene)
    with tempfile.TemporaryDirectory() as tmp_dir:
        csv_file = save_virtual_entities_csv(result, os.path.join(tmp_dir, 'out'))
        assert csv_file.exists()
        with open(csv_file, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))

    assert rows[0] == CSV_COLUMNS
    body = rows[1:]
    assert len(body) == result.entity_count == 12
    assert [row[0] for row in body].count('object') == 8
    assert [row[0] for row in body].count('viewer') == 4

    first = body[0]
    assert first[1] == scene.objects[0].uuid
    assert first[2] == '1'
    assert first[3] == '0'
    assert first[4] == '0.80'
    assert first[5] == '#ff9393'
    # Top mirror y = 0 flips the triangle upward
    assert first[6].split(' ')[0] == '150.0000,-300.0000'

    viewer_row = body[8]
    assert viewer_row[6] == '600.0000,-600.0000 r=15.0000'


def test_csv_chain_column_for_deep_entities():
    scene = build_test_scene(max_depth=2)
    result = run_simulation(scene)
    with tempfile.TemporaryDirectory() as tmp_dir:
        csv_file = save_virtual_entities_csv(result, tmp_dir, filename='deep.csv',
                                             precision_coords=1)
        with open(csv_file, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
    assert rows[1]['chain'] == '0-1'
    assert rows[1]['opacity'] == '0.60'


# =============================================================================
# SVG RENDERING
# =============================================================================

def test_svg_layers_and_counts():
    scene = build_test_scene(max_depth=2)
    result = run_simulation(scene)
    renderer = SVGRenderer(width=800, height=800)
    assert renderer.draw_scene(scene, result, draw_labels=True) is True
    svg = renderer.to_string()

    for layer in ('layer-virtual', 'layer-mirrors', 'layer-objects', 'layer-labels'):
        assert f'id="{layer}"' in svg
    assert svg.count('class="virtual-object"') == len(result.virtual_objects)
    assert svg.count('class="virtual-viewer"') == len(result.virtual_viewers)
    assert svg.count('class="mirror"') == 4
    assert 'data-depth="2"' in svg
    assert 'data-chain="0,1"' in svg
    assert 'stroke-dasharray="3,3"' in svg
    assert 'Top Mirror' in svg


def test_svg_hidden_virtual_entities_are_skipped():
    scene = build_test_scene(max_depth=1)
    result = run_simulation(scene)
    for vo in result.virtual_objects[:3]:
        vo.set_visible(False)
    renderer = SVGRenderer()
    renderer.draw_scene(scene, result)
    svg = renderer.to_string()
    assert svg.count('class="virtual-object"') == len(result.virtual_objects) - 3


def test_svg_metadata_levels():
    scene = build_test_scene(max_depth=1)
    result = run_simulation(scene)

    standard = SVGRenderer(metadata_level='standard')
    standard.draw_scene(scene, result)
    svg = standard.to_string()
    assert 'class="virtual-object"' in svg
    assert 'data-depth' not in svg

    bare = SVGRenderer(metadata_level='none')
    bare.draw_scene(scene, result)
    assert 'class="virtual-object"' not in bare.to_string()

    with pytest.raises(ValueError):
        SVGRenderer(metadata_level='verbose')


def test_svg_save():
    scene = build_test_scene(max_depth=1)
    renderer = SVGRenderer()
    renderer.draw_scene(scene)
    with tempfile.TemporaryDirectory() as tmp_dir:
        svg_file = os.path.join(tmp_dir, 'scene.svg')
        renderer.save(svg_file)
        with open(svg_file, encoding='utf-8') as f:
            content = f.read()
    assert content.startswith('<?xml')
    assert 'virtual-object' not in content
    assert 'class="object"' in content


def main():
    tests = [
        test_lineage_tree_structure,
        test_lineage_roots_and_leaves,
        test_lineage_statistics,
        test_empty_lineage_statistics,
        test_csv_export,
        test_csv_chain_column_for_deep_entities,
        test_svg_layers_and_counts,
        test_svg_hidden_virtual_entities_are_skipped,
        test_svg_metadata_levels,
        test_svg_save,
    ]
    passed = 0
    for t in tests:
        try:
            t()
            passed += 1
            print(f"  PASS  {t.__name__}")
        except (Exception, pytest.fail.Exception) as e:
            print(f"  FAIL  {t.__name__}: {e}")
    print(f"\n{passed}/{len(tests)} tests passed")
    return passed == len(tests)


if __name__ == '__main__':
    sys.exit(0 if main() else 1)

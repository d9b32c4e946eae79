"""
===============================================================================
CHAIN-TREE SEARCH - Feature Verification Test
===============================================================================

Tests the generation of virtual objects and virtual viewers:

1. COUNTS
   - 4 * 3^(d-1) chains of length d in a four-mirror box
   - Depth 0, no mirrors and no viewer give empty output

2. CHAIN LEGALITY
   - No mirror twice in a row (by identity)
   - Two mirrors with identical coordinates are still distinct

3. GEOMETRY
   - The image for [A, B] equals reflect(reflect(original, A), B)
   - Reflected polygons keep their area

4. STYLING
   - Opacity law max(0.3, 1 - 0.2 * depth)
   - Lightened fill, virtual viewer fill

5. ORDER AND VALIDATION
   - Deterministic pre-order, object-major output
   - Negative and non-integer depths rejected

USAGE
-----
    python -m mirror_box_shapely.developer_tests.test_chain_search

===============================================================================
"""

import sys
import os

import numpy as np
import pytest

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from mirror_box_shapely.core.scene_objs import Mirror, PolygonObject, Viewer
from mirror_box_shapely.core.reflection_engine import (
    ReflectionEngine,
    calculate_all_reflections,
    calculate_all_reflections_with_viewer,
    expected_chain_count,
    generate_virtual_objects,
    generate_virtual_viewers,
    reflect_point,
    reflect_polygon,
)


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def build_box():
    """Four mirrors around (0, 0)-(100, 100): top, right, bottom, left."""
    return [
        Mirror(x1=0, y1=0, x2=100, y2=0),
        Mirror(x1=100, y1=0, x2=100, y2=100),
        Mirror(x1=100, y1=100, x2=0, y2=100),
        Mirror(x1=0, y1=100, x2=0, y2=0),
    ]


def build_triangle():
    return PolygonObject(
        vertices=[{'x': 10, 'y': 10}, {'x': 30, 'y': 10}, {'x': 20, 'y': 40}],
        fill='#ff6b6b',
    )


def build_square():
    return PolygonObject(
        vertices=[{'x': 50, 'y': 50}, {'x': 70, 'y': 50}, {'x': 70, 'y': 70}, {'x': 50, 'y': 70}],
        fill='#4ecdc4',
    )


# =============================================================================
# COUNTS
# =============================================================================

def test_per_depth_counts_in_four_mirror_box():
    """Chains of length d: 4 * 3^(d-1)."""
    mirrors = build_box()
    triangle = build_triangle()
    for max_depth in range(1, 5):
        virtual_objects = generate_virtual_objects(triangle, mirrors, max_depth)
        for d in range(1, max_depth + 1):
            count = sum(1 for vo in virtual_objects if vo.depth == d)
            assert count == 4 * 3 ** (d - 1), f"depth {d} of {max_depth}: {count}"
        assert len(virtual_objects) == expected_chain_count(4, max_depth)


def test_expected_chain_count_values():
    assert expected_chain_count(4, 0) == 0
    assert expected_chain_count(4, 1) == 4
    assert expected_chain_count(4, 2) == 16
    assert expected_chain_count(4, 3) == 52
    assert expected_chain_count(2, 2) == 4
    assert expected_chain_count(1, 3) == 1
    assert expected_chain_count(0, 3) == 0


def test_depth_zero_is_empty():
    assert generate_virtual_objects(build_triangle(), build_box(), 0) == []
    assert generate_virtual_viewers(Viewer(x=50, y=50), build_box(), 0) == []


def test_two_mirrors_depth_two():
    """Vertical x=100 and horizontal y=50 at depth 2: 2 + 2 chains."""
    vertical = Mirror(x1=100, y1=0, x2=100, y2=100)
    horizontal = Mirror(x1=0, y1=50, x2=100, y2=50)
    triangle = build_triangle()
    virtual_objects = generate_virtual_objects(triangle, [vertical, horizontal], 2)

    assert len(virtual_objects) == 4
    chains = [vo.mirror_indices for vo in virtual_objects]
    assert chains == [(0,), (0, 1), (1,), (1, 0)]
    depth_one = [vo for vo in virtual_objects if vo.depth == 1]
    assert len(depth_one) == 2
    assert {vo.reflection_chain[0] for vo in depth_one} == {vertical, horizontal}


def test_empty_mirror_list():
    result = calculate_all_reflections_with_viewer(
        [build_triangle(), build_square()], Viewer(x=50, y=50), [], 3)
    assert result.virtual_objects == []
    assert result.virtual_viewers == []
    assert result.entity_count == 0


def test_no_viewer():
    result = calculate_all_reflections_with_viewer([build_triangle()], None, build_box(), 2)
    assert len(result.virtual_objects) == 16
    assert result.virtual_viewers == []


def test_single_mirror_never_goes_deeper_than_one():
    """With one mirror the only legal chain is [A]."""
    mirror = Mirror(x1=100, y1=0, x2=100, y2=100)
    virtual_objects = generate_virtual_objects(build_triangle(), [mirror], 5)
    assert len(virtual_objects) == 1
    assert virtual_objects[0].depth == 1


# =============================================================================
# CHAIN LEGALITY
# =============================================================================

def test_no_consecutive_identical_mirrors():
    mirrors = build_box()
    for vo in generate_virtual_objects(build_triangle(), mirrors, 4):
        for a, b in zip(vo.reflection_chain, vo.reflection_chain[1:]):
            assert a is not b, f"back-reflection in {vo!r}"
        for a, b in zip(vo.mirror_indices, vo.mirror_indices[1:]):
            assert a != b


def test_mirror_indices_match_chain():
    mirrors = build_box()
    for vo in generate_virtual_objects(build_triangle(), mirrors, 3):
        assert len(vo.mirror_indices) == vo.depth == len(vo.reflection_chain)
        for index, mirror in zip(vo.mirror_indices, vo.reflection_chain):
            assert mirrors[index] is mirror


def test_identical_coordinate_mirrors_are_distinct():
    """Two equal-coordinate mirrors alternate: [m1, m2] and [m2, m1] are legal."""
    m1 = Mirror(x1=100, y1=0, x2=100, y2=100)
    m2 = Mirror(x1=100, y1=0, x2=100, y2=100)
    triangle = build_triangle()
    virtual_objects = generate_virtual_objects(triangle, [m1, m2], 2)

    assert len(virtual_objects) == 4
    assert [vo.mirror_indices for vo in virtual_objects] == [(0,), (0, 1), (1,), (1, 0)]
    # Reflecting across the same line twice is the identity
    for vo in virtual_objects:
        if vo.depth == 2:
            assert vo.vertices == triangle.vertices


# =============================================================================
# GEOMETRY
# =============================================================================

def test_compositional_correctness():
    mirrors = build_box()
    triangle = build_triangle()
    virtual_objects = generate_virtual_objects(triangle, mirrors, 2)
    checked = 0
    for a in mirrors:
        for b in mirrors:
            if a is b:
                continue
            matches = [vo for vo in virtual_objects
                       if vo.depth == 2 and vo.reflection_chain[0] is a
                       and vo.reflection_chain[1] is b]
            assert len(matches) == 1
            expected = reflect_polygon(reflect_polygon(triangle.vertices, a), b)
            assert matches[0].vertices == expected
            checked += 1
    assert checked == 12


def test_depth_one_images_in_box():
    mirrors = build_box()
    triangle = build_triangle()
    by_chain = {vo.mirror_indices: vo for vo in generate_virtual_objects(triangle, mirrors, 1)}
    # Top mirror y = 0
    assert by_chain[(0,)].vertices == [{'x': 10, 'y': -10}, {'x': 30, 'y': -10}, {'x': 20, 'y': -40}]
    # Right mirror x = 100
    assert by_chain[(1,)].vertices == [{'x': 190, 'y': 10}, {'x': 170, 'y': 10}, {'x': 180, 'y': 40}]


def test_virtual_viewer_positions():
    mirrors = build_box()
    viewer = Viewer(x=80, y=70)
    virtual_viewers = generate_virtual_viewers(viewer, mirrors, 2)
    assert len(virtual_viewers) == 16
    for vv in virtual_viewers:
        expected = viewer.get_position()
        for mirror in vv.reflection_chain:
            expected = reflect_point(expected, mirror)
        assert vv.get_position() == expected
        assert vv.radius == viewer.radius
        assert vv.original_uuid == viewer.uuid


def test_area_preserved():
    triangle = build_triangle()
    area = triangle.to_shapely().area
    for vo in generate_virtual_objects(triangle, build_box(), 3):
        assert_close(vo.to_shapely().area, area, tol=1e-6, msg=f"area of {vo!r}")


def test_virtual_objects_do_not_alias_original_vertices():
    triangle = build_triangle()
    before = [dict(v) for v in triangle.vertices]
    for vo in generate_virtual_objects(triangle, build_box(), 2):
        vo.vertices[0]['x'] = -1.0
    assert triangle.vertices == before


# =============================================================================
# STYLING
# =============================================================================

def test_opacity_law():
    virtual_objects = generate_virtual_objects(build_triangle(), build_box(), 4)
    expected = {1: 0.8, 2: 0.6, 3: 0.4, 4: 0.3}
    for vo in virtual_objects:
        assert_close(vo.opacity, expected[vo.depth], msg=f"opacity at depth {vo.depth}")
        assert vo.opacity >= 0.3


def test_virtual_object_styling():
    triangle_images = generate_virtual_objects(build_triangle(), build_box(), 1)
    square_images = generate_virtual_objects(build_square(), build_box(), 1)
    for vo in triangle_images:
        assert vo.fill == '#ff9393'
        assert vo.stroke == '#666'
        assert vo.stroke_width == 1
        assert vo.stroke_dasharray == '3,3'
        assert vo.is_visible
    for vo in square_images:
        assert vo.fill == '#76f5ec'


def test_virtual_viewer_fill():
    default_viewer = Viewer(x=50, y=50)
    custom_viewer = Viewer(x=50, y=50, fill='#ff0000')
    assert all(vv.fill == '#66aadd'
               for vv in generate_virtual_viewers(default_viewer, build_box(), 1))
    assert all(vv.fill == '#aaccee'
               for vv in generate_virtual_viewers(custom_viewer, build_box(), 1))


def test_virtual_entities_reference_original_by_uuid():
    triangle = build_triangle()
    for vo in generate_virtual_objects(triangle, build_box(), 2):
        assert vo.original_uuid == triangle.uuid
        assert not hasattr(vo, 'original_object')


# =============================================================================
# ORDER AND VALIDATION
# =============================================================================

def test_preorder_emission():
    """Every node is followed directly by its first child."""
    virtual_objects = generate_virtual_objects(build_triangle(), build_box(), 3)
    expected_prefix = [(0,), (0, 1), (0, 1, 0), (0, 1, 2), (0, 1, 3), (0, 2)]
    assert [vo.mirror_indices for vo in virtual_objects[:6]] == expected_prefix


def test_deterministic_output():
    mirrors = build_box()
    triangle = build_triangle()
    first = generate_virtual_objects(triangle, mirrors, 3)
    second = generate_virtual_objects(triangle, mirrors, 3)
    assert [vo.mirror_indices for vo in first] == [vo.mirror_indices for vo in second]
    assert [vo.vertices for vo in first] == [vo.vertices for vo in second]


def test_object_major_order():
    triangle, square = build_triangle(), build_square()
    virtual_objects = calculate_all_reflections([triangle, square], build_box(), 2)
    assert len(virtual_objects) == 32
    assert all(vo.original_uuid == triangle.uuid for vo in virtual_objects[:16])
    assert all(vo.original_uuid == square.uuid for vo in virtual_objects[16:])


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        generate_virtual_objects(build_triangle(), build_box(), -1)
    with pytest.raises(ValueError):
        calculate_all_reflections_with_viewer([build_triangle()], None, build_box(), -3)


def test_non_integer_depth_rejected():
    for bad in (1.5, '2', None, True):
        with pytest.raises(ValueError):
            generate_virtual_objects(build_triangle(), build_box(), bad)


def test_numpy_integer_depth_accepted():
    assert len(generate_virtual_objects(build_triangle(), build_box(), np.int64(2))) == 16


def test_engine_namespace():
    mirrors = build_box()
    result = ReflectionEngine.calculate_all_reflections_with_viewer(
        [build_triangle()], Viewer(x=20, y=20), mirrors, 1)
    assert result.entity_count == 8
    assert ReflectionEngine.reflect_point({'x': 40, 'y': 50}, mirrors[1]) == {'x': 160, 'y': 50}


def main():
    tests = [obj for name, obj in sorted(globals().items())
             if name.startswith('test_') and callable(obj)]
    failed = 0
    for test in tests:
        try:
            test()
            print(f"  PASS  {test.__name__}")
        except (Exception, pytest.fail.Exception) as e:
            failed += 1
            print(f"  FAIL  {test.__name__}: {e}")
    print()
    print(f"{len(tests) - failed}/{len(tests)} passed")
    return failed == 0


if __name__ == '__main__':
    sys.exit(0 if main() else 1)

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

import math
from typing import Dict, List, Sequence
from shapely.geometry import Point as ShapelyPoint, Polygon
import numpy as np


class Point:
    """
    A point in 2D space, convertible to a Shapely Point.
    """
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


class Geometry:
    """
    Basic geometric figures and operations on points stored as dicts.

    Scene objects keep their points as {'x': ..., 'y': ...} dicts; the helpers
    here accept that form so callers do not have to convert back and forth.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        """Create a point."""
        return Point(x, y)

    @staticmethod
    def distance(p1: Dict[str, float], p2: Dict[str, float]) -> float:
        """
        Calculate the distance between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Distance between points
        """
        return math.sqrt(Geometry.distance_squared(p1, p2))

    @staticmethod
    def distance_squared(p1: Dict[str, float], p2: Dict[str, float]) -> float:
        """
        Calculate the squared distance between two points.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Squared distance between points
        """
        dx = p1['x'] - p2['x']
        dy = p1['y'] - p2['y']
        return dx * dx + dy * dy

    @staticmethod
    def vertex_average(vertices: Sequence[Dict[str, float]]) -> Dict[str, float]:
        """
        Average of a polygon's vertices.

        This is the "center" used for labels and handles. It is not the area
        centroid; use shapely's `Polygon.centroid` for that.

        Args:
            vertices: Non-empty sequence of point dicts

        Returns:
            The averaged point
        """
        sum_x = sum(v['x'] for v in vertices)
        sum_y = sum(v['y'] for v in vertices)
        return {'x': sum_x / len(vertices), 'y': sum_y / len(vertices)}

    @staticmethod
    def polygon_to_shapely(vertices: Sequence[Dict[str, float]]) -> Polygon:
        """Convert a vertex list to a Shapely Polygon."""
        return Polygon([(v['x'], v['y']) for v in vertices])

    @staticmethod
    def vertices_to_array(vertices: Sequence[Dict[str, float]]) -> np.ndarray:
        """
        Stack vertices into an (n, 3) array of homogeneous coordinates.

        Args:
            vertices: Sequence of point dicts

        Returns:
            Array whose rows are [x, y, 1]
        """
        arr = np.ones((len(vertices), 3), dtype=float)
        for i, v in enumerate(vertices):
            arr[i, 0] = v['x']
            arr[i, 1] = v['y']
        return arr

    @staticmethod
    def array_to_vertices(arr: np.ndarray) -> List[Dict[str, float]]:
        """Inverse of vertices_to_array."""
        return [{'x': float(row[0]), 'y': float(row[1])} for row in arr]


# Create a singleton instance for convenience
geometry = Geometry()

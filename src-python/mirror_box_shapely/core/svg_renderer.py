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

import svgwrite


class SVGRenderer:
    """
    SVG renderer for a mirror box scene and its reflections.

    The SVG is organized into layers (bottom to top):
    - virtual: Virtual objects and virtual viewers (dashed, faded)
    - mirrors: Mirror segments
    - objects: Real polygons and the viewer
    - labels: Text annotations

    Coordinates are screen coordinates (Y grows downward), the same system
    the scene is described in.

    Virtual elements carry data-depth and data-chain attributes so that the
    output can be post-processed.

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        viewbox (tuple): SVG viewBox (min_x, min_y, width, height)
        dwg (svgwrite.Drawing): The SVG drawing object
    """

    def __init__(self, width=800, height=800, viewbox=None, metadata_level='full'):
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 800)
            height (int): Canvas height in pixels (default: 800)
            viewbox (tuple or None): SVG viewBox as (min_x, min_y, width, height).
                If None, uses (0, 0, width, height)
            metadata_level (str): 'none', 'standard' (id + class) or
                'full' (also data-* attributes)
        """
        if metadata_level not in ('none', 'standard', 'full'):
            raise ValueError(
                f"Invalid metadata_level '{metadata_level}'. "
                f"Valid options: ('none', 'standard', 'full')"
            )
        self.width = width
        self.height = height
        self.metadata_level = metadata_level
        self.viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # profile='full' and debug=False so data-* attributes are accepted
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)

        self.dwg.add(self.dwg.rect(
            insert=(self.viewbox[0], self.viewbox[1]),
            size=(self.viewbox[2], self.viewbox[3]),
            fill='white'
        ))

        self.layer_virtual = self.dwg.add(self.dwg.g(id='layer-virtual'))
        self.layer_mirrors = self.dwg.add(self.dwg.g(id='layer-mirrors'))
        self.layer_objects = self.dwg.add(self.dwg.g(id='layer-objects'))
        self.layer_labels = self.dwg.add(self.dwg.g(id='layer-labels'))

    def _normalize_coord(self, value):
        """Map -0.0 and values within 1e-10 of zero to 0.0."""
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def _points(self, vertices):
        return [(self._normalize_coord(v['x']), self._normalize_coord(v['y'])) for v in vertices]

    def _attach_metadata(self, element, uuid, css_class, extra=None):
        """Attach id/class (and data-* attributes in 'full' mode)."""
        if self.metadata_level == 'none':
            return
        if uuid:
            element['id'] = f'{css_class}-{uuid}'
        element['class'] = css_class
        if self.metadata_level == 'full' and extra:
            for key, value in extra.items():
                element[f'data-{key}'] = value

    def _draw_label(self, text, x, y, color):
        self.layer_labels.add(self.dwg.text(
            text,
            insert=(self._normalize_coord(x), self._normalize_coord(y)),
            fill=color,
            font_size='10px',
            font_family='sans-serif',
            text_anchor='middle'
        ))

    def draw_mirror(self, mirror, label=None):
        """Draw a mirror segment with round caps."""
        line = self.dwg.line(
            start=(self._normalize_coord(mirror.x1), self._normalize_coord(mirror.y1)),
            end=(self._normalize_coord(mirror.x2), self._normalize_coord(mirror.y2)),
            stroke=mirror.stroke,
            stroke_width=mirror.stroke_width,
            stroke_linecap='round'
        )
        self._attach_metadata(line, mirror.uuid, 'mirror')
        self.layer_mirrors.add(line)
        if label:
            self._draw_label(label, (mirror.x1 + mirror.x2) / 2, (mirror.y1 + mirror.y2) / 2,
                             mirror.stroke)

    def draw_polygon_object(self, obj, label=None):
        """Draw a real polygon."""
        polygon = self.dwg.polygon(
            points=self._points(obj.vertices),
            fill=obj.fill,
            stroke=obj.stroke,
            stroke_width=obj.stroke_width
        )
        self._attach_metadata(polygon, obj.uuid, 'object')
        self.layer_objects.add(polygon)
        if label:
            center = obj.get_center()
            self._draw_label(label, center['x'], center['y'], obj.stroke)

    def draw_viewer(self, viewer, label=None):
        """Draw the real viewer."""
        circle = self.dwg.circle(
            center=(self._normalize_coord(viewer.x), self._normalize_coord(viewer.y)),
            r=viewer.radius,
            fill=viewer.fill,
            stroke=viewer.stroke,
            stroke_width=viewer.stroke_width
        )
        self._attach_metadata(circle, viewer.uuid, 'viewer')
        self.layer_objects.add(circle)
        if label:
            self._draw_label(label, viewer.x, viewer.y - viewer.radius - 4, viewer.stroke)

    def _virtual_metadata(self, entity):
        return {
            'original': entity.original_uuid,
            'depth': entity.depth,
            'chain': ','.join(str(i) for i in entity.mirror_indices),
        }

    def draw_virtual_object(self, virtual_object):
        """Draw a virtual polygon: dashed outline, faded by depth."""
        if not virtual_object.is_visible:
            return
        polygon = self.dwg.polygon(
            points=self._points(virtual_object.vertices),
            fill=virtual_object.fill,
            stroke=virtual_object.stroke,
            stroke_width=virtual_object.stroke_width,
            opacity=virtual_object.opacity,
            stroke_dasharray=virtual_object.stroke_dasharray
        )
        self._attach_metadata(polygon, None, 'virtual-object',
                              self._virtual_metadata(virtual_object))
        self.layer_virtual.add(polygon)

    def draw_virtual_viewer(self, virtual_viewer):
        """Draw a virtual viewer: dashed outline, faded by depth."""
        if not virtual_viewer.is_visible:
            return
        circle = self.dwg.circle(
            center=(self._normalize_coord(virtual_viewer.x),
                    self._normalize_coord(virtual_viewer.y)),
            r=virtual_viewer.radius,
            fill=virtual_viewer.fill,
            stroke=virtual_viewer.stroke,
            stroke_width=virtual_viewer.stroke_width,
            opacity=virtual_viewer.opacity,
            stroke_dasharray=virtual_viewer.stroke_dasharray
        )
        self._attach_metadata(circle, None, 'virtual-viewer',
                              self._virtual_metadata(virtual_viewer))
        self.layer_virtual.add(circle)

    def draw_scene(self, scene, result=None, draw_labels: bool = False) -> bool:
        """
        Draw a scene and, optionally, the result of a reflection pass.

        Args:
            scene: The Scene
            result: ReflectionResult from Simulator.run(), or None for the real scene only
            draw_labels (bool): Whether to label mirrors, objects and the viewer

        Returns:
            bool: True on success.
        """
        if result is not None:
            for vo in result.virtual_objects:
                self.draw_virtual_object(vo)
            for vv in result.virtual_viewers:
                self.draw_virtual_viewer(vv)
        for mirror in scene.mirrors:
            self.draw_mirror(mirror, label=mirror.get_display_name() if draw_labels else None)
        for obj in scene.objects:
            self.draw_polygon_object(obj, label=obj.get_display_name() if draw_labels else None)
        if scene.viewer is not None:
            self.draw_viewer(scene.viewer,
                             label=scene.viewer.get_display_name() if draw_labels else None)
        return True

    def save(self, filename: str = None):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (default: 'output.svg')
        """
        if filename is None:
            filename = "output.svg"
        self.dwg.saveas(filename)

    def to_string(self):
        """Get the SVG as an XML string."""
        return self.dwg.tostring()

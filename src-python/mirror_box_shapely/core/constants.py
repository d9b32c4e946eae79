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
Constants used throughout the mirror box reflection model.

Kept in one module so that scene objects, the reflection engine and the
renderer can share them without circular imports.
"""

# Default reflection depth. The chain tree grows exponentially with depth,
# interactive scenes use 1 or 2.
DEFAULT_MAX_DEPTH = 2

# Opacity law for virtual entities: max(MIN_VIRTUAL_OPACITY, 1 - depth * step)
OPACITY_STEP_PER_DEPTH = 0.2
MIN_VIRTUAL_OPACITY = 0.3

# Amount added to each RGB channel when lightening a virtual object's fill
VIRTUAL_FILL_LIGHTEN_AMOUNT = 40

# Virtual entity stroke styling
VIRTUAL_STROKE = '#666'
VIRTUAL_STROKE_WIDTH = 1
VIRTUAL_STROKE_DASHARRAY = '3,3'

# Real entity defaults
MIRROR_STROKE = '#2c3e50'
MIRROR_STROKE_WIDTH = 3
POLYGON_FILL = '#ff6b6b'
POLYGON_STROKE = '#333'
POLYGON_STROKE_WIDTH = 2
VIEWER_RADIUS = 15
VIEWER_FILL = '#007acc'
VIEWER_STROKE = '#005a99'
VIEWER_STROKE_WIDTH = 2

# Virtual viewer fills (the viewer default color has a dedicated lighter tone)
VIRTUAL_VIEWER_FILL_FOR_DEFAULT = '#66aadd'
VIRTUAL_VIEWER_FILL_FALLBACK = '#aaccee'

# Above this many expected virtual entities the simulator sets a scene warning
MAX_VIRTUAL_ENTITIES_WARNING = 5000

# Tolerance used by the shapely circle approximation of viewers
VIEWER_BUFFER_RESOLUTION = 16

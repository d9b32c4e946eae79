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

===============================================================================
Virtual Entity Export Utilities
===============================================================================
Writes the virtual entities of a reflection pass to CSV, one row per
reflection chain, for inspection in a spreadsheet or for regression diffs.
===============================================================================
"""

import csv
from pathlib import Path
from typing import Union

from ..core.reflection_engine import ReflectionResult

CSV_COLUMNS = [
    'kind', 'original_uuid', 'depth', 'chain', 'opacity', 'fill', 'geometry',
]


def save_virtual_entities_csv(
    result: ReflectionResult,
    output_path: Union[str, Path],
    filename: str = "virtual_entities.csv",
    precision_coords: int = 4,
) -> Path:
    """
    Export the virtual objects and virtual viewers of a result to CSV.

    The `chain` column holds the mirror indices joined by '-'. The
    `geometry` column holds 'x,y' pairs separated by spaces (vertices for
    objects, the center followed by 'r=<radius>' for viewers).

    Args:
        result: ReflectionResult from Simulator.run() or
            calculate_all_reflections_with_viewer().
        output_path: Directory path where the CSV file will be saved.
        filename: Name of the output CSV file (default: "virtual_entities.csv").
        precision_coords: Decimal places for coordinate values (default: 4).

    Returns:
        Path: Full path to the created CSV file.

    Raises:
        OSError: If the output directory cannot be created or file cannot be written.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / filename

    def fmt(value: float) -> str:
        return f"{value:.{precision_coords}f}"

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)

        for vo in result.virtual_objects:
            writer.writerow([
                'object',
                vo.original_uuid,
                vo.depth,
                '-'.join(str(i) for i in vo.mirror_indices),
                f"{vo.opacity:.2f}",
                vo.fill,
                ' '.join(f"{fmt(v['x'])},{fmt(v['y'])}" for v in vo.vertices),
            ])

        for vv in result.virtual_viewers:
            writer.writerow([
                'viewer',
                vv.original_uuid,
                vv.depth,
                '-'.join(str(i) for i in vv.mirror_indices),
                f"{vv.opacity:.2f}",
                vv.fill,
                f"{fmt(vv.x)},{fmt(vv.y)} r={fmt(vv.radius)}",
            ])

    return csv_file

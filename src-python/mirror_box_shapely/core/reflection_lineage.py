"""
Copyright 2026 mirror-box-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

===============================================================================
Reflection Lineage
===============================================================================
Organizes the virtual entities of one reflection pass as the chain tree the
search walked: the parent of chain [A, B, C] is [A, B], the roots are the
single-mirror chains. Uses a lightweight dict-based tree internally, with
optional NetworkX export for graph visualization.
===============================================================================
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple, Union

from .scene_objs.virtual_object import VirtualObject
from .scene_objs.virtual_viewer import VirtualViewer

VirtualEntity = Union[VirtualObject, VirtualViewer]
ChainKey = Tuple[str, Tuple[int, ...]]


class ReflectionLineage:
    """
    Chain tree of the virtual entities derived from real entities.

    Entities are keyed by (original_uuid, mirror_indices), so the key is
    unique per chain even when two chains end at the same geometry.

    Usage:
        lineage = ReflectionLineage()
        lineage.register_all(result.virtual_objects)

        parent = lineage.get_parent(some_virtual_object)
        leaves = lineage.get_leaves()
        tree = lineage.to_networkx()  # requires networkx
    """

    def __init__(self) -> None:
        self._entities: Dict[ChainKey, VirtualEntity] = {}
        self._children: Dict[ChainKey, List[ChainKey]] = {}

    @staticmethod
    def key_of(entity: VirtualEntity) -> ChainKey:
        return (entity.original_uuid, tuple(entity.mirror_indices))

    def register(self, entity: VirtualEntity) -> None:
        """
        Register one virtual entity.

        Parents may be registered after their children; the search emits in
        pre-order so in practice they come first.
        """
        key = self.key_of(entity)
        self._entities[key] = entity
        self._children.setdefault(key, [])
        if len(key[1]) > 1:
            parent_key = (key[0], key[1][:-1])
            self._children.setdefault(parent_key, []).append(key)

    def register_all(self, entities: List[VirtualEntity]) -> None:
        for entity in entities:
            self.register(entity)

    @property
    def entity_count(self) -> int:
        """Total number of registered entities."""
        return len(self._entities)

    def get(self, original_uuid: str, mirror_indices: Tuple[int, ...]) -> Optional[VirtualEntity]:
        """Look up the entity for a chain, or None."""
        return self._entities.get((original_uuid, tuple(mirror_indices)))

    # =========================================================================
    # Tree queries
    # =========================================================================

    def get_parent(self, entity: VirtualEntity) -> Optional[VirtualEntity]:
        """The entity one reflection shallower, or None for depth-1 entities."""
        original_uuid, indices = self.key_of(entity)
        if len(indices) <= 1:
            return None
        return self._entities.get((original_uuid, indices[:-1]))

    def get_ancestors(self, entity: VirtualEntity) -> List[VirtualEntity]:
        """All shallower entities on the chain, ordered root-first."""
        original_uuid, indices = self.key_of(entity)
        result = []
        for length in range(1, len(indices)):
            ancestor = self._entities.get((original_uuid, indices[:length]))
            if ancestor is not None:
                result.append(ancestor)
        return result

    def get_children(self, entity: VirtualEntity) -> List[VirtualEntity]:
        """Entities whose chain extends this one by a single mirror."""
        return [self._entities[c] for c in self._children.get(self.key_of(entity), [])
                if c in self._entities]

    def get_roots(self, original_uuid: Optional[str] = None) -> List[VirtualEntity]:
        """Depth-1 entities, optionally restricted to one original."""
        return [e for (uuid, indices), e in self._entities.items()
                if len(indices) == 1 and (original_uuid is None or uuid == original_uuid)]

    def get_leaves(self) -> List[VirtualEntity]:
        """Entities with no registered children."""
        return [self._entities[k] for k, children in self._children.items()
                if not children and k in self._entities]

    def get_by_depth(self, depth: int) -> List[VirtualEntity]:
        return [e for e in self._entities.values() if e.depth == depth]

    def get_lineage_statistics(self) -> Dict[str, Any]:
        """
        Summary statistics for the chain tree.

        Returns:
            Dict with keys:
            - entity_count: total registered entities
            - original_count: number of distinct real entities
            - root_count: number of depth-1 entities
            - leaf_count: number of entities without children
            - max_depth: longest registered chain
            - depth_counts: dict mapping depth -> count
            - branching_factor_avg: average number of children per non-leaf
        """
        depth_counts: Dict[int, int] = {}
        for entity in self._entities.values():
            depth_counts[entity.depth] = depth_counts.get(entity.depth, 0) + 1

        non_leaves = [k for k, children in self._children.items() if children]
        if non_leaves:
            branching_avg = sum(len(self._children[k]) for k in non_leaves) / len(non_leaves)
        else:
            branching_avg = 0.0

        return {
            'entity_count': len(self._entities),
            'original_count': len({uuid for uuid, _ in self._entities}),
            'root_count': depth_counts.get(1, 0),
            'leaf_count': len(self.get_leaves()),
            'max_depth': max(depth_counts) if depth_counts else 0,
            'depth_counts': depth_counts,
            'branching_factor_avg': branching_avg,
        }

    # =========================================================================
    # NetworkX export (optional dependency)
    # =========================================================================

    def to_networkx(self) -> Any:
        """
        Export to a NetworkX DiGraph.

        Requires networkx to be installed. Nodes are (original_uuid,
        mirror_indices) tuples with 'depth' and 'opacity' attributes; edges
        go from a chain to its one-mirror extensions.

        Returns:
            nx.DiGraph

        Raises:
            ImportError: if networkx is not installed
        """
        import networkx as nx
        G = nx.DiGraph()
        for key, entity in self._entities.items():
            G.add_node(key, depth=entity.depth, opacity=entity.opacity)
        for key, children in self._children.items():
            if key not in self._entities:
                continue
            for child in children:
                if child in self._entities:
                    G.add_edge(key, child)
        return G

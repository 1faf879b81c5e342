# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emission ordering for declared types.

A C struct can only embed another struct by value once that struct is
complete, so every dependency has to be emitted before its dependents.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Mapping, Sequence

from simcom.compiler.errors import CyclicDependencyError
from simcom.model.entities import DependencyGraph, EmissionOrder, TypeCatalog

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def resolve_order(catalog: TypeCatalog, graph: DependencyGraph) -> EmissionOrder:
    """Topologically sort the declared types, dependencies first.

    Among the types whose dependencies have all been emitted, the one declared
    earliest in the source is emitted next, so the result depends only on the
    input text.

    Args:
        catalog: The declared types; its order defines the tie-break.
        graph: The dependency graph over the same names.

    Returns:
        Every declared name exactly once, each after all of its dependencies.

    Raises:
        CyclicDependencyError: If the graph contains a cycle, including a type
            with a field of its own type. No partial order is returned.
    """
    position = catalog.positions()
    dependents = _reverse_edges(graph)
    pending = {name: len(graph.dependencies_of(name)) for name in graph.nodes}

    ready = [(position[name], name) for name, count in pending.items() if count == 0]
    heapq.heapify(ready)

    order: list[str] = []
    while ready:
        _, name = heapq.heappop(ready)
        order.append(name)
        for dependent in dependents[name]:
            pending[dependent] -= 1
            if pending[dependent] == 0:
                heapq.heappush(ready, (position[dependent], dependent))

    if len(order) < len(graph.nodes):
        emitted = set(order)
        remaining = [name for name in graph.nodes if name not in emitted]
        cycle = find_cycle(graph, remaining)
        # Types left over are only ever blocked by a cycle.
        assert cycle is not None
        raise CyclicDependencyError(cycle, _component_of(graph, cycle[0]))

    logger.debug("Resolved emission order: %s", ", ".join(order))
    return tuple(order)


def find_cycle(graph: DependencyGraph, start_nodes: list[str] | None = None) -> tuple[str, ...] | None:
    """Detect a cycle in the dependency graph using DFS.

    Uses a three-colour marking scheme (white/grey/black) to distinguish
    unvisited, in-progress, and fully-explored nodes. Start nodes and
    neighbours are visited in source order, so the reported cycle is stable.
    The walk keeps its own stack, so arbitrarily long dependency chains are
    handled.

    Args:
        graph: The dependency graph to search.
        start_nodes: Nodes to start the search from. Defaults to all nodes.

    Returns:
        The node names forming a cycle with the start node repeated at the
        end (e.g. ``("A", "B", "A")``, or ``("A", "A")`` for a self
        reference), or ``None`` if no cycle is reachable.
    """
    white, grey, black = 0, 1, 2
    color: dict[str, int] = {}

    for start in start_nodes if start_nodes is not None else graph.nodes:
        if color.get(start, white) != white:
            continue
        color[start] = grey
        path = [start]
        pending = [iter(graph.dependencies_of(start))]
        while pending:
            neighbor = next(pending[-1], None)
            if neighbor is None:
                pending.pop()
                color[path.pop()] = black
                continue
            state = color.get(neighbor, white)
            if state == grey:
                return (*path[path.index(neighbor) :], neighbor)
            if state == white:
                color[neighbor] = grey
                path.append(neighbor)
                pending.append(iter(graph.dependencies_of(neighbor)))
    return None


# ################
# Implementation
# ################


def _reverse_edges(graph: DependencyGraph) -> dict[str, list[str]]:
    """Map every node to the nodes that depend on it, in source order."""
    dependents: dict[str, list[str]] = {name: [] for name in graph.nodes}
    for name in graph.nodes:
        for target in graph.dependencies_of(name):
            dependents.setdefault(target, []).append(name)
    return dependents


def _reachable(start: str, neighbors: Mapping[str, Sequence[str]]) -> set[str]:
    """Return every node reachable from *start* (inclusive) via *neighbors*."""
    seen = {start}
    stack = [start]
    while stack:
        for neighbor in neighbors.get(stack.pop(), ()):
            if neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)
    return seen


def _component_of(graph: DependencyGraph, node: str) -> frozenset[str]:
    """Return the strongly connected component of *node*.

    These are all the types that both depend on *node* and are depended on by
    it, i.e. every type entangled in the same cycles.
    """
    return frozenset(_reachable(node, graph.edges) & _reachable(node, _reverse_edges(graph)))

"""
Deployment ordering.

Builds a directed graph over contract indexes with an edge from every
dependency to the contract importing it, and orders it with Kahn's
algorithm. Among contracts that are ready at the same time the one
registered first goes first, so identical input always yields the same
plan. When contracts are left over, Tarjan's algorithm finds the import
cycles holding them back.
"""

import heapq
from typing import Dict, List, Sequence, Set

from .contract import Contract
from .errors import CyclicImportError


Graph = Dict[int, List[int]]


def build_graph(contracts: Sequence[Contract]) -> Graph:
    """Adjacency lists keyed by contract index, dependency -> dependent."""
    handles = {contract.index for contract in contracts}
    graph: Graph = {handle: [] for handle in sorted(handles)}

    for contract in sorted(contracts, key=lambda c: c.index):
        for dependency in contract.dependencies.values():
            # Dependencies outside of this set impose no ordering
            if dependency.index in handles:
                graph[dependency.index].append(contract.index)

    return graph


def topological_order(graph: Graph) -> List[int]:
    """
    Kahn's algorithm with ties broken by the lowest index.

    Returns the ordered handles; nodes that sit on or behind a cycle are
    missing from the result.
    """
    in_degree = {node: 0 for node in graph}
    for successors in graph.values():
        for successor in successors:
            in_degree[successor] += 1

    ready = [node for node, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)

    order = []
    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for successor in graph[node]:
            in_degree[successor] -= 1
            if in_degree[successor] == 0:
                heapq.heappush(ready, successor)

    return order


def strongly_connected_components(graph: Graph, nodes: Sequence[int]) -> List[List[int]]:
    """
    Tarjan's algorithm over the subgraph induced by `nodes`.

    Iterative, so long import chains do not hit the recursion limit.
    Components are returned in the order Tarjan completes them.
    """
    members: Set[int] = set(nodes)
    index_of: Dict[int, int] = {}
    lowlink: Dict[int, int] = {}
    stack: List[int] = []
    on_stack: Set[int] = set()
    components: List[List[int]] = []
    counter = 0

    def successors(node: int) -> List[int]:
        return [s for s in graph[node] if s in members]

    for root in nodes:
        if root in index_of:
            continue

        index_of[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work = [(root, iter(successors(root)))]

        while work:
            node, children = work[-1]
            for child in children:
                if child not in index_of:
                    index_of[child] = lowlink[child] = counter
                    counter += 1
                    stack.append(child)
                    on_stack.add(child)
                    work.append((child, iter(successors(child))))
                    break
                if child in on_stack:
                    lowlink[node] = min(lowlink[node], index_of[child])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])

                if lowlink[node] == index_of[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    components.append(component)

    return components


def find_cycles(graph: Graph, nodes: Sequence[int]) -> List[List[int]]:
    """Components of more than one node, plus nodes that import themselves."""
    cycles = []
    for component in strongly_connected_components(graph, nodes):
        if len(component) > 1 or component[0] in graph[component[0]]:
            cycles.append(component)
    return cycles


def sort_by_deployment_order(contracts: Sequence[Contract]) -> List[Contract]:
    """
    Sort contracts so each one comes after all of its dependencies.

    Raises:
        CyclicImportError: with every import cycle found, when no such
            order exists
    """
    by_handle = {contract.index: contract for contract in contracts}
    graph = build_graph(contracts)
    order = topological_order(graph)

    if len(order) < len(graph):
        placed = set(order)
        remaining = [node for node in graph if node not in placed]
        cycles = find_cycles(graph, remaining)
        raise CyclicImportError([[by_handle[node] for node in cycle] for cycle in cycles])

    return [by_handle[node] for node in order]

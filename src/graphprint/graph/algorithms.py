"""Graph algorithms: cycle detection, SCC, BFS depth, components, triangles.

All functions take successor lists indexed by node id (``adjacency[i]`` lists
the targets of node ``i``) and are iterative, so deep or large graphs never
hit Python's recursion limit.
"""

from collections import deque

# DFS colors
_WHITE, _GRAY, _BLACK = 0, 1, 2


def has_cycle(adjacency: list[list[int]]) -> bool:
    """Three-color DFS; True on the first back edge (a self-loop counts)."""
    color = [_WHITE] * len(adjacency)

    for root in range(len(adjacency)):
        if color[root] != _WHITE:
            continue

        color[root] = _GRAY
        stack: list[tuple[int, int]] = [(root, 0)]  # (node, next successor position)

        while stack:
            v, pos = stack[-1]
            successors = adjacency[v]
            if pos < len(successors):
                stack[-1] = (v, pos + 1)
                w = successors[pos]
                if color[w] == _GRAY:
                    return True
                if color[w] == _WHITE:
                    color[w] = _GRAY
                    stack.append((w, 0))
            else:
                color[v] = _BLACK
                stack.pop()

    return False


def tarjan_scc(adjacency: list[list[int]]) -> list[list[int]]:
    """Tarjan's algorithm for strongly connected components (iterative).

    Uses an explicit call stack to avoid Python recursion limits. Components
    are returned in the order Tarjan completes them (reverse topological),
    each sorted by node id.
    """
    n = len(adjacency)
    counter = 0
    scc_stack: list[int] = []
    on_stack = [False] * n
    index = [-1] * n
    lowlink = [0] * n
    result: list[list[int]] = []

    for root in range(n):
        if index[root] != -1:
            continue

        # Each frame is (node, neighbor_iterator)
        index[root] = lowlink[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack[root] = True
        call_stack = [(root, iter(adjacency[root]))]

        while call_stack:
            v, it = call_stack[-1]
            pushed = False
            for w in it:
                if index[w] == -1:
                    # "Recurse" into w
                    index[w] = lowlink[w] = counter
                    counter += 1
                    scc_stack.append(w)
                    on_stack[w] = True
                    call_stack.append((w, iter(adjacency[w])))
                    pushed = True
                    break
                elif on_stack[w]:
                    lowlink[v] = min(lowlink[v], index[w])

            if not pushed:
                # All neighbors processed, "return" from v
                call_stack.pop()
                if call_stack:
                    caller = call_stack[-1][0]
                    lowlink[caller] = min(lowlink[caller], lowlink[v])

                if lowlink[v] == index[v]:
                    component: list[int] = []
                    while True:
                        w = scc_stack.pop()
                        on_stack[w] = False
                        component.append(w)
                        if w == v:
                            break
                    result.append(sorted(component))

    return result


def is_cyclic_component(component: list[int], adjacency: list[list[int]]) -> bool:
    """An SCC is a real cycle if it has 2+ members or a single self-looping node."""
    if len(component) > 1:
        return True
    node = component[0]
    return node in adjacency[node]


def bfs_depth(adjacency: list[list[int]], start: int) -> int:
    """Longest shortest-path distance (in hops) reachable from ``start``."""
    visited = {start}
    queue: deque[tuple[int, int]] = deque([(start, 0)])
    max_depth = 0

    while queue:
        node, depth = queue.popleft()
        max_depth = max(max_depth, depth)
        for neighbor in adjacency[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, depth + 1))

    return max_depth


def max_nesting_depth(adjacency: list[list[int]]) -> int:
    """Max BFS depth over all roots (in-degree 0).

    A graph without roots (every node has an incoming edge) has depth 0.
    """
    n = len(adjacency)
    if n == 0:
        return 0

    in_degree = [0] * n
    for targets in adjacency:
        for tgt in targets:
            in_degree[tgt] += 1

    roots = [node for node in range(n) if in_degree[node] == 0]
    return max((bfs_depth(adjacency, root) for root in roots), default=0)


def distinct_arc_count(adjacency: list[list[int]]) -> int:
    """Ordered pairs (u, v), u != v, joined by at least one edge."""
    return sum(len({t for t in targets if t != src}) for src, targets in enumerate(adjacency))


def undirected_neighbors(adjacency: list[list[int]]) -> list[set[int]]:
    """Simple undirected view: direction dropped, duplicates merged, self-loops removed."""
    neighbors: list[set[int]] = [set() for _ in adjacency]
    for src, targets in enumerate(adjacency):
        for tgt in targets:
            if src != tgt:
                neighbors[src].add(tgt)
                neighbors[tgt].add(src)
    return neighbors


def connected_components(adjacency: list[list[int]]) -> list[list[int]]:
    """Weakly connected components (edge direction ignored)."""
    undirected = undirected_neighbors(adjacency)
    visited = [False] * len(adjacency)
    components: list[list[int]] = []

    for start in range(len(adjacency)):
        if visited[start]:
            continue
        component: list[int] = []
        stack = [start]
        visited[start] = True
        while stack:
            node = stack.pop()
            component.append(node)
            for neighbor in undirected[node]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append(neighbor)
        components.append(sorted(component))

    return components


def count_triangles(adjacency: list[list[int]]) -> int:
    """Triangles of the simple undirected view, each counted once."""
    undirected = undirected_neighbors(adjacency)
    count = 0
    for u, neighbors in enumerate(undirected):
        higher = sorted(v for v in neighbors if v > u)
        for i, v in enumerate(higher):
            for w in higher[i + 1:]:
                if w in undirected[v]:
                    count += 1
    return count


def clustering_coefficient(adjacency: list[list[int]]) -> float:
    """Triangle count over possible triangles C(N, 3); 0 when N < 3."""
    n = len(adjacency)
    if n < 3:
        return 0.0
    possible = n * (n - 1) * (n - 2) // 6
    return count_triangles(adjacency) / possible


def structural_modularity(adjacency: list[list[int]], component_count: int) -> float:
    """Modularity proxy: clamp(clustering + components / N, 0, 1); 0 when empty."""
    n = len(adjacency)
    if n == 0:
        return 0.0
    score = clustering_coefficient(adjacency) + component_count / n
    return max(0.0, min(1.0, score))

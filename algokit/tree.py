"""Lowest common ancestors in a rooted tree by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable

ROOT = 1


class LiftedTree:
    """A tree on nodes ``1..node_count`` rooted at node 1, answering ancestor queries."""

    def __init__(self, node_count: int, edges: Iterable[tuple[int, int]]) -> None:
        if node_count < 1:
            raise ValueError("a tree needs at least one node")
        self._size = node_count
        adjacency: list[list[int]] = [[] for _ in range(node_count + 1)]
        for u, v in edges:
            self._check(u)
            self._check(v)
            adjacency[u].append(v)
            adjacency[v].append(u)

        self._levels = max(1, node_count.bit_length())
        self._depth = [0] * (node_count + 1)
        self._up = [[0] * (node_count + 1) for _ in range(self._levels)]
        self._depth[ROOT] = 1
        stack = [ROOT]
        while stack:
            node = stack.pop()
            for level in range(1, self._levels):
                below = self._up[level - 1]
                self._up[level][node] = below[below[node]]
            for child in adjacency[node]:
                if not self._depth[child]:
                    self._depth[child] = self._depth[node] + 1
                    self._up[0][child] = node
                    stack.append(child)

        unreached = [n for n in range(1, node_count + 1) if not self._depth[n]]
        if unreached:
            raise ValueError(f"nodes not connected to the root: {unreached[:10]}")

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._size:
            raise ValueError(f"node {node} is outside 1..{self._size}")

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        depth = self._depth
        if depth[u] < depth[v]:
            u, v = v, u
        for level in reversed(range(self._levels)):
            ancestor = self._up[level][u]
            if depth[ancestor] >= depth[v]:
                u = ancestor
        if u == v:
            return u
        for level in reversed(range(self._levels)):
            jumps = self._up[level]
            if jumps[u] != jumps[v]:
                u, v = jumps[u], jumps[v]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Return the number of edges on the path between ``u`` and ``v``."""
        meeting = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[meeting]

    def rooted_lca(self, root: int, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v`` when the tree is rooted at ``root``."""
        candidates = (self.lca(root, u), self.lca(root, v), self.lca(u, v))
        return min(
            (self.distance(x, v) + self.distance(x, u) + self.distance(x, root), x)
            for x in candidates
        )[1]
"""Token graph and shortest-path search for route assembly.

This module separates the graph structure and the search algorithm from the
route assembly rules (endpoint checks, native-token handling) that live in
`hoprouter.routing.router`.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Iterable

import structlog

from hoprouter.routing.identity import TokenIdentity
from hoprouter.routing.types import RouterPair

logger = structlog.get_logger()


class PathGraph:
    """Undirected multigraph of tokens connected by pairs.

    Each node maps to the list of directed edges leaving it. An edge is a
    RouterPair oriented so that its `from_id` is the node, which means the
    edge itself already carries the pool metadata and the offered token for
    a hop taken along it.

    Several pools between the same two tokens produce parallel edges; they
    are kept in insertion order.

    This is a pure data structure built once per routing call and thrown
    away afterwards.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._adjacency: dict[TokenIdentity, list[RouterPair]] = {}
        self._edge_count = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[RouterPair]) -> PathGraph:
        """Build a PathGraph from a list of pairs.

        Args:
            pairs: Pairs in caller order. The order decides tie-breaking
                   between equally short routes.

        Returns:
            PathGraph with two directed edges per pair

        Raises:
            InvalidPair: If a pair's two sides are the same token
        """
        graph = cls()
        for pair in pairs:
            graph.add_pair(pair)
        logger.debug(
            "path_graph_built",
            tokens=graph.token_count,
            edges=graph.edge_count,
        )
        return graph

    def add_pair(self, pair: RouterPair) -> None:
        """Add a pair and its reverse."""
        pair.ensure_distinct_sides()
        self._add_edge(pair)
        self._add_edge(pair.reversed())

    def _add_edge(self, edge: RouterPair) -> None:
        """Add one directed edge."""
        self._adjacency.setdefault(edge.from_id, []).append(edge)
        self._edge_count += 1

    def edges_from(self, token: TokenIdentity) -> list[RouterPair]:
        """Get the edges leaving a token, oriented away from it."""
        return self._adjacency.get(token, [])

    def neighbors(self, token: TokenIdentity) -> list[TokenIdentity]:
        """Get the tokens directly tradeable with a token.

        A token appears once per pool connecting the two.
        """
        return [edge.into_id for edge in self.edges_from(token)]

    def has_token(self, token: TokenIdentity) -> bool:
        """Check if a token exists in the graph."""
        return token in self._adjacency

    @property
    def token_count(self) -> int:
        """Number of unique tokens in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of directed edges (two per pair)."""
        return self._edge_count

    @property
    def native_tokens(self) -> set[TokenIdentity]:
        """Native-coin nodes present in the graph."""
        return {token for token in self._adjacency if token.is_native}

    def shortest_path(
        self,
        source: TokenIdentity,
        target: TokenIdentity,
        max_hops: int | None = None,
        blocked: Collection[TokenIdentity] = (),
    ) -> list[RouterPair] | None:
        """Find the path with the fewest hops from source to target.

        Uses BFS with a predecessor map. Nodes are marked visited when they
        are queued, so each node keeps the first edge that reached it. Among
        equally short paths the one found first under adjacency order wins.

        Args:
            source: Starting token
            target: Destination token
            max_hops: Maximum number of edges in the path (None = unlimited)
            blocked: Tokens that may end a path but never be passed through.
                     The source is always expanded.

        Returns:
            Oriented edges from source to target, or None if not reachable.
            Returns an empty list when source == target.
        """
        if source == target:
            return []

        if not self.has_token(source) or not self.has_token(target):
            return None

        predecessors: dict[TokenIdentity, RouterPair] = {}
        depth: dict[TokenIdentity, int] = {source: 0}
        queue: deque[TokenIdentity] = deque([source])

        while queue:
            current = queue.popleft()
            if current != source and current in blocked:
                continue
            if max_hops is not None and depth[current] >= max_hops:
                continue

            for edge in self._adjacency[current]:
                neighbor = edge.into_id
                if neighbor in depth:
                    continue
                depth[neighbor] = depth[current] + 1
                predecessors[neighbor] = edge
                if neighbor == target:
                    return self._reconstruct(predecessors, source, target)
                queue.append(neighbor)

        return None

    @staticmethod
    def _reconstruct(
        predecessors: dict[TokenIdentity, RouterPair],
        source: TokenIdentity,
        target: TokenIdentity,
    ) -> list[RouterPair]:
        """Walk the predecessor map back from target to source."""
        path: list[RouterPair] = []
        node = target
        while node != source:
            edge = predecessors[node]
            path.append(edge)
            node = edge.from_id
        path.reverse()
        return path


__all__ = ["PathGraph"]

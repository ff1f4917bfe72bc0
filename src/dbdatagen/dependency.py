"""Foreign key dependency graph used to order tables in generated documents."""

import logging
from collections import defaultdict, deque

logger = logging.getLogger(__name__)


class DependencyGraph:
    """Directed graph of "table references table" edges."""

    def __init__(self):
        self._graph: dict[str, set[str]] = defaultdict(set)
        self._tables: list[str] = []

    def add_table(self, table: str) -> None:
        """Add a table to the graph."""
        if table not in self._graph:
            self._tables.append(table)
            self._graph[table] = set()

    def add_dependency(self, table: str, depends_on: str) -> None:
        """Add a dependency: table references depends_on. Self-references are ignored."""
        self.add_table(table)
        self.add_table(depends_on)
        if table != depends_on:
            self._graph[table].add(depends_on)

    def get_dependencies(self, table: str) -> list[str]:
        """Get all tables that this table references."""
        return sorted(self._graph.get(table, set()))

    def topological_sort(self) -> list[str]:
        """
        Sort tables so referenced tables load before the tables that reference them.

        Uses Kahn's algorithm, keeping insertion order among independent
        tables. Tables caught in a reference cycle cannot be ordered; they
        are appended at the end in insertion order with a warning.

        Returns:
            Every table, dependencies first
        """
        in_degree = {table: len(self._graph[table]) for table in self._tables}
        queue = deque(table for table in self._tables if in_degree[table] == 0)
        result = []

        while queue:
            table = queue.popleft()
            result.append(table)

            # Tables that reference this one lose a dependency
            for other in self._tables:
                if table in self._graph[other]:
                    in_degree[other] -= 1
                    if in_degree[other] == 0:
                        queue.append(other)

        if len(result) != len(self._tables):
            cyclic = [table for table in self._tables if table not in result]
            logger.warning(
                f"Circular foreign keys between {', '.join(cyclic)}; "
                f"these tables keep their original order"
            )
            result.extend(cyclic)

        return result

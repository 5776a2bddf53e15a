"""Cancellation edges: the reverse half of the residual graph.

Entry ``(x, y)`` holds the flow currently carried by forward edges ``y -> x``.
While that amount is positive, ``x -> y`` is a traversable arc that lets a
later augmenting path cancel the earlier flow.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple


class CancellationEdges:
    """Per-vertex map of cancellation arcs and the flow they may cancel."""

    def __init__(self, vertex_count: int) -> None:
        self._rows: List[Dict[int, int]] = [{} for _ in range(vertex_count)]

    def register(self, source: int, target: int) -> None:
        """Create the zero placeholder for the reverse of ``source -> target``."""
        self._rows[target].setdefault(source, 0)

    def amount(self, tail: int, head: int) -> int:
        return self._rows[tail].get(head, 0)

    def add(self, tail: int, head: int, amount: int) -> None:
        row = self._rows[tail]
        row[head] = row.get(head, 0) + amount

    def cancel(self, tail: int, head: int, amount: int) -> None:
        """Remove ``amount`` from arc ``tail -> head``.

        Raises:
            AssertionError: If the arc holds less than ``amount``.
        """
        current = self.amount(tail, head)
        assert current >= amount, (
            f"cannot cancel {amount} on {tail}->{head}, only {current} recorded"
        )
        self._rows[tail][head] = current - amount

    def successors(self, tail: int) -> Iterator[Tuple[int, int]]:
        """Yield ``(head, amount)`` for arcs leaving ``tail`` with a positive amount.

        Heads are yielded in ascending index order.
        """
        row = self._rows[tail]
        for head in sorted(row):
            amount = row[head]
            if amount > 0:
                yield head, amount

    def clear(self) -> None:
        """Zero every amount, keeping the placeholders."""
        for row in self._rows:
            for head in row:
                row[head] = 0

    def __len__(self) -> int:
        """Number of registered arcs, placeholders included."""
        return sum(len(row) for row in self._rows)

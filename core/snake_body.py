# core/snake_body.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Tuple
from .errors import ContractViolation
from .interfaces import Coordinate, Direction

class Snake:
    """
    Ordered body of grid cells, head at index 0 and tail at the end.

    Growth is queued: `grow(n)` only bumps a counter, and each later `move`
    keeps the tail instead of dropping it until the counter is used up.
    """

    def __init__(self, segments: Iterable[Tuple[int, int]]):
        self.body: Deque[Coordinate] = deque(Coordinate(*s) for s in segments)
        if not self.body:
            raise ContractViolation("a snake needs at least one segment")
        # same shape `move` builds: each segment one orthogonal step from the previous
        for a, b in zip(self.body, list(self.body)[1:]):
            if abs(a.x - b.x) + abs(a.y - b.y) != 1:
                raise ContractViolation(f"segments {tuple(a)} and {tuple(b)} are not adjacent")
        if not self.has_unique_segments():
            raise ContractViolation("initial segments must not repeat")
        self.pending_growth = 0

    @property
    def heading(self) -> Optional[Direction]:
        """Direction from the neck to the head, None for a one-segment snake."""
        if len(self.body) < 2:
            return None
        h, n = self.body[0], self.body[1]
        return Direction((h.x - n.x, h.y - n.y))

    @property
    def head(self) -> Coordinate:
        return self.body[0]

    @property
    def tail(self) -> Coordinate:
        return self.body[-1]

    @property
    def segments(self) -> Tuple[Coordinate, ...]:
        return tuple(self.body)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.body)

    def __contains__(self, c) -> bool:
        return c in self.body

    def __len__(self) -> int:
        return self.effective_length()

    def move(self, direction: Direction) -> None:
        if not self.body:
            raise ContractViolation("cannot move an empty snake")
        new_head = direction.step(self.head)
        # reversal must be resolved by the caller before moving
        if len(self.body) > 1 and new_head == self.body[1]:
            raise ContractViolation(f"moving {direction.name} folds the head onto the neck")
        self.body.appendleft(new_head)
        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self.body.pop()

    def grow(self, n: int) -> None:
        if n < 0:
            raise ContractViolation(f"cannot grow by a negative amount ({n})")
        self.pending_growth += n

    def will_grow(self) -> bool:
        return self.pending_growth > 0

    def effective_length(self) -> int:
        return len(self.body) + self.pending_growth

    def has_unique_segments(self) -> bool:
        return len(set(self.body)) == len(self.body)

    def push_back_segment(self, c: Tuple[int, int]) -> None:
        """Append a tail segment directly. It must touch the current tail
        (Chebyshev distance <= 1) and must not already be part of the body."""
        seg = Coordinate(*c)
        tx, ty = self.tail
        if max(abs(seg.x - tx), abs(seg.y - ty)) > 1:
            raise ContractViolation(f"segment {tuple(seg)} is not adjacent to tail {tuple(self.tail)}")
        if seg in self.body:
            raise ContractViolation(f"segment {tuple(seg)} is already part of the snake")
        self.body.append(seg)

    def __repr__(self):
        return f"<Snake len={len(self.body)} pending={self.pending_growth} head={tuple(self.head)}>"

"""Draws a tree of game objects in z-index order."""

from __future__ import annotations

import heapq
import itertools
from typing import Iterable, Iterator, List, Optional

from .game_object import GameObject


class Renderer:
    """Holds root game objects and draws them with all their descendants."""

    def __init__(self, children: Optional[Iterable[GameObject]] = None) -> None:
        self._children: List[GameObject] = list(children) if children is not None else []

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def add_child(self, child: GameObject) -> None:
        """Add a root object."""
        self._children.append(child)

    def add_children(self, children: Iterable[GameObject]) -> None:
        """Add several root objects in order."""
        self._children.extend(children)

    def remove_child(self, child: GameObject) -> None:
        """Remove every occurrence of a root object."""
        self._children[:] = [c for c in self._children if c is not child]

    def update(self) -> None:
        """Draw every object in the tree, lowest z-index first."""
        order = itertools.count()
        queue = []
        stack = list(self._children)
        while stack:
            current = stack.pop()
            heapq.heappush(queue, (current.z_index, next(order), current))
            stack.extend(current.children)
        while queue:
            _, _, current = heapq.heappop(queue)
            current.draw()
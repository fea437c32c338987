"""Disjoint-sets (union-find) built on a parent map and a child multimap."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Partition(Generic[T]):
    """A partition of a set of elements into disjoint parts.

    Besides the usual parent links, each element keeps track of its children,
    so that every element of a part can be enumerated from its representative.
    """

    def __init__(self) -> None:
        self._ranks: dict[T, int] = {}
        self._parent: dict[T, T] = {}
        self._children: dict[T, set[T]] = {}

    @classmethod
    def from_parts(cls, parts: Iterable[Iterable[T]]) -> Partition[T]:
        """Build a partition from an iterable of parts.

        The first element of each part becomes its representative and every
        other element of the part becomes its direct child.
        """
        ret = cls()
        for part in parts:
            items = iter(part)
            for rep in items:
                ret._ranks[rep] = 1
                for child in items:
                    ret._ranks[child] = 0
                    ret._parent[child] = rep
                    ret._children.setdefault(rep, set()).add(child)
        return ret

    def insert(self, elt: T) -> None:
        """Add a new element as a part of its own.

        Raises ValueError if the element is already present.
        """
        if elt in self._ranks:
            raise ValueError(f"tried to insert an element twice: {elt!r}")
        self._ranks[elt] = 0

    def is_rep(self, elt: T) -> bool:
        """Is the given element the representative of its part?"""
        return elt not in self._parent

    def merge(self, elt1: T, elt2: T) -> bool:
        """Merge the parts of two elements.

        Returns True if a merge happened, False if they were already together.
        """
        rep1 = self.representative_mut(elt1)
        rep2 = self.representative_mut(elt2)
        if rep1 == rep2:
            return False
        self._merge_reps(rep1, rep2)
        return True

    def _merge_reps(self, rep1: T, rep2: T) -> None:
        rank1 = self._ranks[rep1]
        rank2 = self._ranks[rep2]
        if rank1 <= rank2:
            child, parent = rep1, rep2
            if rank1 == rank2:
                self._ranks[rep2] = rank2 + 1
        else:
            child, parent = rep2, rep1
        self._parent[child] = parent
        self._children.setdefault(parent, set()).add(child)

    def representative_mut(self, elt: T) -> T:
        """Return the representative of the element's part, reparenting the
        element directly under it."""
        rep = self.representative(elt)
        orig_parent = self._parent.get(elt)
        if orig_parent is not None and orig_parent != rep:
            siblings = self._children[orig_parent]
            siblings.discard(elt)
            if not siblings:
                del self._children[orig_parent]
            self._children.setdefault(rep, set()).add(elt)
            self._parent[elt] = rep
        return rep

    def representative(self, elt: T) -> T:
        """Return the representative of the element's part.

        Raises KeyError if the element is not in the partition.
        """
        if elt not in self._ranks:
            raise KeyError(elt)
        ret = elt
        while ret in self._parent:
            ret = self._parent[ret]
        return ret

    def same_part_mut(self, elt1: T, elt2: T) -> bool:
        """Do the two elements share a part? Compresses paths on the way."""
        return self.representative_mut(elt1) == self.representative_mut(elt2)

    def same_part(self, elt1: T, elt2: T) -> bool:
        """Do the two elements share a part?"""
        return self.representative(elt1) == self.representative(elt2)

    def __contains__(self, elt: object) -> bool:
        return elt in self._ranks

    def remove_part(self, elt: T) -> None:
        """Remove every element of the part containing the given element."""
        for e in list(self.iter_part(elt)):
            self._parent.pop(e, None)
            self._ranks.pop(e, None)
            self._children.pop(e, None)

    def iter_part(self, elt: T) -> Iterator[T]:
        """Iterate over every element in the part containing the given element."""
        root = self.representative(elt)
        return self._walk(root)

    def _walk(self, root: T) -> Iterator[T]:
        stack: list[Iterator[T]] = [iter((root,))]
        while stack:
            item = next(stack[-1], _SENTINEL)
            if item is _SENTINEL:
                stack.pop()
                continue
            stack.append(iter(list(self._children.get(item, ()))))
            yield item

    def iter_parts(self) -> Iterator[Iterator[T]]:
        """Iterate over the parts, each given as an iterator over its elements."""
        reps = [elt for elt in self._ranks if self.is_rep(elt)]
        try:
            reps.sort()
        except TypeError:
            pass
        for rep in reps:
            yield self.iter_part(rep)


_SENTINEL = object()
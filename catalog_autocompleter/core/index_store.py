# index_store.py
# Holder for the live Index.
# replace() is one attribute assignment, which the interpreter performs
# atomically: a reader that called current() keeps whichever complete Index it
# got, old or new, for as long as it needs it. No locks on either side.

from __future__ import annotations

from typing import Optional

from .index_builder import Index


class IndexStore:
    """Single swappable reference to the currently published Index."""

    __slots__ = ("_index",)

    def __init__(self, index: Optional[Index] = None) -> None:
        self._index = index if index is not None else Index.empty()

    def replace(self, new_index: Index) -> None:
        """Publish `new_index`; the previous one is left to in-flight readers."""
        self._index = new_index

    def current(self) -> Index:
        """The live Index. Read-only: never mutate what you get back."""
        return self._index

"""A trie keyed by dot-separated paths."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

Segmenter = Callable[[str, int], "tuple[str, int]"]


def default_segmenter(path: str, start: int) -> tuple[str, int]:
    """Return the segment at start (keeping its leading dot) and the next start, or -1."""
    if not path or start < 0 or start > len(path) - 1:
        return "", -1
    end = path.find(".", start + 1)
    if end == -1:
        return path[start:], -1
    return path[start:end], end


class Trie:
    """Stores values under keys split into segments by a segmenter."""

    def __init__(self, segmenter: Segmenter = default_segmenter) -> None:
        self._segmenter = segmenter
        self.value: Any = None
        self._children: dict[str, Trie] = {}

    @property
    def children(self) -> Mapping[str, "Trie"]:
        return MappingProxyType(self._children)

    def _segments(self, key: str) -> Iterator[str]:
        part, index = self._segmenter(key, 0)
        while part:
            yield part
            part, index = self._segmenter(key, index)

    def get(self, key: str) -> Any:
        """The value stored under key, or None."""
        node = self
        for part in self._segments(key):
            node = node._children.get(part)
            if node is None:
                return None
        return node.value

    def put(self, key: str, value: Any) -> bool:
        """Store value under key; True if the key held no value before."""
        node = self
        for part in self._segments(key):
            child = node._children.get(part)
            if child is None:
                child = Trie(self._segmenter)
                node._children[part] = child
            node = child
        is_new = node.value is None
        node.value = value
        return is_new

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield (key, value) for every node holding a value."""
        yield from self._walk("")

    def _walk(self, key: str) -> Iterator[tuple[str, Any]]:
        if self.value is not None:
            yield key, self.value
        for part, child in self._children.items():
            yield from child._walk(key + part)

    def is_leaf(self) -> bool:
        return not self._children
"""Print nested key/value fields as a text tree."""

from __future__ import annotations

from typing import Any, Iterator, Mapping, TextIO

from ocmtools.trie import Trie, default_segmenter

_EMPTY_SPACE = "    "
_MIDDLE_ITEM = "├── "
_CONTINUE_ITEM = "│   "
_LAST_ITEM = "└── "

_Node = "tuple[str, list]"


def _format(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _render_text(text: str, spaces: list[bool], last: bool) -> str:
    prefix = "".join(_EMPTY_SPACE if space else _CONTINUE_ITEM for space in spaces)
    first, *rest = text.split("\n")
    out = prefix + (_LAST_ITEM if last else _MIDDLE_ITEM) + first + "\n"
    indent = _EMPTY_SPACE if last else _CONTINUE_ITEM
    return out + "".join(prefix + indent + line + "\n" for line in rest)


def _render_items(items: list, spaces: list[bool]) -> Iterator[str]:
    for position, (text, children) in enumerate(items):
        last = position == len(items) - 1
        yield _render_text(text, spaces, last)
        if children:
            yield from _render_items(children, [*spaces, last])


class TreePrinter:
    """Collects dotted-key fields and prints them as a tree under a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._trie = Trie(default_segmenter)

    def add_fields(self, name: str, fields: Mapping[str, Any] | None) -> None:
        """Add an object named name whose fields use keys like ".a.b"."""
        if fields is None:
            return
        self._trie.put(name, "")
        for key, value in fields.items():
            self._trie.put(name + key, value)

    def _build(self, part: str, node: Trie) -> tuple[str, list]:
        text = f"<{part}> {_format(node.value)}"
        children = [
            self._build(key.removeprefix("."), child)
            for key, child in node.children.items()
        ]
        return text, children

    def render(self) -> str:
        """The tree as text."""
        text, items = self._build(self.name, self._trie)
        return text + "\n" + "".join(_render_items(items, []))

    def print(self, stream: TextIO) -> None:
        stream.write(self.render())
"""Plain-text tables and trees for terminal output."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, List, Sequence


class Table:
    """Fixed-width text table with a header and a ``-|-`` separator line."""

    def __init__(self, *headers: str):
        self.headers: List[str] = list(headers)
        self.rows: List[List[str]] = []

    def add_row(self, *cells: str) -> None:
        self.rows.append(list(cells))

    def _widths(self) -> List[int]:
        widths = [len(h) for h in self.headers]
        for row in self.rows:
            for i, cell in enumerate(row[: len(widths)]):
                widths[i] = max(widths[i], len(cell))
        return widths

    @staticmethod
    def _line(cells: Sequence[str], widths: Sequence[int]) -> str:
        padded = []
        for i, width in enumerate(widths):
            value = cells[i] if i < len(cells) else ""
            padded.append(value.ljust(width))
        return " | ".join(padded)

    def render(self) -> str:
        if not self.headers:
            return ""
        widths = self._widths()
        lines = [self._line(self.headers, widths), "-|-".join("-" * w for w in widths)]
        lines.extend(self._line(row, widths) for row in self.rows)
        return "".join(line + "\n" for line in lines)


@dataclasses.dataclass
class TreeNode:
    label: str
    children: List["TreeNode"] = dataclasses.field(default_factory=list)


def _render_children(children: Sequence[TreeNode], prefix: str) -> List[str]:
    lines: List[str] = []
    for i, child in enumerate(children):
        last = i == len(children) - 1
        lines.append(prefix + ("└── " if last else "├── ") + child.label)
        if child.children:
            lines.extend(_render_children(child.children, prefix + ("    " if last else "│   ")))
    return lines


def render_tree(root: TreeNode) -> str:
    """Render ``root`` and its descendants with box-drawing connectors."""
    lines = [root.label] + _render_children(root.children, "")
    return "".join(line + "\n" for line in lines)


def dump_json(data: Any) -> str:
    """Pretty-print decoded data with a two-space indent."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"

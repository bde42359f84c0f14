"""
Line diff entity used by the diff command.

The comparison is deliberately simple: a common-prefix scan producing either a
single append/delete block or per-line changes (normal format), and a single
hunk for the unified format. It is exact only for one contiguous edit region.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

UNIFIED_CONTEXT = 3


class EditKind(Enum):
    ADD = "a"
    DELETE = "d"
    CHANGE = "c"


@dataclass(frozen=True)
class EditGroup:
    """One ed-style edit with 1-based line numbers."""

    kind: EditKind
    old_start: int
    old_end: int
    new_start: int
    new_end: int
    old_lines: tuple[str, ...] = ()
    new_lines: tuple[str, ...] = ()

    def header(self) -> str:
        if self.kind is EditKind.ADD:
            return f"{self.old_start}a{self.new_start},{self.new_end}"
        if self.kind is EditKind.DELETE:
            return f"{self.old_start},{self.old_end}d{self.new_start}"
        return f"{self.old_start}c{self.new_start}"

    def render(self) -> list[str]:
        lines = [self.header()]
        lines.extend(f"< {line}" for line in self.old_lines)
        if self.kind is EditKind.CHANGE:
            lines.append("---")
        lines.extend(f"> {line}" for line in self.new_lines)
        return lines


@dataclass
class UnifiedHunk:
    """The single ``@@`` hunk of a unified diff."""

    old_start: int
    old_len: int
    new_start: int
    new_len: int
    lines: list[tuple[str, str]] = field(default_factory=list)

    def header(self) -> str:
        return (
            f"@@ -{self.old_start},{self.old_len} "
            f"+{self.new_start},{self.new_len} @@"
        )


class LineDiff:
    """
    Comparison of two texts split on newlines.

    A trailing newline produces a final empty element; it is kept in both
    sequences so line counts stay consistent across output formats.
    """

    def __init__(self, old_text: str, new_text: str):
        self.old_text = old_text
        self.new_text = new_text
        self.old_lines = old_text.split("\n")
        self.new_lines = new_text.split("\n")

    @property
    def identical(self) -> bool:
        return self.old_text == self.new_text

    def common_prefix_length(self) -> int:
        """Count leading lines shared by both sequences."""
        limit = min(len(self.old_lines), len(self.new_lines))
        prefix = 0
        while prefix < limit and self.old_lines[prefix] == self.new_lines[prefix]:
            prefix += 1
        return prefix

    def edit_groups(self) -> list[EditGroup]:
        """
        Compute the ed-style edit groups.

        Returns:
            A single append or delete group when the lengths differ, otherwise
            one change group per differing line after the common prefix
        """
        old, new = self.old_lines, self.new_lines
        prefix = self.common_prefix_length()

        if len(old) == len(new) and prefix == len(old):
            return []

        if len(old) < len(new):
            return [
                EditGroup(
                    EditKind.ADD,
                    old_start=prefix,
                    old_end=prefix,
                    new_start=prefix + 1,
                    new_end=len(new),
                    new_lines=tuple(new[prefix:]),
                )
            ]

        if len(old) > len(new):
            return [
                EditGroup(
                    EditKind.DELETE,
                    old_start=prefix + 1,
                    old_end=len(old),
                    new_start=prefix,
                    new_end=prefix,
                    old_lines=tuple(old[prefix:]),
                )
            ]

        return [
            EditGroup(
                EditKind.CHANGE,
                old_start=i + 1,
                old_end=i + 1,
                new_start=i + 1,
                new_end=i + 1,
                old_lines=(old[i],),
                new_lines=(new[i],),
            )
            for i in range(prefix, len(old))
            if old[i] != new[i]
        ]

    def unified_hunk(self, context: int = UNIFIED_CONTEXT) -> Optional[UnifiedHunk]:
        """
        Compute the single unified hunk, opened at the first differing position.

        Lines are compared position by position; after the first difference
        every equal position is emitted as context.

        Args:
            context: Number of leading context lines

        Returns:
            The hunk, or None when both sequences are equal
        """
        old, new = self.old_lines, self.new_lines
        hunk: Optional[UnifiedHunk] = None

        for i in range(max(len(old), len(new))):
            old_line = old[i] if i < len(old) else None
            new_line = new[i] if i < len(new) else None

            if old_line != new_line:
                if hunk is None:
                    start = max(0, i - context)
                    hunk = UnifiedHunk(
                        old_start=start + 1,
                        old_len=len(old),
                        new_start=start + 1,
                        new_len=len(new),
                    )
                    hunk.lines.extend((" ", old[j]) for j in range(start, i))
                if old_line is not None:
                    hunk.lines.append(("-", old_line))
                if new_line is not None:
                    hunk.lines.append(("+", new_line))
            elif hunk is not None and old_line is not None:
                hunk.lines.append((" ", old_line))

        return hunk

    def render_normal(self) -> str:
        """Render the edit groups in normal (ed-style) format."""
        lines: list[str] = []
        for group in self.edit_groups():
            lines.extend(group.render())
        return "\n".join(lines) + ("\n" if lines else "")

    def render_unified(self, old_label: str, new_label: str) -> str:
        """Render the ``---``/``+++`` header pair followed by the hunk."""
        lines = [f"--- {old_label}", f"+++ {new_label}"]
        hunk = self.unified_hunk()
        if hunk is not None:
            lines.append(hunk.header())
            lines.extend(f"{tag}{text}" for tag, text in hunk.lines)
        return "\n".join(lines) + ("\n" if len(lines) > 2 else "")

"""In-memory buffer model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Buffer:
    """One named, ordered sequence of text lines.

    ``lines`` is stored 0-based; callers address it 1-based.
    """

    name: str
    lines: list[str] = field(default_factory=list)
    source_path: str = ""
    is_modified: bool = False

    def __len__(self) -> int:
        return len(self.lines)

    def has_line(self, number: int) -> bool:
        return 1 <= number <= len(self.lines)

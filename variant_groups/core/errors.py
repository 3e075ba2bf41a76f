from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GroupingError(Exception):
    """Base error envelope. The CLI prints these instead of raw tracebacks."""

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.path:
            parts.append(self.path)
        loc = ":".join(parts) if parts else "<input>"
        return f"{loc}: {self.code}: {self.message}"


class UnbalancedGroupingError(GroupingError):
    pass


class SourceLoadError(GroupingError):
    pass


class DialectConfigError(ValueError):
    pass

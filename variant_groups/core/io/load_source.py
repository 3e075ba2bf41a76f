from __future__ import annotations

from pathlib import Path

from variant_groups.core.errors import SourceLoadError


def read_source(path: str | Path) -> str:
    """Read a host source file as UTF-8 text."""

    p = Path(path)
    if not p.exists():
        raise SourceLoadError(
            code="E_FILE_NOT_FOUND",
            message="file does not exist",
            file=str(p),
        )

    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(code="E_FILE_READ", message=str(e), file=str(p)) from e


def write_source(path: str | Path, text: str) -> None:
    p = Path(path)
    if str(p.parent) not in (".", ""):
        p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from variant_groups.core.errors import UnbalancedGroupingError
from variant_groups.core.expand import expand
from variant_groups.core.expand.tokenizer import GROUP_OPEN
from variant_groups.core.io.load_source import read_source
from variant_groups.core.transform.dialect_config import Dialect, TransformConfig

logger = logging.getLogger(__name__)


def is_candidate(path: str | Path, config: TransformConfig) -> bool:
    name = Path(path).name.lower()
    return any(name.endswith(s) for s in config.suffixes)


def transform_source(
    code: str,
    config: Optional[TransformConfig] = None,
    *,
    file: Optional[str] = None,
) -> str:
    """Expand grouped variants inside every class value the dialects match.

    Dialects run in order over the output of the previous one. A captured
    value is only expanded when it contains ``(``; everything outside the
    capture group is kept byte for byte.
    """
    cfg = config or TransformConfig()
    out = code
    for dialect in cfg.dialects:
        out = _apply_dialect(out, dialect, cfg.strict, file)
    return out


def transform_file(path: str | Path, config: Optional[TransformConfig] = None) -> Optional[str]:
    """Return the transformed text, or None when the suffix is not handled."""
    cfg = config or TransformConfig()
    if not is_candidate(path, cfg):
        logger.debug("skipping %s: unsupported suffix", path)
        return None
    code = read_source(path)
    return transform_source(code, cfg, file=str(path))


def _apply_dialect(code: str, dialect: Dialect, strict: bool, file: Optional[str]) -> str:
    def replace(m: re.Match[str]) -> str:
        value = m.group(1)
        if GROUP_OPEN not in value:
            return m.group(0)
        try:
            expanded = expand(value)
        except UnbalancedGroupingError as e:
            located = UnbalancedGroupingError(
                code=e.code,
                message=f"{e.message} in {dialect.name} value {value!r}",
                file=file,
                path=f"offset {m.start(1)}",
            )
            if strict:
                raise located from e
            logger.warning("%s (left unchanged)", located)
            return m.group(0)

        logger.debug("%s: %r -> %r", dialect.name, value, expanded)
        start = m.start(1) - m.start(0)
        end = m.end(1) - m.start(0)
        whole = m.group(0)
        return whole[:start] + expanded + whole[end:]

    return dialect.pattern.sub(replace, code)

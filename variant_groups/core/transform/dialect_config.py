from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from variant_groups.core.errors import DialectConfigError


DEFAULT_DIALECTS: dict[str, str] = {
    # React / JSX
    "className": r'className\s*=\s*"(.*?)"',
    # twin.macro template literals
    "tw": r"tw`([^`]+)`",
    # Blade, Vue, plain HTML
    "class": r'class\s*=\s*"(.*?)"',
}

DEFAULT_SUFFIXES: tuple[str, ...] = (".jsx", ".tsx", ".js", ".ts", ".vue", ".php", ".blade.php")


@dataclass(frozen=True)
class Dialect:
    name: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class TransformConfig:
    dialects: list[Dialect] = field(default_factory=lambda: compile_dialects(DEFAULT_DIALECTS))
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    # strict: an unbalanced value aborts the whole transform.
    strict: bool = True


def compile_dialect(name: str, pattern: str) -> Dialect:
    try:
        rx = re.compile(pattern, re.DOTALL)
    except re.error as e:
        raise DialectConfigError(f"dialect '{name}' pattern does not compile: {e}") from e
    if rx.groups != 1:
        raise DialectConfigError(
            f"dialect '{name}' pattern must have exactly one capture group (got {rx.groups})"
        )
    return Dialect(name=name, pattern=rx)


def compile_dialects(dialects: dict[str, str]) -> list[Dialect]:
    return [compile_dialect(name, pattern) for name, pattern in dialects.items()]


def load_dialect_file(path: str | Path) -> dict[str, str]:
    """Load dialects from a YAML file.

    Format:
      <name>:
        pattern: '<regex with one capture group>'

    Returns a mapping of dialect name -> pattern source.
    """
    p = Path(path)
    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DialectConfigError("dialect file must be a mapping of name -> {pattern: str}")

    out: dict[str, str] = {}
    for k, v in raw.items():
        if not isinstance(k, str) or not k.strip():
            raise DialectConfigError("dialect names must be non-empty strings")
        if not isinstance(v, dict) or "pattern" not in v:
            raise DialectConfigError(f"dialect '{k}' must be a mapping with a 'pattern' key")
        pattern = v["pattern"]
        if not isinstance(pattern, str) or not pattern:
            raise DialectConfigError(f"dialect '{k}' pattern must be a non-empty string")
        compile_dialect(k, pattern)
        out[k.strip()] = pattern
    return out


def merged_dialects(overrides: dict[str, str] | None = None) -> dict[str, str]:
    """Return DEFAULT_DIALECTS merged with optional overrides.

    Overrides replace dialects of the same name (keeping their position) and
    new ones are applied after the defaults.
    """
    merged = dict(DEFAULT_DIALECTS)
    if overrides:
        for k, v in overrides.items():
            merged[k] = v
    return merged


def load_and_merge(dialect_file: str | None) -> dict[str, str]:
    if not dialect_file:
        return merged_dialects()
    overrides = load_dialect_file(dialect_file)
    return merged_dialects(overrides)


def build_config(dialect_file: str | None = None, *, strict: bool = True) -> TransformConfig:
    return TransformConfig(dialects=compile_dialects(load_and_merge(dialect_file)), strict=strict)

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from variant_groups.core.errors import (
    DialectConfigError,
    GroupingError,
    SourceLoadError,
    UnbalancedGroupingError,
)
from variant_groups.core.expand import expand
from variant_groups.core.io.load_source import read_source, write_source
from variant_groups.core.logging_config import setup_logging
from variant_groups.core.transform.dialect_config import (
    TransformConfig,
    build_config,
)
from variant_groups.core.transform.transform_source import is_candidate, transform_source

app = typer.Typer(add_completion=False, no_args_is_help=True)

logger = logging.getLogger(__name__)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", help="Only log warnings and errors"),
) -> None:
    """Grouped variant expansion CLI."""
    if verbose:
        setup_logging(logging.DEBUG)
    elif quiet:
        setup_logging(logging.WARNING)
    else:
        setup_logging(logging.INFO)


@app.command("expand")
def expand_cmd(
    text: str = typer.Argument(..., help="Class string, e.g. 'md:(pl-3 pt-2)'"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Expand one class string."""
    if format not in ("text", "json"):
        err = GroupingError(
            code="E_EXPAND_UNKNOWN_FORMAT",
            message=f"unknown format: {format} (choose one of: text, json)",
            file=None,
            path="format",
        )
        _print_errors([err])
        raise typer.Exit(code=2)

    def _emit_json(ok: bool, output: str | None, errors: list[GroupingError], exit_code: int) -> None:
        payload = {
            "tool": "variant-groups",
            "command": "expand",
            "ok": ok,
            "input": text,
            "output": output,
            "error_count": len(errors),
            "errors": [
                {"code": e.code, "message": e.message, "path": e.path, "severity": "error"}
                for e in errors
            ],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=exit_code)

    try:
        result = expand(text)
    except UnbalancedGroupingError as e:
        if format == "json":
            _emit_json(False, None, [e], 2)
        _print_errors([e])
        raise typer.Exit(code=2)

    if format == "json":
        _emit_json(True, result, [], 0)
    typer.echo(result)


@app.command("transform")
def transform_cmd(
    path: str = typer.Argument(..., help="Source file (.jsx/.tsx/.js/.ts/.vue/.php/.blade.php)"),
    out: str | None = typer.Option(None, "--out", help="Write here instead of stdout"),
    dialect_file: str | None = typer.Option(
        None,
        "--dialect-file",
        help="Optional YAML file to add/override class dialects",
    ),
    lenient: bool = typer.Option(
        False, "--lenient", help="Leave unbalanced values untouched instead of failing"
    ),
    check: bool = typer.Option(
        False, "--check", help="Write nothing; exit 1 if the file would change"
    ),
) -> None:
    """Expand grouped variants inside the class attributes of a source file."""
    config = _load_config(dialect_file, strict=not lenient)

    if not is_candidate(path, config):
        _print_errors(
            [
                SourceLoadError(
                    code="E_UNSUPPORTED_FORMAT",
                    message=f"supported suffixes are {', '.join(config.suffixes)}",
                    file=path,
                )
            ]
        )
        raise typer.Exit(code=1)

    try:
        code = read_source(path)
    except SourceLoadError as e:
        _print_errors([e])
        raise typer.Exit(code=1)

    try:
        result = transform_source(code, config, file=path)
    except UnbalancedGroupingError as e:
        _print_errors([e])
        raise typer.Exit(code=2)

    changed = result != code
    if check:
        if changed:
            typer.echo(f"would transform {path}")
            raise typer.Exit(code=1)
        typer.echo(f"OK: {path} unchanged")
        return

    if out is None:
        typer.echo(result, nl=False)
        return

    write_source(out, result)
    logger.info("wrote %s (changed=%s)", out, changed)
    typer.echo(f"OK: wrote {out}")


@app.command("dialects")
def dialects_cmd(
    dialect_file: str | None = typer.Option(
        None,
        "--dialect-file",
        help="Optional YAML file to add/override class dialects",
    ),
) -> None:
    """List the class-attribute dialects the transform applies, in order."""
    config = _load_config(dialect_file)

    table = Table(title="Dialects")
    table.add_column("Name")
    table.add_column("Pattern")
    for d in config.dialects:
        table.add_row(d.name, Text(d.pattern.pattern))
    Console(width=200).print(table)


def _load_config(dialect_file: str | None, *, strict: bool = True) -> TransformConfig:
    try:
        return build_config(dialect_file, strict=strict)
    except FileNotFoundError:
        _print_errors(
            [
                SourceLoadError(
                    code="E_DIALECT_FILE_NOT_FOUND",
                    message=f"dialect file not found: {dialect_file}",
                    file=None,
                    path="dialect_file",
                )
            ]
        )
        raise typer.Exit(code=1)
    except DialectConfigError as e:
        _print_errors(
            [
                GroupingError(
                    code="E_DIALECT_FILE_INVALID",
                    message=str(e),
                    file=None,
                    path="dialect_file",
                )
            ]
        )
        raise typer.Exit(code=2)


def _print_errors(errors: list[GroupingError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="variant-groups")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()

"""Command-line interface for Verspan."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from verspan.config import VerspanConfig, load_config
from verspan.errors import ErrorCategory, VerspanError
from verspan.interval.boundary import Boundary
from verspan.versioning.compare import version_sort_key
from verspan.versioning.interval import VersionInterval
from verspan.versioning.qualifiers import extract_qualifier
from verspan.versioning.registry import SchemeRegistry
from verspan.versioning.schemes import VersionScheme

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="verspan",
    help="Compare, sort and range-check version strings",
    add_completion=False,
)


# =============================================================================
# Error handling
# =============================================================================


class ErrorCode(Enum):
    """CLI exit codes."""

    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INTERVAL_ERROR = 20
    FORMAT_ERROR = 21
    SCHEME_ERROR = 22
    CONFIG_INVALID = 31


_CATEGORY_CODES: dict[ErrorCategory, ErrorCode] = {
    ErrorCategory.INTERVAL: ErrorCode.INTERVAL_ERROR,
    ErrorCategory.FORMAT: ErrorCode.FORMAT_ERROR,
    ErrorCategory.SCHEME: ErrorCode.SCHEME_ERROR,
    ErrorCategory.CONFIGURATION: ErrorCode.CONFIG_INVALID,
}

_CATEGORY_HINTS: dict[ErrorCategory, str] = {
    ErrorCategory.INTERVAL: "The lower bound must not exceed the upper bound; a single-version range must be closed.",
    ErrorCategory.FORMAT: "Use a scheme whose build format matches its build delimiter.",
    ErrorCategory.SCHEME: "Run 'verspan schemes' to list the available schemes.",
    ErrorCategory.CONFIGURATION: "Check the configuration file format and values.",
}

F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(func: F) -> F:
    """Convert Verspan errors into coloured messages and exit codes."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except VerspanError as e:
            typer.echo(typer.style(f"Error: {e.message}", fg="red"), err=True)
            hint = _CATEGORY_HINTS.get(e.category)
            if hint:
                typer.echo(typer.style(f"Hint: {hint}", fg="yellow"), err=True)
            raise typer.Exit(_CATEGORY_CODES.get(e.category, ErrorCode.GENERAL_ERROR).value)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore


# =============================================================================
# Shared state
# =============================================================================


@dataclass
class CliState:
    """Configuration and registry shared by all commands."""

    config: VerspanConfig
    registry: SchemeRegistry

    def scheme(self, code: str | None) -> VersionScheme:
        if code:
            return self.registry.get(code)
        return self.config.resolve_default_scheme(self.registry)


def _state(ctx: typer.Context) -> CliState:
    if not isinstance(ctx.obj, CliState):
        config = load_config()
        ctx.obj = CliState(config, config.build_registry())
    return ctx.obj


SchemeOption = Annotated[
    Optional[str],
    typer.Option("--scheme", "-s", help="Version scheme code (default from configuration)"),
]


@app.callback()
@error_boundary
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file (YAML, TOML or JSON)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Compare, sort and range-check version strings."""
    loaded = load_config(config)
    logging.basicConfig(
        level=logging.DEBUG if verbose else loaded.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliState(loaded, loaded.build_registry())


# =============================================================================
# Commands
# =============================================================================


@app.command(name="compare")
@error_boundary
def compare_cmd(
    ctx: typer.Context,
    left: Annotated[str, typer.Argument(help="Left version")],
    right: Annotated[str, typer.Argument(help="Right version")],
    scheme: SchemeOption = None,
) -> None:
    """Compare two versions.

    Examples:
        verspan compare 1.0-rc1 1.0
        verspan compare 1.2.3+7 1.2.3+8 --scheme semver-build-ordered
    """
    resolved = _state(ctx).scheme(scheme)
    result = resolved.compare(resolved.parse(left), resolved.parse(right))
    symbol = "<" if result < 0 else ">" if result > 0 else "="
    typer.echo(f"{left} {symbol} {right}")


@app.command(name="sort")
@error_boundary
def sort_cmd(
    ctx: typer.Context,
    versions: Annotated[list[str], typer.Argument(help="Versions to sort")],
    scheme: SchemeOption = None,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", "-r", help="Highest version first"),
    ] = False,
) -> None:
    """Sort versions by precedence, one per line."""
    resolved = _state(ctx).scheme(scheme)
    key = version_sort_key(resolved)
    for text in sorted(versions, key=lambda text: key(resolved.parse(text)), reverse=reverse):
        typer.echo(text)


@app.command(name="normalize")
@error_boundary
def normalize_cmd(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(help="Version to normalize")],
    scheme: SchemeOption = None,
) -> None:
    """Parse and re-format a version under a scheme."""
    resolved = _state(ctx).scheme(scheme)
    typer.echo(resolved.normalize(version))


@app.command(name="contains")
@error_boundary
def contains_cmd(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(help="Version to check")],
    lower: Annotated[
        Optional[str],
        typer.Option("--lower", "-l", help="Lower bound (unbounded when omitted)"),
    ] = None,
    upper: Annotated[
        Optional[str],
        typer.Option("--upper", "-u", help="Upper bound (unbounded when omitted)"),
    ] = None,
    lower_open: Annotated[
        bool,
        typer.Option("--lower-open", help="Exclude the lower bound"),
    ] = False,
    upper_open: Annotated[
        bool,
        typer.Option("--upper-open", help="Exclude the upper bound"),
    ] = False,
    scheme: SchemeOption = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 if the version is outside the range"),
    ] = False,
) -> None:
    """Check whether a version lies inside a range.

    Examples:
        verspan contains 1.5 --lower 1.0 --upper 2.0 --upper-open
        verspan contains 2.0.0+meta --upper 2.0.0 --scheme semver-default --strict
    """
    resolved = _state(ctx).scheme(scheme)

    if lower is None:
        left_boundary = Boundary.UNBOUNDED
    else:
        left_boundary = Boundary.OPEN if lower_open else Boundary.CLOSED
    if upper is None:
        right_boundary = Boundary.UNBOUNDED
    else:
        right_boundary = Boundary.OPEN if upper_open else Boundary.CLOSED

    interval = VersionInterval(left_boundary, lower, right_boundary, upper, resolved)
    inside = interval.contains(resolved.parse(version))

    typer.echo(f"{version} in {interval}: {'yes' if inside else 'no'}")
    if strict and not inside:
        raise typer.Exit(1)


@app.command(name="inspect")
@error_boundary
def inspect_cmd(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(help="Version to inspect")],
    scheme: SchemeOption = None,
) -> None:
    """Show how a scheme reads a version."""
    resolved = _state(ctx).scheme(scheme)
    parsed = resolved.parse(version)
    parts = resolved.split_version_and_build_text(parsed.original_text)
    qualifier = extract_qualifier(parsed, resolved)

    console = Console()
    table = Table(title=escape(f"{version} ({resolved.code})"), show_header=True, header_style="bold")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Tokens", escape(", ".join(repr(token.text) for token in parsed.tokens)) or "-")
    table.add_row("Version part", escape(parts.version_text) or "-")
    table.add_row("Build part", escape(parts.build_text) or "-")
    table.add_row("Qualifier kind", qualifier.kind.value)
    table.add_row("Qualifier label", escape(qualifier.label or "-"))
    table.add_row("Normalized", escape(resolved.normalize(version)))

    console.print(table)


@app.command(name="schemes")
@error_boundary
def schemes_cmd(ctx: typer.Context) -> None:
    """List the available version schemes."""
    state = _state(ctx)
    default_code = state.config.default_scheme.strip().lower()

    console = Console()
    table = Table(show_header=True, header_style="bold")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Origin")
    table.add_column("Comparator")
    table.add_column("Structure")
    table.add_column("Format")
    table.add_column("Default", justify="center")

    for scheme in state.registry:
        table.add_row(
            scheme.code,
            scheme.origin.value,
            type(scheme.comparator).__name__,
            scheme.structure.code,
            scheme.format_spec.build_format_policy.value,
            "*" if scheme.code.lower() == default_code else "",
        )

    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

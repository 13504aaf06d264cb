"""
Main CLI entry point for policymatch.

Provides the command-line interface using Click:
- check: match one value against one pattern
- run: evaluate a file of regression cases
- config show: print effective settings
"""

import json as _json
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import click as _click
import pydantic as _pydantic
import rich.console as _rich_console
import rich.markup as _rich_markup
import rich.table as _rich_table
import yaml as _yaml

import policymatch
import policymatch.cases as cases
import policymatch.config as config
import policymatch.engine as engine

_logger = _logging.getLogger(__name__)

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _configure_logging(level: int) -> None:
    """Route log records to stderr at the given level."""
    _logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _parse_argument(text: str, *, raw: bool) -> _typing.Any:
    """
    Parse a command-line value or pattern.

    Text is read as a YAML scalar so that `5`, `true` and `null` keep
    their types. Anything else is used as the plain string typed: text
    YAML cannot parse (e.g. `*.txt`), and text YAML would turn into a
    collection or a different string (e.g. `>3` is a folded block,
    `[a]` a list).
    """
    if raw or not text.strip():
        return text
    try:
        parsed = _yaml.safe_load(text)
    except _yaml.YAMLError:
        return text
    if parsed is None or isinstance(parsed, (bool, int, float)):
        return parsed
    return text


def _use_json(settings: config.Settings, json_flag: bool) -> bool:
    return json_flag or settings.output.format == "json"


def _print_result(
    console: _rich_console.Console,
    result: engine.MatchResult,
    *,
    show_diagnostics: bool,
) -> None:
    if result.matched:
        console.print("[green]match[/green]")
    else:
        console.print("[red]no match[/red]")
    if show_diagnostics:
        for diagnostic in result.diagnostics:
            message = _rich_markup.escape(diagnostic.message)
            console.print(f"  [yellow]{diagnostic.reason.value}[/yellow]: {message}")


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(policymatch.__version__, "-v", "--version", prog_name="policymatch")
@_click.option(
    "--log-level",
    type=_click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Override logging.level",
)
@_click.pass_context
def cli(ctx: _click.Context, log_level: str | None) -> None:
    """policymatch - match document values against policy patterns."""
    try:
        settings = config.Settings()
    except config.ConfigFileError as e:
        raise _click.ClickException(str(e)) from None
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid configuration:\n{e}") from None

    if log_level:
        settings.logging.level = log_level  # type: ignore[assignment]
    _configure_logging(settings.log_level)

    ctx.obj = settings


@cli.command()
@_click.argument("value")
@_click.argument("pattern")
@_click.option("--string-value", is_flag=True, help="Use VALUE as a string, do not parse it")
@_click.option("--string-pattern", is_flag=True, help="Use PATTERN as a string, do not parse it")
@_click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@_click.pass_obj
def check(
    settings: config.Settings,
    value: str,
    pattern: str,
    string_value: bool,
    string_pattern: bool,
    json_output: bool,
) -> None:
    """Check whether VALUE matches PATTERN.

    Exits with status 0 on match and 1 otherwise.
    """
    parsed_value = _parse_argument(value, raw=string_value)
    parsed_pattern = _parse_argument(pattern, raw=string_pattern)
    _logger.debug("checking %r against %r", parsed_value, parsed_pattern)

    result = engine.evaluate(parsed_value, parsed_pattern)

    if _use_json(settings, json_output):
        _click.echo(_json.dumps(result.to_dict(), indent=2))
    else:
        _print_result(
            _rich_console.Console(),
            result,
            show_diagnostics=settings.output.show_diagnostics,
        )

    if not result.matched:
        raise SystemExit(1)


@cli.command()
@_click.argument(
    "case_file",
    type=_click.Path(exists=True, dir_okay=False, path_type=_pathlib.Path),
)
@_click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@_click.pass_obj
def run(settings: config.Settings, case_file: _pathlib.Path, json_output: bool) -> None:
    """Evaluate every case in CASE_FILE.

    Exits with status 1 if any case does not meet its expectation.
    """
    try:
        loaded = cases.load_cases(case_file)
    except cases.CaseFileError as e:
        raise _click.ClickException(str(e)) from None

    outcomes = cases.run_cases(loaded)
    failed = [o for o in outcomes if not o.passed]

    if _use_json(settings, json_output):
        _click.echo(_json.dumps([o.to_dict() for o in outcomes], indent=2, default=str))
    else:
        console = _rich_console.Console()
        table = _rich_table.Table(title=str(case_file))
        table.add_column("Case")
        table.add_column("Value")
        table.add_column("Pattern")
        table.add_column("Result")
        table.add_column("Status")
        for outcome in outcomes:
            status = "[green]PASS[/green]" if outcome.passed else "[red]FAIL[/red]"
            if outcome.case.expect is None:
                status = "-"
            table.add_row(
                _rich_markup.escape(outcome.label),
                _rich_markup.escape(repr(outcome.case.value)),
                _rich_markup.escape(repr(outcome.case.pattern)),
                "match" if outcome.result.matched else "no match",
                status,
            )
        console.print(table)

        if settings.output.show_diagnostics:
            for outcome in failed:
                for diagnostic in outcome.result.diagnostics:
                    console.print(f"{outcome.label}: {diagnostic.message}", markup=False)

        console.print(f"{len(outcomes) - len(failed)} passed, {len(failed)} failed", markup=False)

    if failed:
        raise SystemExit(1)


@cli.group(name="config")
def config_cmd() -> None:
    """Inspect configuration."""


@config_cmd.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.pass_obj
def config_show(settings: config.Settings, as_json: bool) -> None:
    """Print the effective settings."""
    data = settings.to_dict()
    if as_json:
        _click.echo(_json.dumps(data, indent=2))
    else:
        _click.echo(_yaml.safe_dump(data, sort_keys=False).rstrip())

    extra = settings.logging.collect_all_extra_fields("logging")
    extra.update(settings.output.collect_all_extra_fields("output"))
    for path in extra:
        _click.echo(f"warning: unknown config key '{path}'", err=True)


def main() -> None:
    """Entry point for the console script."""
    cli()

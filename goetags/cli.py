"""Command line interface for goetags."""

from __future__ import annotations

import sys
from typing import Sequence

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup

from . import __version__
from .api import TagsResult, generate_tags
from .config import DEFAULT_OUTPUT
from .errors import GoetagsError
from .services.config_service import apply_config_updates, get_config_snapshot
from .text import Messages, Styles
from .utils import format_count

DEFAULT_COMMAND = "tags"
_GROUP_OPTIONS = frozenset({"--version", "-v", "--help", "-h"})

console = Console()
err_console = Console(stderr=True)


def _route_default_command(args: list[str], commands: Sequence[str]) -> list[str]:
    if not args:
        return args
    first = args[0]
    if first in commands or first in _GROUP_OPTIONS:
        return args
    return [DEFAULT_COMMAND, *args]


class DefaultTagsGroup(TyperGroup):
    """Treat arguments that are not subcommands as input to `tags`."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, _route_default_command(args, list(self.commands)))


app = typer.Typer(
    help=Messages.APP_HELP,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    cls=DefaultTagsGroup,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"goetags v{__version__}")
        raise typer.Exit()


def _parse_boolean(value: str) -> bool:
    token = value.strip().lower()
    if token in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if token in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(Messages.ERROR_BOOLEAN_INVALID.format(value=value))


def _styled(text: str, style: str) -> str:
    return f"[{style}]{escape(text)}[/{style}]"


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    )
) -> None:
    """Global Typer callback for shared options."""
    return None


@app.command()
def tags(
    files: list[str] | None = typer.Argument(
        None,
        help=Messages.HELP_FILES,
        show_default=False,
    ),
    full_tag: bool | None = typer.Option(
        None,
        "--full-tag/--no-full-tag",
        "-f",
        help=Messages.HELP_FULL_TAG,
    ),
    append: bool | None = typer.Option(
        None,
        "--append/--no-append",
        "-a",
        help=Messages.HELP_APPEND,
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help=Messages.HELP_OUTPUT,
        show_default=DEFAULT_OUTPUT,
    ),
    directory: str | None = typer.Option(
        None,
        "--dir",
        "-d",
        help=Messages.HELP_DIR,
    ),
    file_list: str | None = typer.Option(
        None,
        "--input",
        "-i",
        help=Messages.HELP_INPUT,
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-w",
        help=Messages.HELP_WORKERS,
    ),
) -> None:
    """Write Emacs TAGS for the given Go source files."""
    if not files and file_list is None:
        err_console.print(_styled(Messages.ERROR_NO_FILES, Styles.ERROR))
        err_console.print(_styled(Messages.USAGE, Styles.INFO))
        raise typer.Exit(code=2)
    if workers is not None and workers < 1:
        raise typer.BadParameter(Messages.ERROR_WORKERS_INVALID, param_hint="--workers")

    try:
        result = generate_tags(
            files or (),
            file_list=file_list,
            output=output,
            directory=directory,
            full_tag=full_tag,
            append=append,
            workers=workers,
        )
    except (GoetagsError, ValueError) as exc:
        err_console.print(_styled(str(exc), Styles.ERROR))
        raise typer.Exit(code=1)

    for failure in result.failures:
        err_console.print(
            _styled(
                Messages.ERROR_FILE_FAILED.format(path=failure.path, reason=failure.reason),
                Styles.ERROR,
            )
        )
    if not result.written:
        err_console.print(
            _styled(Messages.ERROR_ALL_FAILED.format(path=result.output_path), Styles.ERROR)
        )
        raise typer.Exit(code=1)
    _render_summary(result)


def _render_summary(result: TagsResult) -> None:
    template = Messages.INFO_TAGS_APPENDED if result.appended else Messages.INFO_TAGS_WRITTEN
    console.print(
        _styled(
            template.format(
                count=result.blocks_written,
                plural=format_count(result.blocks_written),
                size=result.bytes_written,
                path=result.output_path,
            ),
            Styles.SUCCESS,
        )
    )
    if result.failures:
        count = len(result.failures)
        console.print(
            _styled(
                Messages.INFO_SKIPPED.format(count=count, plural=format_count(count)),
                Styles.WARNING,
            )
        )


@app.command()
def config(
    show: bool = typer.Option(
        False,
        "--show",
        help=Messages.HELP_SHOW_CONFIG,
    ),
    set_output_option: str | None = typer.Option(
        None,
        "--set-output",
        help=Messages.HELP_SET_OUTPUT,
    ),
    set_dir_option: str | None = typer.Option(
        None,
        "--set-dir",
        help=Messages.HELP_SET_DIR,
    ),
    clear_dir: bool = typer.Option(
        False,
        "--clear-dir",
        help=Messages.HELP_CLEAR_DIR,
    ),
    set_workers_option: int | None = typer.Option(
        None,
        "--set-workers",
        help=Messages.HELP_SET_WORKERS,
    ),
    set_full_tag_option: str | None = typer.Option(
        None,
        "--set-full-tag",
        help=Messages.HELP_SET_FULL_TAG,
    ),
    set_append_option: str | None = typer.Option(
        None,
        "--set-append",
        help=Messages.HELP_SET_APPEND,
    ),
) -> None:
    """Show or update the stored defaults."""
    if set_workers_option is not None and set_workers_option < 1:
        raise typer.BadParameter(Messages.ERROR_WORKERS_INVALID, param_hint="--set-workers")
    if set_output_option is not None and not set_output_option.strip():
        raise typer.BadParameter(Messages.ERROR_OUTPUT_EMPTY, param_hint="--set-output")
    if set_dir_option is not None and clear_dir:
        raise typer.BadParameter(Messages.ERROR_DIR_CONFLICT)
    full_tag_value = None
    append_value = None
    try:
        if set_full_tag_option is not None:
            full_tag_value = _parse_boolean(set_full_tag_option)
        if set_append_option is not None:
            append_value = _parse_boolean(set_append_option)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        updates = apply_config_updates(
            output=set_output_option,
            directory=set_dir_option,
            clear_directory=clear_dir,
            workers=set_workers_option,
            full_tag=full_tag_value,
            append=append_value,
        )
    except ValueError as exc:
        err_console.print(_styled(str(exc), Styles.ERROR))
        raise typer.Exit(code=1)

    if updates.output_set:
        console.print(
            _styled(Messages.INFO_OUTPUT_SET.format(value=set_output_option.strip()), Styles.SUCCESS)
        )
    if updates.directory_set:
        console.print(_styled(Messages.INFO_DIR_SET.format(value=set_dir_option), Styles.SUCCESS))
    if updates.directory_cleared:
        console.print(_styled(Messages.INFO_DIR_CLEARED, Styles.SUCCESS))
    if updates.workers_set:
        console.print(
            _styled(Messages.INFO_WORKERS_SET.format(value=set_workers_option), Styles.SUCCESS)
        )
    if updates.full_tag_set:
        console.print(
            _styled(Messages.INFO_FULL_TAG_SET.format(value=full_tag_value), Styles.SUCCESS)
        )
    if updates.append_set:
        console.print(_styled(Messages.INFO_APPEND_SET.format(value=append_value), Styles.SUCCESS))

    if show:
        try:
            cfg = get_config_snapshot()
        except ValueError as exc:
            err_console.print(_styled(str(exc), Styles.ERROR))
            raise typer.Exit(code=1)
        console.print(
            _styled(
                Messages.INFO_CONFIG_SUMMARY.format(
                    output=cfg.output,
                    directory=cfg.directory or ".",
                    workers=cfg.workers,
                    full_tag="yes" if cfg.full_tag else "no",
                    append="yes" if cfg.append else "no",
                ),
                Styles.INFO,
            )
        )
    elif not updates.changed:
        console.print(_styled(Messages.INFO_CONFIG_UNCHANGED, Styles.INFO))


def run(argv: list[str] | None = None) -> None:
    """Entry point wrapper allowing optional argument override."""
    args = list(argv) if argv is not None else sys.argv[1:]
    if argv is None:
        app()
    else:
        app(args=args)

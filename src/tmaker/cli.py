"""CLI interface for tmaker - create projects from local templates."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import click

from .config import Settings, get_settings
from .errors import (
    DirectoryOpenError,
    InvalidArgumentError,
    NoTemplatesError,
    TemplateMakerError,
)
from .store import init_template_store
from .templates import (
    ProjectRequest,
    create_project,
    list_templates,
    parse_project_argument,
)
from .utils import configure_logging, console, err_console

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _parse_create(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[ProjectRequest]:
    if value is None:
        return None
    try:
        return parse_project_argument(value)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@contextmanager
def report_errors(ctx: click.Context) -> Iterator[None]:
    """Print tmaker errors in red on stderr and exit with their status."""
    try:
        yield
    except TemplateMakerError as e:
        logger.debug("Aborting", exc_info=True)
        err_console.print(
            f"Error: {e}", style="bold red", markup=False, highlight=False
        )
        ctx.exit(e.exit_code)


def available_templates(root: Path) -> List[str]:
    """List templates under `root`, treating an unreadable or empty root as fatal."""
    try:
        templates = list_templates(root)
    except DirectoryOpenError as e:
        logger.debug("Template listing failed: %s", e)
        raise NoTemplatesError(root) from e
    if not templates:
        raise NoTemplatesError(root)
    return templates


def run_interactive(settings: Settings) -> None:
    """Prompt for a project name and a template, then create the project."""
    console.print("TEMPLATE MAKER", style="bold blue")
    console.print(
        f'Creating project in: "{Path.cwd()}"', markup=False, highlight=False
    )
    project_name = click.prompt("Enter project name").strip()
    if not project_name:
        raise InvalidArgumentError("missing project name")

    templates = available_templates(settings.template_root)
    console.print("Select a template:", style="bold blue")
    for index, name in enumerate(templates, start=1):
        console.print(f"  {index}) {name}", markup=False, highlight=False)
    choice = click.prompt("Choice (number)", type=click.IntRange(1, len(templates)))
    selected = templates[choice - 1]

    create_project(project_name, selected, settings.template_root)
    console.print(
        f"Project '{project_name}' successfully created with template '{selected}'.",
        style="bold green",
        markup=False,
        highlight=False,
    )


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--create",
    "request",
    metavar="NAME:LANG",
    callback=_parse_create,
    help="Create project NAME from template LANG without prompting.",
)
@click.option(
    "--init",
    "init",
    is_flag=True,
    default=False,
    help="Initialize the templates by cloning the template repository.",
)
@click.option(
    "-l",
    "--list",
    "list_only",
    is_flag=True,
    default=False,
    help="List available templates and exit.",
)
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Enable debug logging."
)
@click.pass_context
def cli(
    ctx: click.Context,
    request: Optional[ProjectRequest],
    init: bool,
    list_only: bool,
    verbose: bool,
) -> None:
    """Create a new project from a template in ~/.local/template.

    Without options, prompts for a project name and a template.
    """
    configure_logging(verbose)
    if sum((request is not None, init, list_only)) > 1:
        raise click.UsageError("Options -c, --init and --list are mutually exclusive.")

    with report_errors(ctx):
        settings = get_settings()
        logger.debug("Using template root %s", settings.template_root)

        if init:
            init_template_store(settings)
        elif list_only:
            for name in available_templates(settings.template_root):
                click.echo(name)
        elif request is not None:
            create_project(
                request.project_name, request.template, settings.template_root
            )
            console.print(
                f"Project '{request.project_name}' successfully created using "
                f"template '{request.template}'. Happy coding!",
                style="bold green",
                markup=False,
                highlight=False,
            )
        else:
            run_interactive(settings)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Enable debug logging."
)
@click.pass_context
def init_cli(ctx: click.Context, verbose: bool) -> None:
    """Initialize ~/.local/template by cloning the template repository."""
    configure_logging(verbose)
    with report_errors(ctx):
        init_template_store(get_settings())

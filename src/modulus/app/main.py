"""
modulus CLI: pick a template, copy it, fill in its variables.

Flow:
    store root → catalog → prompts → copy tree → substitute tokens

Exit codes:
    0  completed, no templates, or cancelled at a prompt
    1  ModulusError (setup, descriptor, copy or substitution failure)
"""

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from modulus.app.prompts import (
    PromptOutcome,
    QuestionarySelector,
    Selector,
    collect_selection,
)
from modulus.core.config import ensure_store_root, resolve_store_root
from modulus.core.logging import configure_logging
from modulus.domain.errors import ModulusError
from modulus.templates.materializer import copy_directory
from modulus.templates.registry import discover_templates, is_store_empty
from modulus.templates.substitution import substitute_tree

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="modulus",
    help="Scaffold a new project from a local template.",
    add_completion=False,
)


class ScaffoldOutcome(str, Enum):
    """How a run ended."""

    COMPLETED = "completed"
    NO_TEMPLATES = "no_templates"
    CANCELLED = "cancelled"


def _print_no_templates(store_root: Path) -> None:
    console.print("[yellow]No templates loaded![/yellow]")
    console.print(f"Insert templates into {escape(str(store_root))}", soft_wrap=True)


def scaffold(store_root: Path, selector: Selector) -> ScaffoldOutcome:
    """
    Run one scaffolding pass against a store.

    Args:
        store_root: template store root (must exist)
        selector: prompt implementation

    Returns:
        ScaffoldOutcome

    Raises:
        ModulusError: any fatal setup, descriptor or I/O failure
    """
    if is_store_empty(store_root):
        _print_no_templates(store_root)
        return ScaffoldOutcome.NO_TEMPLATES

    catalog = discover_templates(store_root)
    if not catalog:
        _print_no_templates(store_root)
        return ScaffoldOutcome.NO_TEMPLATES

    selection = collect_selection(catalog, selector)
    if selection is PromptOutcome.CANCELLED:
        logger.info("Cancelled by user, nothing written")
        return ScaffoldOutcome.CANCELLED

    template = selection.template
    logger.info(f"Scaffolding '{template.name}' into {selection.destination}")

    copied = copy_directory(template.source_path, selection.destination)
    rewritten = substitute_tree(selection.destination, template, selection.bindings)

    console.print(
        f"[green]✓[/green] Created [bold]{escape(template.name)}[/bold] in "
        f"{escape(str(selection.destination))} "
        f"({len(copied)} files copied, {len(rewritten)} rewritten)",
        soft_wrap=True,
    )
    return ScaffoldOutcome.COMPLETED


@app.command()
def main() -> None:
    """Scaffold a new project from a template in the store."""
    configure_logging()

    try:
        store_root = ensure_store_root(resolve_store_root())
        scaffold(store_root, QuestionarySelector())
    except ModulusError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(code=1)


def run() -> None:
    """Console script entry point."""
    app()

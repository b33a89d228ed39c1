#!/usr/bin/env python3
"""
VELLUM command-line interface

Renders resume content with a catalog template and lists the template catalog.

Commands:
    render    - Render a resume content file with a template
    preview   - Render a template with its built-in sample content
    templates - List catalog templates (optionally filtered)

Examples:\n

    vellum render resume.yaml --template modern                  # HTML to stdout

    vellum render resume.yaml -t modern -v 2 -o out/resume.html  # Third color variant

    vellum render resume.json -t classic --format json           # Document block tree

    vellum preview tech-modern -o out/tech-modern.html           # Sample preview

    vellum templates --category Professional                     # Filter catalog
"""

import json
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vellum.contexts.rendering import (
    Document,
    IncompleteContentError,
    render,
    render_preview,
    serialize_html,
)
from vellum.contexts.rendering.logger import setup_rendering_logger
from vellum.contexts.templating import (
    InvalidContentError,
    TemplateCatalog,
    TemplateNotFoundError,
    load_resume_content,
    resolve_variant_label,
)
from vellum.contexts.templating.logger import setup_templating_logger
from vellum.utils.logger import session_log_dir

load_dotenv()
LOGS_PATH = Path(os.getenv("VELLUM_LOGS_PATH", "outs/logs"))


class OutputFormat(str, Enum):
    html = "html"
    json = "json"


app = typer.Typer(
    help="Render resumes with VELLUM templates and browse the template catalog",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(message: str) -> None:
    typer.secho(f"Error: {message}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _emit(document: Document, output_format: OutputFormat, output: Optional[Path], title: str) -> None:
    """Serialize a document and write it to a file, or to stdout."""
    if output_format is OutputFormat.json:
        text = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    else:
        text = serialize_html(document, title=title)

    if output is None:
        typer.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.secho(f"✓ Wrote {output_format.value} to {output}", fg=typer.colors.GREEN, bold=True, err=True)


@app.command("render")
def render_command(
    content_path: Annotated[
        Path,
        typer.Argument(help="Resume content file (.yaml, .yml or .json)"),
    ],
    template_id: Annotated[
        str,
        typer.Option("--template", "-t", help="Template id from the catalog (e.g., 'modern')"),
    ],
    variant: Annotated[
        int,
        typer.Option("--variant", "-v", help="Color variant index (invalid values use variant 0)"),
    ] = 0,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.html,
):
    """
    Render a resume content file with a catalog template.

    Examples:\n

        $ vellum render resume.yaml --template modern

        $ vellum render resume.yaml -t modern --variant 1 -o out/resume.html
    """
    setup_rendering_logger(session_log_dir(LOGS_PATH, "render"), template_id=template_id, console=sys.stderr)

    catalog = TemplateCatalog()
    try:
        template = catalog.get(template_id)
        content = load_resume_content(content_path)
        document = render(content, template, variant)
    except (TemplateNotFoundError, FileNotFoundError, InvalidContentError, IncompleteContentError) as e:
        _fail(str(e))

    label = resolve_variant_label(template, variant)
    if label:
        typer.echo(f"Color variant: {label}", err=True)
    _emit(document, output_format, output, title=content.name)


@app.command("preview")
def preview_command(
    template_id: Annotated[
        str,
        typer.Argument(help="Template id from the catalog"),
    ],
    variant: Annotated[
        int,
        typer.Option("--variant", "-v", help="Color variant index"),
    ] = 0,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.html,
):
    """
    Render a template with its built-in sample content.

    Examples:\n

        $ vellum preview classic

        $ vellum preview tech-modern --format json
    """
    setup_rendering_logger(session_log_dir(LOGS_PATH, "preview"), template_id=template_id, console=sys.stderr)

    catalog = TemplateCatalog()
    try:
        template = catalog.get(template_id)
        document = render_preview(template, variant)
    except (TemplateNotFoundError, IncompleteContentError) as e:
        _fail(str(e))

    _emit(document, output_format, output, title=template.display_name)


@app.command("templates")
def templates_command(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Only templates in this category"),
    ] = None,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Only templates matching this text"),
    ] = None,
    popular: Annotated[
        Optional[int],
        typer.Option("--popular", "-p", help="Only the N most popular templates", min=1),
    ] = None,
):
    """
    List catalog templates.

    Examples:\n

        $ vellum templates

        $ vellum templates --search sidebar

        $ vellum templates --popular 3
    """
    setup_templating_logger(session_log_dir(LOGS_PATH, "templates"), phase="load", console=sys.stderr)

    catalog = TemplateCatalog()
    if popular is not None:
        templates = catalog.popular(popular)
    else:
        templates = catalog.all()
    if category:
        wanted = {template.id for template in catalog.by_category(category)}
        templates = [template for template in templates if template.id in wanted]
    if search:
        wanted = {template.id for template in catalog.search(search)}
        templates = [template for template in templates if template.id in wanted]

    if not templates:
        typer.secho("No templates match.", fg=typer.colors.YELLOW)
        raise typer.Exit(code=0)

    typer.secho(f"\n{len(templates)} templates", fg=typer.colors.BLUE, bold=True)
    for template in templates:
        layout = template.layout.type if template.layout is not None else "single-column"
        typer.echo(
            f"  {template.id:<20} {template.display_name:<20} {template.category:<14} "
            f"{template.tier:<8} popularity {template.popularity}  ({layout})"
        )
    typer.echo("")


if __name__ == "__main__":
    app()

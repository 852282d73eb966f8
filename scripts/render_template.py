#!/usr/bin/env python3
"""
Command-line interface for resume template assembly.

Subcommands:
- list: List templates in the registry (gallery filters supported)
- show: Show a template's metadata, styling and fragments
- render: Assemble a template with resume data and write an HTML preview
- validate: Validate a template YAML file
"""

import os
from pathlib import Path
from typing import List

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.rendering import write_preview
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.contexts.templating import (
    InvalidTemplateError,
    Template,
    TemplateNotFoundError,
    TemplateRegistry,
    apply_style_presets,
    assemble,
    check_section_coupling,
    find_unresolved_placeholders,
    load_resume_data,
    load_sample_resume,
)
from folio.contexts.templating.logger import setup_templating_logger
from folio.utils.logger import session_log_dir

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

app = typer.Typer(
    add_completion=False,
    help="Assemble HTML resumes from fragment templates",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_command(
    category: str = typer.Option(
        None,
        "--category",
        "-c",
        help="Only templates in this category (e.g., PROFESSIONAL)",
    ),
    tag: List[str] = typer.Option(
        None,
        "--tag",
        "-t",
        help="Only templates with this tag (repeatable, any match)",
    ),
    include_private: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Include templates that are not public",
    ),
):
    """
    List templates in the registry.

    Examples:\n

        $ render_template.py list

        $ render_template.py list -c PROFESSIONAL -t Modern
    """
    registry = TemplateRegistry()

    try:
        templates = registry.list_templates(
            category=category.upper() if category else None,
            tags=tag,
            public_only=not include_private,
        )
    except (ValueError, InvalidTemplateError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not templates:
        typer.secho(
            f"No templates found in {registry.templates_path}", fg=typer.colors.YELLOW, err=True
        )
        raise typer.Exit(code=1)

    typer.secho(f"\nTemplates ({len(templates)}):", fg=typer.colors.BLUE, bold=True)
    for template in templates:
        projects = "" if template.has_projects_section else " (no projects section)"
        typer.echo(f"  • {template.template_id}: {template.name} [{template.category.value}]{projects}")
        if template.tags:
            typer.echo(f"      tags: {', '.join(template.tags)}")


@app.command("show")
def show_command(
    template_id: str = typer.Argument(..., help="Template id (file stem in the registry)"),
    fragments: bool = typer.Option(
        False,
        "--fragments",
        "-f",
        help="Also print every HTML fragment",
    ),
):
    """
    Show a template's metadata and styling.

    Example:\n

        $ render_template.py show professional_classic --fragments
    """
    try:
        template = TemplateRegistry().get_template(template_id)
    except (TemplateNotFoundError, InvalidTemplateError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    record = template.to_dict()

    typer.secho(f"\n{template.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  {template.description}")
    typer.echo(f"  Category: {template.category.value}")
    typer.echo(f"  Tags: {', '.join(template.tags) or '-'}")
    typer.echo(f"  Public: {template.is_public}")

    typer.echo("\nStyling:")
    for style_field in (
        "primary_color",
        "secondary_color",
        "font_family",
        "font_size",
        "line_height",
        "section_spacing",
        "item_spacing",
    ):
        typer.echo(f"  {style_field}: {record[style_field]}")

    if fragments:
        typer.echo("\nFragments:")
        for name, value in record.items():
            if name.endswith("_html"):
                typer.secho(f"  {name}:", bold=True)
                typer.echo(f"    {value.strip() if value else '(none)'}")


@app.command("render")
def render_command(
    template_id: str = typer.Argument(..., help="Template id (file stem in the registry)"),
    data_file: Path = typer.Option(
        None,
        "--data",
        "-d",
        help="Resume data (.yaml or .json); defaults to the sample resume",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output .html path (defaults to RESULTS_PATH/<template_id>.html)",
    ),
    preset: List[str] = typer.Option(
        None,
        "--preset",
        "-p",
        help="Style preset to apply (repeatable, later overrides earlier)",
    ),
    bare: bool = typer.Option(
        False,
        "--bare",
        help="Write only the assembled resume markup, without the page shell",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with an error if any placeholder is left unresolved",
    ),
):
    """
    Assemble a template with resume data and write the HTML.

    Logs are saved to outs/logs/render_TIMESTAMP/.

    Examples:\n

        $ render_template.py render professional_classic

        $ render_template.py render minimal -d me.yaml -o me.html -p colors_warm -p spacing_tight

        $ render_template.py render minimal --bare --strict
    """
    log_dir = session_log_dir(LOGS_PATH, "render")
    setup_rendering_logger(log_dir, template_id=template_id)

    typer.secho(f"\nRendering: {template_id}\n", fg=typer.colors.BLUE, bold=True)

    try:
        template = TemplateRegistry().get_template(template_id)
        template = apply_style_presets(template, preset or [])
        data = load_resume_data(data_file) if data_file else load_sample_resume()
    except (FileNotFoundError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    output_path = output or RESULTS_PATH / f"{template_id}.html"

    if bare:
        html = assemble(template, data)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        unresolved = find_unresolved_placeholders(html)
    else:
        result = write_preview(template, output_path, data=data)
        unresolved = result.unresolved_placeholders

    typer.secho("✓ Resume assembled", fg=typer.colors.GREEN)
    typer.echo(f"  HTML: {output_path}")
    typer.echo(f"  Log: {log_dir / 'render.log'}")

    if unresolved:
        color = typer.colors.RED if strict else typer.colors.YELLOW
        typer.secho(f"  Unresolved placeholders: {', '.join(unresolved)}", fg=color)
        if strict:
            raise typer.Exit(code=1)
    typer.echo("")


@app.command("validate")
def validate_command(
    template_file: Path = typer.Argument(
        ...,
        help="Path to template .yaml file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Validate a template YAML file.

    Checks required fields, styling values and the title-fragment/section
    coupling the assembler relies on.

    Example:\n

        $ render_template.py validate my_template.yaml
    """
    setup_templating_logger(session_log_dir(LOGS_PATH, "validate"), phase="validate")

    record = OmegaConf.to_container(OmegaConf.load(template_file), resolve=True)
    if not isinstance(record, dict):
        typer.secho(f"✗ Template file must hold a mapping: {template_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        template = Template.from_dict(
            record, template_id=template_file.stem, template_path=template_file
        )
    except InvalidTemplateError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    uncoupled = check_section_coupling(template)
    if uncoupled:
        typer.secho(
            f"✗ Title fragments must open a <section> element: {', '.join(uncoupled)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    typer.secho(f"✓ {template.name} is valid", fg=typer.colors.GREEN)
    if not template.has_projects_section:
        typer.echo("  (no projects section)")


if __name__ == "__main__":
    app()

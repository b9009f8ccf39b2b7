"""
biolink_explorer CLI

Validate a schema, list the associations valid for a triple, and show the
lineage of a class or slot.

The schema comes from ``--schema`` or, when omitted, BIOLINK_SCHEMA_PATH.
"""
import json
import sys
import time

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from biolink_explorer.hierarchy.model import build_model
from biolink_explorer.reasoning.associations import query
from biolink_explorer.schema.loader import load_schema
from biolink_explorer.settings import get_settings
from biolink_explorer.utils import BiolinkError, SchemaValidationError, get_logger, setup_logging

console = Console()
logger = get_logger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

schema_option = click.option(
    '--schema', '-s', 'schema_path',
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help='Schema YAML file (default from BIOLINK_SCHEMA_PATH)',
)


def _fail(message):
    console.print(f"\n[red]✗ {escape(message)}[/red]")
    sys.exit(1)


def _schema_source(schema_path):
    if schema_path:
        return schema_path
    configured = get_settings().schema_path
    if configured is None:
        _fail("No schema given: pass --schema or set BIOLINK_SCHEMA_PATH")
    return str(configured)


def _read(schema_path):
    try:
        return load_schema(schema_path)
    except FileNotFoundError:
        _fail(f"Schema file not found: {schema_path}")
    except SchemaValidationError as e:
        console.print(f"\n[red]✗ {escape(str(e))}[/red]")
        for issue in e.issues:
            console.print(f"  • {escape(issue)}")
        sys.exit(1)


def _build(schema):
    try:
        return build_model(schema, get_settings().anchor_names())
    except BiolinkError as e:
        _fail(f"Error: {e}")


def _load(schema_path):
    return _build(_read(_schema_source(schema_path)))


# ═══════════════════════════════════════════════════════════════════
# MAIN CLI GROUP
# ═══════════════════════════════════════════════════════════════════

@click.group()
@click.version_option(version='0.1.0')
@click.option(
    '--log-level',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help='Logging level (default from BIOLINK_LOG_LEVEL)',
)
def main(log_level):
    """
    biolink-explorer - hierarchy and association explorer for Biolink schemas
    """
    settings = get_settings()
    setup_logging(
        log_level or settings.log_level,
        str(settings.log_file) if settings.log_file else None,
    )


# ═══════════════════════════════════════════════════════════════════
# SCHEMA COMMANDS
# ═══════════════════════════════════════════════════════════════════

@main.command()
@schema_option
def validate(schema_path):
    """Validate a schema document, build its hierarchy and summarise both"""
    schema_path = _schema_source(schema_path)
    console.print(f"\n[bold blue]Validating:[/bold blue] {schema_path}")

    t0 = time.perf_counter()
    schema = _read(schema_path)
    elapsed_ms = (time.perf_counter() - t0) * 1000

    table = Table(title="Schema Contents")
    table.add_column("Section", style="cyan")
    table.add_column("Count", style="magenta")
    table.add_row("Classes", str(len(schema.classes)))
    table.add_row("Slots", str(len(schema.slots)))
    table.add_row("Enums", str(len(schema.enums)))
    table.add_row("Types", str(len(schema.types)))
    console.print(table)

    console.print(f"\n[green]✓ Valid ({elapsed_ms:.2f} ms)[/green]")

    summary = _build(schema).summary()
    table = Table(title="Hierarchy")
    table.add_column("Entities", style="cyan")
    table.add_column("Count", style="magenta")
    table.add_row("Classes", str(summary["classes"]))
    table.add_row("Relations", str(summary["relations"]))
    table.add_row("Enumerations", str(summary["enums"]))
    table.add_row("Class roots", str(summary["class_roots"]))
    table.add_row("Relation roots", str(summary["relation_roots"]))
    table.add_row("Never defined", str(summary["undefined"]))
    console.print(table)


# ═══════════════════════════════════════════════════════════════════
# QUERY COMMANDS
# ═══════════════════════════════════════════════════════════════════

@main.command()
@schema_option
@click.argument('subject')
@click.argument('predicate')
@click.argument('object_')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
def associations(schema_path, subject, predicate, object_, as_json):
    """List associations valid for SUBJECT PREDICATE OBJECT, most specific first"""
    model = _load(schema_path)

    try:
        results = query(model, subject, predicate, object_)
    except BiolinkError as e:
        _fail(f"Error: {e}")

    if as_json:
        click.echo(json.dumps([a.to_dict() for a in results], indent=2))
        return

    if not results:
        console.print("\n[yellow]No matching associations[/yellow]")
        return

    table = Table(title=f"Associations for ({subject}, {predicate}, {object_})")
    table.add_column("Depth", style="dim")
    table.add_column("Association", style="cyan")
    table.add_column("Subject")
    table.add_column("Predicate")
    table.add_column("Object")
    table.add_column("Qualifiers", style="magenta")

    for a in results:
        qualifiers = []
        for q in a.qualifiers:
            label = q.name
            if q.range is not None:
                label += f" → {q.range.name}"
            qualifiers.append(label)
        table.add_row(
            str(a.depth),
            a.name,
            a.subject.name,
            a.predicate.name,
            a.object.name,
            "\n".join(qualifiers),
        )
    console.print(table)


@main.command()
@schema_option
@click.argument('name')
@click.option('--slot', is_flag=True, help='Look NAME up among slots instead of classes')
def lineage(schema_path, name, slot):
    """Show the ancestors of a class (or slot), primary line first"""
    model = _load(schema_path)

    try:
        entity = model.require_relation(name) if slot else model.require_class(name)
        ancestors = model.ancestors(entity)
    except BiolinkError as e:
        _fail(f"Error: {e}")

    console.print(f"\n[bold blue]{entity.kind}:[/bold blue] {entity.name}")
    if not entity.defined:
        console.print("[yellow]  (referenced but never defined)[/yellow]")
    for ancestor in ancestors:
        flags = [f for f in ("abstract", "mixin") if getattr(ancestor, f)]
        suffix = f" [dim]({', '.join(flags)})[/dim]" if flags else ""
        console.print(f"  • {ancestor.name}{suffix}")


if __name__ == '__main__':
    main()

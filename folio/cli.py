#!/usr/bin/env python3
"""
cli.py
------
Command line interface for the Folio document store.

Commands:
    folio list              # List documents (pages, then posts newest first)
    folio show resume       # Print a document's metadata and body
    folio outline resume    # Print a document's heading tree
    folio export            # Write the JSON index for the site generator
    folio validate all      # Run well-formedness checks

Global options select the content and log directories.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Third party imports ---
import click

# --- Local imports ---
from folio.core.cli import OperationStats, setup_logger
from folio.core.exceptions import DocumentParseError, StoreError, ValidationError
from folio.core.logging_manager import handle_cli_error
from folio.core.paths import CONTENT_DIR, INDEX_JSON, LOG_DIR
from folio.store import DocumentStore
from folio.utils.markdown import Section
from folio.validators.cli import validate

LOAD_ERRORS = (DocumentParseError, ValidationError, StoreError, FileNotFoundError)


@click.group()
@click.option(
    "--content-dir",
    type=click.Path(file_okay=False),
    default=str(CONTENT_DIR),
    help="Directory holding the documents",
)
@click.option(
    "--log-dir", type=click.Path(), default=str(LOG_DIR), help="Directory for log files"
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, content_dir: str, log_dir: str, verbose: bool) -> None:
    """
    Folio - resume and blog content store.

    Inspect, validate and index the site's Markdown documents.
    """
    ctx.ensure_object(dict)
    ctx.obj["content_dir"] = Path(content_dir)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "folio")


def _load_store(ctx: click.Context, operation: str) -> DocumentStore:
    """Load the store, exiting cleanly on malformed content."""
    try:
        return DocumentStore.from_directory(
            ctx.obj["content_dir"], logger=ctx.obj["logger"]
        )
    except LOAD_ERRORS as e:
        handle_cli_error(ctx, e, operation, {"content_dir": str(ctx.obj["content_dir"])})
        raise  # unreachable; handle_cli_error exits


def _outline_lines(sections: List[Section], depth: int = 0) -> List[str]:
    lines = []
    for section in sections:
        lines.append(f"{'  ' * depth}- {section.title}")
        lines.extend(_outline_lines(section.children, depth + 1))
    return lines


@cli.command(name="list")
@click.option(
    "--kind", type=click.Choice(["page", "post"]), default=None, help="Only this kind"
)
@click.option("--drafts", is_flag=True, help="Include draft documents")
@click.pass_context
def list_documents(ctx: click.Context, kind: Optional[str], drafts: bool) -> None:
    """List documents."""
    store = _load_store(ctx, "list")
    documents = store.documents(kind=kind, include_drafts=drafts)

    if not documents:
        click.echo("No documents found")
        return

    for document in documents:
        date_str = document.date.isoformat() if document.date else "-" * 10
        draft = " [draft]" if document.draft else ""
        click.echo(
            f"{document.doc_id:<28} {document.kind:<5} {date_str}  {document.title}{draft}"
        )


@cli.command()
@click.argument("doc_id")
@click.option("--raw", is_flag=True, help="Print the serialized Markdown")
@click.pass_context
def show(ctx: click.Context, doc_id: str, raw: bool) -> None:
    """Print a document by id."""
    store = _load_store(ctx, "show")
    try:
        document = store.get(doc_id)
    except StoreError as e:
        handle_cli_error(ctx, e, "show", {"doc_id": doc_id})
        return

    if raw:
        click.echo(document.to_markdown(), nl=False)
        return

    click.echo(f"📄 {document.title}")
    for label, value in (
        ("id", document.doc_id),
        ("kind", document.kind),
        ("date", document.date.isoformat() if document.date else None),
        ("author", document.author),
        ("description", document.description),
        ("tags", ", ".join(document.tags) or None),
    ):
        if value:
            click.echo(f"   {label}: {value}")
    click.echo(f"   words: {document.word_count} (~{document.reading_time} min)")
    click.echo("")
    click.echo(document.body)


@cli.command()
@click.argument("doc_id")
@click.pass_context
def outline(ctx: click.Context, doc_id: str) -> None:
    """Print the heading tree of a document."""
    store = _load_store(ctx, "outline")
    try:
        document = store.get(doc_id)
    except StoreError as e:
        handle_cli_error(ctx, e, "outline", {"doc_id": doc_id})
        return

    lines = _outline_lines(document.outline)
    click.echo("\n".join(lines) if lines else "(no headings)")


@cli.command()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=str(INDEX_JSON),
    help="Destination JSON file",
)
@click.option("--drafts", is_flag=True, help="Include draft documents")
@click.pass_context
def export(ctx: click.Context, output: str, drafts: bool) -> None:
    """Write the JSON document index for the site generator."""
    stats = OperationStats()
    store = _load_store(ctx, "export")

    try:
        stats.documents = store.export_index(Path(output), include_drafts=drafts)
    except StoreError as e:
        handle_cli_error(ctx, e, "export", {"output": output})
        return

    click.echo(f"✅ Exported index to {output}")
    click.echo(f"   {stats.summary()}")


cli.add_command(validate)


if __name__ == "__main__":
    cli()

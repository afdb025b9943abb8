"""
Document Validation Commands
----------------------------

Commands for checking the well-formedness of content documents.

Commands:
    - frontmatter: YAML syntax, duplicate keys, required fields, field types
    - fences: Code fence pairing and language hints
    - links: Link and image target syntax
    - roundtrip: Serialize/parse stability of frontmatter and body
    - all: Every check above

Each command validates the whole content directory, or a single FILE.
"""
import click
from pathlib import Path
from typing import Iterable, Optional

from folio.core.paths import CONTENT_DIR


def _run(
    ctx: click.Context,
    file_path: Optional[str],
    categories: Optional[Iterable[str]],
    label: str,
) -> None:
    """Run the validator for the given categories and report."""
    from folio.validators.documents import DocumentValidator, format_validation_report

    content_dir = ctx.obj.get("content_dir", CONTENT_DIR)
    logger = ctx.obj.get("logger")
    target = Path(file_path) if file_path else content_dir

    click.echo(f"🔍 Validating {label} in {target}\n")

    validator = DocumentValidator(content_dir, logger, categories=categories)
    if file_path:
        validator.validate_file(Path(file_path))
        report = validator.report
    else:
        report = validator.validate_all()

    click.echo(format_validation_report(report))

    if report.has_errors:
        raise click.ClickException(f"Found {report.total_errors} {label} error(s)")


@click.group()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """
    Validate content documents.

    Check frontmatter, code fences, links and round-trip stability.
    """
    ctx.ensure_object(dict)


@validate.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def frontmatter(ctx: click.Context, file_path: Optional[str]) -> None:
    """
    Validate YAML frontmatter.

    Checks for:
    - Valid YAML syntax forming a mapping
    - Duplicate keys
    - Required fields (title)
    - Field types and date format
    - Unknown fields
    """
    _run(ctx, file_path, ["frontmatter"], "frontmatter")


@validate.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def fences(ctx: click.Context, file_path: Optional[str]) -> None:
    """Check that every code fence is closed and tagged with a language."""
    _run(ctx, file_path, ["fence"], "code fence")


@validate.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def links(ctx: click.Context, file_path: Optional[str]) -> None:
    """
    Check that every link target is a syntactically valid URL.

    External links are not fetched.
    """
    _run(ctx, file_path, ["link"], "link")


@validate.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def roundtrip(ctx: click.Context, file_path: Optional[str]) -> None:
    """Check that documents survive a serialize/parse round trip."""
    _run(ctx, file_path, ["roundtrip"], "round-trip")


@validate.command(name="all")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False), required=False)
@click.pass_context
def all_checks(ctx: click.Context, file_path: Optional[str]) -> None:
    """
    Run all document validation checks.

    Comprehensive validation of frontmatter, body, fences, links and
    round-trip stability.
    """
    _run(ctx, file_path, None, "documents")

"""typelink resolve command - rewrite placeholders into real imports."""

from pathlib import Path

import click

from typelink.config.loader import load_config, resolve_generated_dir
from typelink.core.errors import TypelinkError
from typelink.core.logging import configure_logging
from typelink.core.progress import pluralize, spinner, status
from typelink.resolve.models import PassReport
from typelink.resolve.ops import run_pass

EXIT_UNRESOLVED = 3


def print_report(report: PassReport, *, unresolved_limit: int = 20) -> None:
    """Human-readable per-file and summary report."""
    status(
        f"Found {pluralize(report.index_size, 'exported type')} across "
        f"{pluralize(report.files_scanned, 'file')}",
        style="none",
    )
    status("", style="none")

    for file_report in report.files:
        if not file_report.has_activity:
            continue
        status(f"{file_report.file_name}:", style="none")
        if file_report.resolved:
            status(
                f"Resolved {pluralize(file_report.resolved, 'reference')}",
                style="success",
                indent=2,
            )
        if file_report.structural_fixes:
            status(
                f"Fixed {pluralize(file_report.structural_fixes, 'Go builtin type')}",
                style="success",
                indent=2,
            )
        if file_report.injected:
            status("Added unexported type declarations", style="success", indent=2)
        if file_report.unresolved:
            status(
                f"Unresolved: {', '.join(file_report.unresolved)}",
                style="warning",
                indent=2,
            )

    unresolved = report.unresolved
    status("", style="none")
    status("Summary:", style="none")
    status(f"Resolved: {report.total_resolved} cross-package references")
    status(f"Fixed: {report.total_structural_fixes} Go builtin types")
    status(f"Unresolved: {len(unresolved)} references")

    if unresolved:
        status("", style="none")
        status("Unresolved references (may need manual mapping):", style="none")
        for entry in unresolved[:unresolved_limit]:
            status(entry, style="bullet", indent=2)
        if len(unresolved) > unresolved_limit:
            status(f"... and {len(unresolved) - unresolved_limit} more", indent=2)

    if report.files_written:
        status("", style="none")
        status(
            f"{pluralize(report.files_written, 'file')} updated. "
            "Run your type checker to verify.",
            style="success",
        )


@click.command()
@click.argument(
    "root",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--dry-run", is_flag=True, help="Report what would change without writing files")
@click.option(
    "--strict",
    is_flag=True,
    help=f"Exit with status {EXIT_UNRESOLVED} when references remain unresolved",
)
@click.option(
    "--generated-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory of generated files (overrides config)",
)
@click.pass_context
def resolve_command(
    ctx: click.Context,
    root: Path | None,
    dry_run: bool,
    strict: bool,
    generated_dir: Path | None,
) -> None:
    """Resolve cross-package type references in generated files.

    ROOT is the project root holding typelink.yaml. Defaults to the
    current directory. The generated directory is taken relative to it.
    """
    project_root = (root or Path.cwd()).resolve()
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))

    overrides: dict[str, dict[str, str]] = {}
    if generated_dir is not None:
        overrides["corpus"] = {"generated_dir": str(generated_dir.resolve())}

    try:
        config = load_config(project_root, **overrides)
    except TypelinkError as e:
        raise click.ClickException(str(e)) from e
    if not verbose:
        configure_logging(config=config.logging)

    status("Resolving cross-package type references...", style="none")
    if dry_run:
        status("(DRY RUN - no files will be modified)", style="warning")
    status("", style="none")

    with spinner("Analyzing generated files"):
        # Converted inside the spinner so only ClickException leaves it
        try:
            report = run_pass(
                resolve_generated_dir(config, project_root),
                config,
                dry_run=dry_run,
            )
        except TypelinkError as e:
            raise click.ClickException(str(e)) from e

    print_report(report, unresolved_limit=config.resolve.unresolved_report_limit)

    if strict and report.unresolved:
        ctx.exit(EXIT_UNRESOLVED)

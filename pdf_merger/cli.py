"""
Command-line interface for PDF merger.
"""

import sys
from typing import Sequence

import click
from rich.console import Console
from rich.markup import escape

from pdf_merger import __version__
from pdf_merger.exceptions import PDFMergerException, UsageError
from pdf_merger.merger import PDFMerger
from pdf_merger.types import MergeRequest, MergeResult
from pdf_merger.utils import configure_logging
from pdf_merger.validators import validate_request

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

OUTPUT_FLAG = "--output"
HELP_TOKEN = "-h"
VERSION_TOKEN = "-v"
USAGE = "Usage: pdf-merger <input1.pdf> [input2.pdf ...] --output <output.pdf>"

CONTEXT_SETTINGS = {
    "help_option_names": ["--help"],
    "ignore_unknown_options": True,
}


def parse_args(tokens: Sequence[str]) -> MergeRequest:
    """
    Turn raw command line tokens into a :class:`MergeRequest`.

    Every token before the first ``--output`` is an input path, the token
    right after it is the output path and anything following is ignored.

    Raises:
        UsageError: If the tokens do not describe a merge.
    """
    tokens = list(tokens)

    if len(tokens) < 3:
        raise UsageError("Expected input files followed by --output <output.pdf>")

    if OUTPUT_FLAG not in tokens:
        raise UsageError(f"{OUTPUT_FLAG} flag and filename required")

    output_index = tokens.index(OUTPUT_FLAG)
    if output_index == len(tokens) - 1:
        raise UsageError(f"{OUTPUT_FLAG} flag and filename required")

    input_files = tokens[:output_index]
    if not input_files:
        raise UsageError(f"At least one input PDF is required before {OUTPUT_FLAG}")

    return MergeRequest(input_files=tuple(input_files), output_file=tokens[output_index + 1])


def run(request: MergeRequest, *, metadata: bool = True) -> MergeResult:
    """Validate *request*, merge it and report progress on the console."""
    for warning in validate_request(request):
        err_console.print(f"[bold yellow]Warning:[/bold yellow] {escape(warning)}")

    console.print(f"Merging {len(request.input_files)} PDF files...")
    console.print(f"Input files: {escape(', '.join(request.input_files))}")
    console.print(f"Output file: {escape(request.output_file)}")

    def announce(position, total, pdf_path):
        console.print(f"Processing ({position}/{total}): {escape(pdf_path)}")

    def update_progress(position, total, pdf_path, pages_added):
        console.print(f"  Added {pages_added} pages")

    merger = PDFMerger(progress_callback=update_progress, start_callback=announce)
    result = merger.merge(request, metadata=metadata)

    console.print(
        f"\n[bold green]✓ Merged {result.files_merged} files "
        f"({result.total_pages} pages) into {escape(result.output_file)} "
        f"in {result.elapsed_seconds:.2f}s[/bold green]"
    )
    return result


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", prog_name="pdf-merger")
@click.option(
    '--no-metadata',
    is_flag=True,
    help='Do not copy document information from the first input'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Log debug output to standard error'
)
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, tokens, no_metadata, verbose):
    """
    PDF Merger - Concatenate PDF files into a single document.

    Pages are copied in the order the input files are given.
    -h and -v are accepted as short forms of --help and --version.

    Examples:

        pdf-merger a.pdf b.pdf --output merged.pdf

        pdf-merger chapters/*.pdf --output book.pdf --no-metadata
    """
    # Short flags only count as whole tokens, so inputs such as "-vacation.pdf"
    # reach parse_args untouched.
    if HELP_TOKEN in tokens:
        click.echo(ctx.get_help())
        ctx.exit(0)
    if VERSION_TOKEN in tokens:
        click.echo(f"pdf-merger, version {__version__}")
        ctx.exit(0)

    configure_logging(verbose)

    try:
        request = parse_args(tokens)
        run(request, metadata=not no_metadata)
    except UsageError as e:
        err_console.print(f"PDF Merger v{__version__}")
        err_console.print(escape(USAGE))
        err_console.print(f"[bold red]✗ Error:[/bold red] {escape(e.message)}")
        sys.exit(e.exit_code)
    except PDFMergerException as e:
        err_console.print(f"\n[bold red]✗ Error:[/bold red] {escape(e.message)}")
        sys.exit(e.exit_code)
    except Exception as e:
        err_console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


if __name__ == '__main__':
    cli()

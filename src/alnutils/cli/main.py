"""Main CLI application for alnutils."""

import typer
from typing import List, Optional
from enum import Enum

app = typer.Typer(
    name="alnutils",
    help="Codon projection, bootstrap resampling and bracket strings for alignments",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format."""
    TEXT = "text"
    JSON = "json"


ROWS_HELP = "Alignment rows as ID=SEQUENCE or ID/START-END=SEQUENCE"


@app.command()
def bracket(
    rows: List[str] = typer.Argument(..., help=ROWS_HELP),
):
    """
    Print the bracketed consensus string of an alignment.

    Example:
        alnutils bracket seq1=GGATCCATTCCTACT seq2=GGAT--ATTCCTCCT
    """
    from .commands.bracket import run_bracket

    run_bracket(rows=rows)


@app.command()
def bootstrap(
    rows: List[str] = typer.Argument(..., help=ROWS_HELP),
    replicates: int = typer.Option(
        1,
        "--replicates", "-r",
        help="Number of pseudo-replicates to generate",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Random seed for reproducibility",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Output format",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Minimal output",
    ),
):
    """
    Generate non-parametric bootstrap replicates by resampling columns.

    Example:
        alnutils bootstrap a=ACGTAC b=ACGTTC -r 100 --seed 42
    """
    from .commands.bootstrap import run_bootstrap

    run_bootstrap(
        rows=rows,
        replicates=replicates,
        seed=seed,
        format=format.value,
        quiet=quiet,
    )


@app.command()
def project(
    rows: List[str] = typer.Argument(..., help=ROWS_HELP),
    cds: List[str] = typer.Option(
        ...,
        "--cds", "-c",
        help="Coding sequence for a row as ID=NUCLEOTIDES (repeat per row)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Output format",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Minimal output",
    ),
):
    """
    Project a protein alignment onto coding-sequence coordinates.

    Each column becomes a codon; gaps become '---'. Coding sequences
    must be in frame +1.

    Example:
        alnutils project a=M-K b=MRK -c a=ATGAAA -c b=ATGCGTAAA
    """
    from .commands.project import run_project

    run_project(
        rows=rows,
        cds=cds,
        format=format.value,
        quiet=quiet,
    )


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

"""Bootstrap command implementation."""

import sys
from typing import Optional

from alnutils.errors import EmptyAlignment
from alnutils.transform.bootstrap import bootstrap_replicates

from .rows import (
    alignment_to_records,
    fail,
    format_alignment,
    load_alignment_or_exit,
    to_json,
)


def run_bootstrap(
    rows: list[str],
    replicates: int,
    seed: Optional[int],
    format: str,
    quiet: bool,
):
    """Generate and print bootstrap replicates."""
    aln = load_alignment_or_exit(rows)

    if not quiet:
        print(
            f"Resampling {aln.n_sites} columns x {aln.n_species} sequences, "
            f"{replicates} replicate(s)",
            file=sys.stderr,
        )

    try:
        reps = bootstrap_replicates(aln, replicates, seed=seed)
    except EmptyAlignment as e:
        fail("Bootstrap failed", e)

    if format == "json":
        print(to_json([alignment_to_records(rep) for rep in reps]))
    else:
        blocks = []
        for i, rep in enumerate(reps, start=1):
            blocks.append(f"# replicate {i}\n{format_alignment(rep)}")
        print('\n'.join(blocks))

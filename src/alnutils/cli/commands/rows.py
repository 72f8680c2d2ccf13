"""Inline alignment rows and output formatting shared by CLI commands."""

import json
import re
import sys
from typing import NoReturn, Optional

from alnutils.core.alignment import AlignedSequence, Alignment

# ID=SEQUENCE or ID/START-END=SEQUENCE
_ROW_NAME = re.compile(r'^(?P<id>.+?)(?:/(?P<start>\d+)-(?P<end>\d+))?$')


def parse_row(text: str) -> AlignedSequence:
    """Parse one ``ID[/START-END]=SEQUENCE`` argument."""
    name, sep, sequence = text.partition('=')
    match = _ROW_NAME.match(name.strip())
    if not sep or match is None:
        raise ValueError(f"Expected ID=SEQUENCE, got '{text}'")

    start = match.group('start')
    end = match.group('end')
    return AlignedSequence(
        id=match.group('id'),
        sequence=sequence.strip(),
        start=int(start) if start else 1,
        end=int(end) if end else None,
    )


def parse_alignment(rows: list[str]) -> Alignment:
    return Alignment(parse_row(row) for row in rows)


def parse_mapping(items: list[str]) -> dict[str, str]:
    """Parse ``ID=SEQUENCE`` arguments into a dict."""
    mapping = {}
    for item in items:
        key, sep, value = item.partition('=')
        if not sep or not key:
            raise ValueError(f"Expected ID=SEQUENCE, got '{item}'")
        mapping[key.strip()] = value.strip()
    return mapping


def load_alignment_or_exit(rows: list[str]) -> Alignment:
    try:
        return parse_alignment(rows)
    except ValueError as e:
        fail("Could not build alignment", e)


def fail(message: str, details: Optional[Exception] = None) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    if details is not None:
        print(f"Details: {details}", file=sys.stderr)
    sys.exit(1)


def alignment_to_records(aln: Alignment) -> list[dict]:
    return [
        {
            "id": seq.id,
            "start": seq.start,
            "end": seq.end,
            "strand": seq.strand,
            "sequence": seq.sequence,
        }
        for seq in aln.each_seq()
    ]


def format_alignment(aln: Alignment) -> str:
    """One ``>id/start-end`` header and sequence line per row."""
    lines = []
    for seq in aln.each_seq():
        lines.append(f">{seq.id}/{seq.start}-{seq.end}")
        lines.append(seq.sequence)
    return '\n'.join(lines)


def to_json(data) -> str:
    return json.dumps(data, indent=2)

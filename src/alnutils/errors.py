"""
Exceptions raised by alignment transformations.
"""


class AlignmentError(ValueError):
    """Base class for invalid alignment input."""


class MalformedAlignment(AlignmentError):
    """Rows of unequal length, duplicate ids, or no rows where some are needed."""


class EmptyAlignment(AlignmentError):
    """Operation requires at least one alignment column."""


class MissingCodingSequence(AlignmentError):
    """
    No coding sequence was supplied for an alignment row.

    Attributes
    ----------
    seq_id : str
        Identifier of the row without a coding sequence
    """

    def __init__(self, seq_id: str):
        self.seq_id = seq_id
        super().__init__(f"Cannot find coding sequence for '{seq_id}'")

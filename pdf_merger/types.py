"""
Type definitions and dataclasses for PDF Merger.

This module defines data structures used throughout the library.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class MergeRequest:
    """
    A single merge invocation.

    Attributes:
        input_files: Input PDF paths in merge order (duplicates allowed)
        output_file: Destination path of the merged PDF
    """
    input_files: Tuple[str, ...]
    output_file: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_files", tuple(self.input_files))


@dataclass
class MergeResult:
    """
    Result of a merge operation.

    Attributes:
        output_file: Path the merged PDF was written to
        files_merged: Number of input files merged
        total_pages: Number of pages in the merged PDF
        elapsed_seconds: Wall-clock duration of the merge
        page_counts: Pages contributed by each input, in input order
    """
    output_file: str
    files_merged: int
    total_pages: int
    elapsed_seconds: float
    page_counts: List[int] = field(default_factory=list)

    def __str__(self) -> str:
        """String representation of the result."""
        return (
            f"MergeResult(files={self.files_merged}, pages={self.total_pages}, "
            f"output='{self.output_file}')"
        )

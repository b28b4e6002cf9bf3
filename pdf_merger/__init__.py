"""
PDF Merger - Concatenate PDF files into a single document.

Quick Start:
    >>> from pdf_merger import merge_pdfs
    >>> result = merge_pdfs(['a.pdf', 'b.pdf'], 'merged.pdf')
    >>> result.total_pages

Main Classes:
    - PDFMerger: Sequential merge engine over a pluggable backend
    - MergeRequest: Ordered inputs and the output path of one merge
    - MergeResult: Summary of a finished merge

For CLI usage, use the 'pdf-merger' command after installation.
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Data types
from pdf_merger.types import MergeRequest, MergeResult

# Exceptions
from pdf_merger.exceptions import (
    PDFMergerException,
    UsageError,
    PDFValidationError,
    InputNotFoundError,
    InvalidExtensionError,
    OutputDirectoryMissingError,
    PDFParseError,
    PDFWriteError,
)

# Core classes
from pdf_merger.merger import PDFMerger, merge_pdfs
from pdf_merger.validators import validate_request

__all__ = [
    "PDFMerger",
    "merge_pdfs",
    "validate_request",
    "MergeRequest",
    "MergeResult",
    "PDFMergerException",
    "UsageError",
    "PDFValidationError",
    "InputNotFoundError",
    "InvalidExtensionError",
    "OutputDirectoryMissingError",
    "PDFParseError",
    "PDFWriteError",
    "__version__",
]

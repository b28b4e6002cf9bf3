"""Validation of merge requests before any PDF is opened."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .exceptions import (
    InputNotFoundError,
    InvalidExtensionError,
    OutputDirectoryMissingError,
)
from .types import MergeRequest
from .utils import format_file_size, has_pdf_extension, parent_directory

LOGGER = logging.getLogger("pdf_merger.validators")

LARGE_FILE_THRESHOLD = 100 * 1024 * 1024


def validate_input(pdf_path: str) -> List[str]:
    """Check a single input path and return advisory warnings.

    Raises:
        InputNotFoundError: If *pdf_path* does not exist.
        InvalidExtensionError: If *pdf_path* is not named ``*.pdf``.
    """

    path = Path(pdf_path).expanduser()
    LOGGER.debug("Validating input %s", path)
    if not path.exists():
        raise InputNotFoundError(f"Input file not found: {pdf_path}", path=pdf_path)

    if not has_pdf_extension(path):
        raise InvalidExtensionError(
            f"Input file does not have .pdf extension: {pdf_path}", path=pdf_path
        )

    warnings: List[str] = []
    size = path.stat().st_size
    if size > LARGE_FILE_THRESHOLD:
        warnings.append(
            f"Large input file ({format_file_size(size)}), merging may be slow: {pdf_path}"
        )
    return warnings


def validate_output(output_path: str) -> List[str]:
    """Check the output location and return advisory warnings.

    Raises:
        InvalidExtensionError: If *output_path* is not named ``*.pdf``.
        OutputDirectoryMissingError: If the parent directory does not exist.
    """

    path = Path(output_path).expanduser()
    LOGGER.debug("Validating output %s", path)
    if not has_pdf_extension(path):
        raise InvalidExtensionError(
            f"Output file must have .pdf extension: {output_path}", path=output_path
        )

    warnings: List[str] = []
    if path.exists():
        warnings.append(f"Output file already exists and will be overwritten: {output_path}")

    directory = parent_directory(path)
    if not directory.is_dir():
        raise OutputDirectoryMissingError(
            f"Output directory does not exist: {directory}", path=output_path
        )
    return warnings


def validate_request(request: MergeRequest) -> List[str]:
    """Validate every input and the output of *request*.

    Stops at the first failing path. Advisory warnings are logged and
    returned in the order they were found.
    """

    warnings: List[str] = []
    for pdf_path in request.input_files:
        warnings.extend(validate_input(pdf_path))
    warnings.extend(validate_output(request.output_file))

    for warning in warnings:
        LOGGER.info("Advisory: %s", warning)
    return warnings


__all__ = [
    "LARGE_FILE_THRESHOLD",
    "validate_input",
    "validate_output",
    "validate_request",
]

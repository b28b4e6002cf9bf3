"""Utility helpers for :mod:`pdf_merger`."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]

PDF_EXTENSION = ".pdf"


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging on standard error."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def has_pdf_extension(path: PathLike) -> bool:
    """Return ``True`` if *path* ends in ``.pdf``, ignoring case."""
    return Path(path).suffix.lower() == PDF_EXTENSION


def parent_directory(path: PathLike) -> Path:
    """Return the directory that will contain *path*."""
    return Path(path).expanduser().parent


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500.0 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"

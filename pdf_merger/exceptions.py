"""
Custom exceptions for PDF Merger.

Every failure the tool can report derives from :class:`PDFMergerException`.
Only the CLI entry point turns these into process exit codes.
"""

from typing import Optional


class PDFMergerException(Exception):
    """Base exception for all PDF Merger errors."""

    exit_code = 1

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF merger error occurred."


class UsageError(PDFMergerException):
    """Raised when the command line arguments are malformed or missing."""

    @property
    def default_message(self) -> str:
        return "Invalid command line arguments."


class PDFValidationError(PDFMergerException):
    """Raised when a merge request fails a filesystem precondition."""

    def __init__(self, message: str = "", path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    @property
    def default_message(self) -> str:
        return "Merge request failed validation."


class InputNotFoundError(PDFValidationError):
    """Raised when an input path does not exist."""

    @property
    def default_message(self) -> str:
        return "Input file not found."


class InvalidExtensionError(PDFValidationError):
    """Raised when a path does not carry a ``.pdf`` extension."""

    @property
    def default_message(self) -> str:
        return "File does not have .pdf extension."


class OutputDirectoryMissingError(PDFValidationError):
    """Raised when the parent directory of the output path does not exist."""

    @property
    def default_message(self) -> str:
        return "Output directory does not exist."


class PDFParseError(PDFMergerException):
    """Raised when an input cannot be read as a PDF document."""

    def __init__(self, message: str = "", path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    @property
    def default_message(self) -> str:
        return "Invalid, corrupted or encrypted PDF file."


class PDFWriteError(PDFMergerException):
    """Raised when the merged document cannot be written."""

    def __init__(self, message: str = "", path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    @property
    def default_message(self) -> str:
        return "Unable to write merged PDF."

"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol


@dataclass
class BackendDocument:
    """Represents a loaded, read-only PDF document."""

    path: str
    num_pages: int
    file_size: int

    def page_indices(self) -> range:
        return range(self.num_pages)

    def get_page(self, index: int) -> object:
        raise NotImplementedError

    @property
    def metadata(self) -> Dict[str, Any]:
        return {}


class PDFBackend(Protocol):
    """Protocol defining the operations the merge engine needs from a PDF library."""

    def load(self, pdf_path: str) -> BackendDocument:
        """Read and parse *pdf_path*, raising ``PDFParseError`` on failure."""

    def new_writer(self) -> object:
        """Return a fresh, empty accumulator document."""

    def add_page(self, writer: object, document: BackendDocument, index: int) -> None:
        """Append page *index* of *document* to *writer*."""

    def copy_metadata(self, writer: object, document: BackendDocument) -> None:
        """Copy the document information of *document* into *writer*."""

    def page_count(self, writer: object) -> int:
        """Return the number of pages accumulated in *writer*."""

    def serialize(self, writer: object) -> bytes:
        """Return the serialized PDF bytes of *writer*."""

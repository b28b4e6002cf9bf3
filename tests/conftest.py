from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_merger.backends import BackendDocument  # noqa: E402
from pdf_merger.exceptions import PDFParseError  # noqa: E402


def page_width(file_index: int, page_index: int) -> int:
    """Width that identifies page *page_index* of the *file_index*-th test PDF."""
    return 100 + file_index * 10 + page_index


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        pages: int = 1,
        *,
        file_index: int = 0,
        title: str | None = None,
    ) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        writer = PdfWriter()
        for page_index in range(pages):
            writer.add_blank_page(width=page_width(file_index, page_index), height=72)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    a = pdf_factory("a.pdf", 2, file_index=0, title="Document A")
    b = pdf_factory("b.pdf", 3, file_index=1)
    c = pdf_factory("c.pdf", 1, file_index=2)
    return [a, b, c]


@pytest.fixture()
def corrupt_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"this is not a pdf document at all")
    return path


@dataclass
class MemoryDocument(BackendDocument):
    pages: List[str] = field(default_factory=list)
    info: Dict[str, str] = field(default_factory=dict)

    def get_page(self, index: int) -> object:
        return self.pages[index]

    @property
    def metadata(self) -> Dict[str, str]:
        return dict(self.info)


@dataclass
class MemoryWriter:
    pages: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)


class MemoryBackend:
    """Backend serving documents from a dict of path -> page labels."""

    def __init__(self, documents: Dict[str, List[str]], broken: tuple[str, ...] = ()) -> None:
        self.documents = documents
        self.broken = set(broken)
        self.loaded: List[str] = []
        self.writers: List[MemoryWriter] = []

    def load(self, pdf_path: str) -> MemoryDocument:
        self.loaded.append(pdf_path)
        if pdf_path in self.broken or pdf_path not in self.documents:
            raise PDFParseError(f"Corrupted or invalid PDF file: {pdf_path}", path=pdf_path)
        pages = self.documents[pdf_path]
        return MemoryDocument(
            path=pdf_path,
            num_pages=len(pages),
            file_size=0,
            pages=list(pages),
            info={"/Title": pdf_path},
        )

    def new_writer(self) -> MemoryWriter:
        writer = MemoryWriter()
        self.writers.append(writer)
        return writer

    def add_page(self, writer: MemoryWriter, document: BackendDocument, index: int) -> None:
        writer.pages.append(document.get_page(index))

    def copy_metadata(self, writer: MemoryWriter, document: BackendDocument) -> None:
        writer.metadata.update(document.metadata)

    def page_count(self, writer: MemoryWriter) -> int:
        return len(writer.pages)

    def serialize(self, writer: MemoryWriter) -> bytes:
        return "\n".join(writer.pages).encode("utf-8")


@pytest.fixture()
def memory_backend_factory() -> Callable[..., MemoryBackend]:
    return MemoryBackend


@pytest.fixture()
def widths() -> Callable[[int, int], int]:
    return page_width

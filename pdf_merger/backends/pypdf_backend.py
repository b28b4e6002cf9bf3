"""pypdf backend implementation for PDF Merger."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import PDFParseError
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger("pdf_merger.backends")


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]

    @property
    def metadata(self) -> Dict[str, Any]:
        info = self.reader.metadata
        if not info:
            return {}
        return {
            key: str(value)
            for key, value in info.items()
            if isinstance(key, str) and value is not None
        }


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str) -> PypdfDocument:
        path = Path(pdf_path)
        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise PDFParseError(f"Unable to read PDF file: {pdf_path}. Error: {exc}", path=pdf_path) from exc

        if not raw_bytes:
            raise PDFParseError(f"PDF file is empty: {pdf_path}", path=pdf_path)

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise PDFParseError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}", path=pdf_path) from exc
        except Exception as exc:
            raise PDFParseError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}", path=pdf_path) from exc

        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF %s", pdf_path)
            try:
                decrypted = reader.decrypt("")
            except Exception as exc:  # pragma: no cover - decrypt errors vary
                raise PDFParseError(f"Unable to decrypt encrypted PDF: {pdf_path}. Error: {exc}", path=pdf_path) from exc
            if decrypted == 0:
                raise PDFParseError(f"PDF is password protected: {pdf_path}", path=pdf_path)

        try:
            num_pages = len(reader.pages)
        except Exception as exc:
            raise PDFParseError(f"Unable to read page tree of PDF: {pdf_path}. Error: {exc}", path=pdf_path) from exc

        if num_pages == 0:
            raise PDFParseError(f"PDF has no pages: {pdf_path}", path=pdf_path)

        return PypdfDocument(path=pdf_path, num_pages=num_pages, file_size=len(raw_bytes), reader=reader)

    def new_writer(self) -> PdfWriter:
        return PdfWriter()

    def add_page(self, writer: PdfWriter, document: BackendDocument, index: int) -> None:
        writer.add_page(document.get_page(index))

    def copy_metadata(self, writer: PdfWriter, document: BackendDocument) -> None:
        metadata = document.metadata
        if metadata:
            LOGGER.debug("Setting metadata on merged PDF: %s", metadata)
            writer.add_metadata(metadata)

    def page_count(self, writer: PdfWriter) -> int:
        return len(writer.pages)

    def serialize(self, writer: PdfWriter) -> bytes:
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

"""Merge functionality for the :mod:`pdf_merger` package."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .backends import BackendDocument, PDFBackend, PypdfBackend
from .exceptions import PDFMergerException, PDFParseError, PDFWriteError
from .types import MergeRequest, MergeResult
from .utils import PathLike

LOGGER = logging.getLogger("pdf_merger.merger")

# (position, total, path, pages_added)
ProgressCallback = Callable[[int, int, str, int], None]


class PDFMerger:
    """Concatenate the pages of several PDFs into one document.

    Inputs are processed strictly in order. Each one is loaded through the
    backend, all of its pages are appended to a single accumulator, and the
    accumulator is serialized only after every input has been copied, so a
    failing input never leaves a partial output behind.

    Args:
        backend: Document backend, :class:`PypdfBackend` by default.
        progress_callback: Called after each input with
            ``(position, total, path, pages_added)``; position is 1-based.
        start_callback: Called before each input is loaded with
            ``(position, total, path)``.
    """

    def __init__(
        self,
        backend: Optional[PDFBackend] = None,
        progress_callback: Optional[ProgressCallback] = None,
        start_callback: Optional[Callable[[int, int, str], None]] = None,
    ) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()
        self.progress_callback = progress_callback
        self.start_callback = start_callback

    def merge(self, request: MergeRequest, *, metadata: bool = True) -> MergeResult:
        """Merge ``request.input_files`` into ``request.output_file``.

        Raises:
            PDFParseError: If any input cannot be read or copied.
            PDFWriteError: If the merged document cannot be written.
        """

        started = time.perf_counter()
        writer = self.backend.new_writer()
        page_counts: List[int] = []
        total = len(request.input_files)

        for position, pdf_path in enumerate(request.input_files, start=1):
            if self.start_callback is not None:
                self.start_callback(position, total, pdf_path)

            document = self._append(writer, pdf_path)
            if metadata and position == 1:
                self._copy_metadata(writer, document)

            page_counts.append(document.num_pages)
            LOGGER.debug("Added %d pages from %s (%d/%d)", document.num_pages, pdf_path, position, total)
            if self.progress_callback is not None:
                self.progress_callback(position, total, pdf_path, document.num_pages)

        self._write(writer, request.output_file)

        result = MergeResult(
            output_file=request.output_file,
            files_merged=total,
            total_pages=self.backend.page_count(writer),
            elapsed_seconds=time.perf_counter() - started,
            page_counts=page_counts,
        )
        LOGGER.info("Merged %d PDFs into %s", total, request.output_file)
        return result

    def _append(self, writer: object, pdf_path: str) -> BackendDocument:
        LOGGER.debug("Processing input PDF %s", pdf_path)
        try:
            document = self.backend.load(pdf_path)
            for page_index in document.page_indices():
                self.backend.add_page(writer, document, page_index)
        except PDFMergerException:
            raise
        except Exception as exc:
            LOGGER.error("Failed to copy pages from %s: %s", pdf_path, exc)
            raise PDFParseError(f"Failed to merge {pdf_path}: {exc}", path=pdf_path) from exc
        return document

    def _copy_metadata(self, writer: object, document: BackendDocument) -> None:
        try:
            self.backend.copy_metadata(writer, document)
        except Exception as exc:  # pragma: no cover - metadata is best effort
            LOGGER.warning("Failed to capture metadata from %s: %s", document.path, exc)

    def _write(self, writer: object, output_file: str) -> None:
        try:
            data = self.backend.serialize(writer)
        except Exception as exc:
            LOGGER.error("Failed to serialize merged PDF: %s", exc)
            raise PDFWriteError(f"Failed to serialize merged PDF: {exc}", path=output_file) from exc

        try:
            Path(output_file).expanduser().write_bytes(data)
        except OSError as exc:
            LOGGER.error("Failed to write merged PDF to %s: %s", output_file, exc)
            raise PDFWriteError(
                f"Failed to write merged PDF to {output_file}: {exc}", path=output_file
            ) from exc


def merge_pdfs(
    inputs: Iterable[PathLike],
    output: PathLike,
    *,
    metadata: bool = True,
    backend: Optional[PDFBackend] = None,
) -> MergeResult:
    """Merge *inputs* into *output* without validating the paths first.

    Raises:
        PDFMergerException: If no inputs are given or merging fails.
    """

    request = MergeRequest(
        input_files=tuple(str(path) for path in inputs),
        output_file=str(output),
    )
    if not request.input_files:
        raise PDFMergerException("No input PDFs provided")
    return PDFMerger(backend=backend).merge(request, metadata=metadata)


__all__ = ["PDFMerger", "ProgressCallback", "merge_pdfs"]

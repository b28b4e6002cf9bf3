from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from pdf_merger import validators
from pdf_merger.exceptions import (
    InputNotFoundError,
    InvalidExtensionError,
    OutputDirectoryMissingError,
)
from pdf_merger.types import MergeRequest
from pdf_merger.validators import validate_input, validate_output, validate_request


def _request(inputs: list[Path | str], output: Path | str) -> MergeRequest:
    return MergeRequest(input_files=tuple(str(p) for p in inputs), output_file=str(output))


def test_validate_request_success(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    assert validate_request(_request(sample_pdfs, tmp_path / "out.pdf")) == []


def test_missing_input_fails(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    missing = tmp_path / "missing.pdf"

    with pytest.raises(InputNotFoundError) as excinfo:
        validate_request(_request([sample_pdfs[0], missing], tmp_path / "out.pdf"))

    assert excinfo.value.path == str(missing)
    assert str(missing) in str(excinfo.value)
    assert not (tmp_path / "out.pdf").exists()


def test_input_extension_is_checked_regardless_of_content(
    tmp_path: Path, pdf_factory: Callable[..., Path]
) -> None:
    real_pdf = pdf_factory("document.bin")

    with pytest.raises(InvalidExtensionError, match="document.bin"):
        validate_input(str(real_pdf))


def test_input_extension_is_case_insensitive(pdf_factory: Callable[..., Path]) -> None:
    upper = pdf_factory("REPORT.PDF")

    assert validate_input(str(upper)) == []


def test_first_failing_input_stops_validation(tmp_path: Path) -> None:
    first = tmp_path / "first.pdf"
    second = tmp_path / "notes.txt"
    second.write_text("text")

    with pytest.raises(InputNotFoundError):
        validate_request(_request([first, second], tmp_path / "out.pdf"))


def test_large_input_warns(
    monkeypatch: pytest.MonkeyPatch, pdf_factory: Callable[..., Path]
) -> None:
    doc = pdf_factory("big.pdf")
    monkeypatch.setattr(validators, "LARGE_FILE_THRESHOLD", 10)

    warnings = validate_input(str(doc))

    assert len(warnings) == 1
    assert "big.pdf" in warnings[0]


def test_output_extension_required(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    with pytest.raises(InvalidExtensionError, match="out.txt"):
        validate_request(_request(sample_pdfs, tmp_path / "out.txt"))


def test_output_extension_is_case_insensitive(tmp_path: Path) -> None:
    assert validate_output(str(tmp_path / "OUT.Pdf")) == []


def test_existing_output_warns(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    output = tmp_path / "out.pdf"
    output.write_bytes(b"old")

    warnings = validate_request(_request(sample_pdfs, output))

    assert warnings == [f"Output file already exists and will be overwritten: {output}"]


def test_missing_output_directory_fails(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    output = tmp_path / "nowhere" / "out.pdf"

    with pytest.raises(OutputDirectoryMissingError) as excinfo:
        validate_request(_request(sample_pdfs, output))

    assert excinfo.value.path == str(output)


def test_relative_output_uses_current_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)

    assert validate_output("merged.pdf") == []

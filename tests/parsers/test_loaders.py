from pathlib import Path
from re import compile, escape

import pytest
from returns.io import IOFailure, IOSuccess
from returns.result import Failure, Success
from returns.unsafe import unsafe_perform_io

from container_models import PGMImage
from parsers import decode_pgm, describe_failure, load_pgm, parse_pgm
from parsers.exceptions import ParseErrorKind, PGMDecodeError, TrailingDataError

from ..helper_function import unwrap_result

pytestmark = pytest.mark.usefixtures("clear_settings_cache")


def is_good_fail_logs(message: str, log: str) -> bool:
    log_pattern = compile(rf"DEBUG.*{escape(message)}:[\s\S]*?ERROR.*{escape(message)}")
    return log_pattern.search(log) is not None


def test_describe_failure_reports_offset(pgm_data: bytes):
    failure = parse_pgm(pgm_data[:-2]).failure()

    assert describe_failure(failure) == (
        "insufficient_bytes: expected 12 bytes, got 10 at byte offset 11 (10 bytes remaining)"
    )


class TestDecodePGM:
    def test_decodes_image(self, pgm_data: bytes, pgm_image: PGMImage):
        assert decode_pgm(pgm_data) == Success(pgm_image)

    def test_failure_is_decode_error(self):
        result = decode_pgm(b"P5\n4 x 255\n")

        assert isinstance(result, Failure)
        error = result.failure()
        assert isinstance(error, PGMDecodeError)
        assert error.kind == ParseErrorKind.INVALID_NUMBER
        assert error.offset == 5
        assert "at byte offset 5" in str(error)

    def test_trailing_data_is_ignored_by_default(self, pgm_data: bytes, pgm_image: PGMImage):
        assert decode_pgm(pgm_data + b"\x00\x00") == Success(pgm_image)

    def test_trailing_data_rejected_when_strict(self, pgm_data: bytes, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GREYMAP_STRICT_TRAILING_DATA", "true")

        result = decode_pgm(pgm_data + b"\x00\x00")

        error = result.failure()
        assert isinstance(error, TrailingDataError)
        assert (error.offset, error.count) == (len(pgm_data), 2)

    def test_strict_accepts_exact_data(
        self, pgm_data: bytes, pgm_image: PGMImage, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("GREYMAP_STRICT_TRAILING_DATA", "true")

        assert decode_pgm(pgm_data) == Success(pgm_image)

    def test_logs_on_success(self, pgm_data: bytes, caplog: pytest.LogCaptureFixture):
        with caplog.at_level("DEBUG"):
            _ = decode_pgm(pgm_data)

        assert "Successfully decoded PGM image" in caplog.text
        assert {record.levelname for record in caplog.records} == {"INFO"}

    def test_logs_on_failure(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level("DEBUG"):
            _ = decode_pgm(b"P6\n")

        assert is_good_fail_logs("Failed to decode PGM image", caplog.text), (
            "Logs don't match expected format."
        )
        assert "header_mismatch" in caplog.text


class TestLoadPGM:
    @pytest.fixture
    def pgm_file(self, tmp_path: Path, pgm_data: bytes) -> Path:
        path = tmp_path / "gradient.pgm"
        path.write_bytes(pgm_data)
        return path

    def test_loads_image(self, pgm_file: Path, pgm_image: PGMImage):
        result = load_pgm(pgm_file)

        assert isinstance(result, IOSuccess)
        assert unwrap_result(result) == pgm_image

    def test_missing_file(self, tmp_path: Path):
        result = load_pgm(tmp_path / "missing.pgm")

        assert isinstance(result, IOFailure)
        assert isinstance(unsafe_perform_io(result.failure()), FileNotFoundError)

    def test_decode_failure(self, tmp_path: Path):
        path = tmp_path / "broken.pgm"
        path.write_bytes(b"P5\n4 3 255\n\x00")

        result = load_pgm(path)

        error = unsafe_perform_io(result.failure())
        assert isinstance(error, PGMDecodeError)
        assert error.kind == ParseErrorKind.INSUFFICIENT_BYTES

    def test_file_too_large(self, pgm_file: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GREYMAP_MAX_FILE_SIZE", "8")

        result = load_pgm(pgm_file)

        error = unsafe_perform_io(result.failure())
        assert isinstance(error, ValueError)
        assert "larger than the maximum of 8 bytes" in str(error)

    def test_logs_on_failure(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        with caplog.at_level("DEBUG"):
            _ = load_pgm(tmp_path / "missing.pgm")

        assert is_good_fail_logs("Failed to load PGM file", caplog.text), (
            "Logs don't match expected format."
        )

"""Tests for reading candidate strings."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from termsearch.infrastructure import candidates
from termsearch.infrastructure.candidates import (
    CandidateSourceError,
    parse_candidates,
    read_candidates,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestParseCandidates:
    """Tests for parse_candidates function."""

    def test_one_candidate_per_line(self) -> None:
        assert parse_candidates("apple\npineapple\norange\n") == [
            "apple",
            "pineapple",
            "orange",
        ]

    def test_skips_blank_lines(self) -> None:
        assert parse_candidates("apple\n\n   \norange") == ["apple", "orange"]

    def test_keeps_inner_whitespace(self) -> None:
        assert parse_candidates(" green apple \r\n") == [" green apple "]

    def test_empty_text(self) -> None:
        assert parse_candidates("") == []


class TestReadCandidates:
    """Tests for read_candidates function."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "words.txt"
        path.write_text("apple\npineapple\n", encoding="utf-8")

        assert read_candidates(path) == ["apple", "pineapple"]

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "words.txt"
        path.write_text("café\n", encoding="utf-8")

        assert read_candidates(str(path)) == ["café"]

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("kiwi\norange\n"))

        assert read_candidates("-") == ["kiwi", "orange"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CandidateSourceError, match="not found"):
            read_candidates(tmp_path / "missing.txt")

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")

        with pytest.raises(CandidateSourceError, match="not UTF-8"):
            read_candidates(path)

    def test_too_large(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(candidates, "MAX_CANDIDATE_FILE_SIZE", 4)
        path = tmp_path / "words.txt"
        path.write_text("pineapple\n", encoding="utf-8")

        with pytest.raises(CandidateSourceError, match="too large"):
            read_candidates(path)

    def test_directory_is_error(self, tmp_path: Path) -> None:
        with pytest.raises(CandidateSourceError):
            read_candidates(tmp_path)

    def test_stdin_too_large(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(candidates, "MAX_CANDIDATE_FILE_SIZE", 8)
        monkeypatch.setattr("sys.stdin", io.StringIO("pineapple\norange\n"))

        with pytest.raises(CandidateSourceError, match="too large"):
            read_candidates("-")

    def test_stdin_at_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(candidates, "MAX_CANDIDATE_FILE_SIZE", 6)
        monkeypatch.setattr("sys.stdin", io.StringIO("apple\n"))

        assert read_candidates("-") == ["apple"]

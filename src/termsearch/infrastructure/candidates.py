"""Reading candidate strings from files or stdin."""

from __future__ import annotations

import sys
from pathlib import Path

import structlog

__all__ = [
    "MAX_CANDIDATE_FILE_SIZE",
    "CandidateSourceError",
    "parse_candidates",
    "read_candidates",
]

logger = structlog.get_logger()

MAX_CANDIDATE_FILE_SIZE = 10 * 1024 * 1024

STDIN_MARKER = "-"


class CandidateSourceError(Exception):
    """Raised when candidates cannot be read."""


def parse_candidates(text: str) -> list[str]:
    """Split text into candidates, one per line, skipping blank lines.

    Leading and trailing whitespace within a line is kept; only the line
    terminator is removed.
    """
    return [line for line in text.splitlines() if line.strip()]


def read_candidates(path: str | Path) -> list[str]:
    """Read candidates from a UTF-8 text file.

    Args:
        path: File path, or "-" to read standard input.

    Returns:
        Candidates in file order.

    Raises:
        CandidateSourceError: If the file is missing, unreadable, not UTF-8,
            or larger than MAX_CANDIDATE_FILE_SIZE (bytes for files,
            characters for stdin).
    """
    if str(path) == STDIN_MARKER:
        # One character past the limit is enough to detect oversized input
        text = sys.stdin.read(MAX_CANDIDATE_FILE_SIZE + 1)
        if len(text) > MAX_CANDIDATE_FILE_SIZE:
            raise CandidateSourceError(
                f"Standard input too large (max {MAX_CANDIDATE_FILE_SIZE} characters)"
            )
        candidates = parse_candidates(text)
        logger.debug("candidates_read", source="stdin", count=len(candidates))
        return candidates

    file_path = Path(path)
    try:
        file_size = file_path.stat().st_size
        if file_size > MAX_CANDIDATE_FILE_SIZE:
            raise CandidateSourceError(
                f"Candidate file too large: {file_path} "
                f"({file_size} bytes, max {MAX_CANDIDATE_FILE_SIZE})"
            )
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CandidateSourceError(f"Candidate file not found: {file_path}") from e
    except UnicodeDecodeError as e:
        raise CandidateSourceError(f"Candidate file is not UTF-8: {file_path}") from e
    except OSError as e:
        raise CandidateSourceError(f"Failed to read {file_path}: {e}") from e

    candidates = parse_candidates(text)
    logger.debug("candidates_read", source=str(file_path), count=len(candidates))
    return candidates

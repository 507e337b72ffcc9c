"""Text, file and FASTA helpers shared by the string algorithms."""

from __future__ import annotations

import math
from collections.abc import Container, Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

__all__ = [
    "FastaEntry",
    "chars",
    "chars_file",
    "lines",
    "words",
    "lines_file",
    "fasta_polymers",
    "fasta_polymers_file",
    "print_histogram",
]


def _checked(ch: str, alphabet: Container[str]) -> str:
    if ch not in alphabet:
        raise ValueError(f"invalid char {ch}")
    return ch


def _to_polymer(text: str, alphabet: Container[str]) -> str:
    return "".join(_checked(ch, alphabet) for ch in text)


def chars(s: str, alphabet: Container[str]) -> Iterator[str]:
    """Yield the characters of ``s`` with surrounding whitespace trimmed.

    Raises ValueError for a character outside ``alphabet``.
    """
    for ch in s.strip():
        yield _checked(ch, alphabet)


def chars_file(path: str | PathLike[str], alphabet: Container[str]) -> Iterator[str]:
    """Yield every non-whitespace character of a file, checked against ``alphabet``."""
    text = Path(path).read_text()
    for ch in text:
        if not ch.isspace():
            yield _checked(ch, alphabet)


def lines(s: str) -> Iterator[str]:
    """Yield the trimmed, non-empty lines of ``s``."""
    for line in s.splitlines():
        line = line.strip()
        if line:
            yield line


def words(s: str) -> Iterator[str]:
    """Yield the whitespace-separated words of ``s``."""
    yield from s.split()


def lines_file(path: str | PathLike[str]) -> Iterator[str]:
    """Yield the lines of a file without their line terminators."""
    with open(path, encoding="utf-8", newline="") as handle:
        for line in handle:
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line


@dataclass
class FastaEntry:
    """One FASTA record: its description line and its polymer."""

    description: str = ""
    polymer: str = ""


def _fasta_from_lines(
    source: Iterable[str], alphabet: Container[str]
) -> Iterator[FastaEntry]:
    entry: FastaEntry | None = None
    parts: list[str] = []
    for line in source:
        if line.startswith(">"):
            if entry is not None:
                entry.polymer = "".join(parts)
                yield entry
            entry = FastaEntry(line[1:])
            parts = []
        elif entry is not None:
            parts.append(_to_polymer(line, alphabet))
        else:
            raise ValueError("invalid format")
    if entry is not None:
        entry.polymer = "".join(parts)
        yield entry


def fasta_polymers(data: str, alphabet: Container[str]) -> Iterator[FastaEntry]:
    """Parse FASTA records from text."""
    return _fasta_from_lines(lines(data), alphabet)


def fasta_polymers_file(
    path: str | PathLike[str], alphabet: Container[str]
) -> Iterator[FastaEntry]:
    """Parse FASTA records from a file."""
    return _fasta_from_lines(lines_file(path), alphabet)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _value_at_quantile(ordered: list[int], quantile: float) -> int:
    if not ordered:
        return 0
    quantile = min(max(quantile, 0.0), 1.0)
    count = max(1, math.ceil(quantile * len(ordered)))
    return ordered[min(count, len(ordered)) - 1]


def print_histogram(label: str, values: Iterable[int]) -> str:
    """Print summary statistics of recorded values and return the printed line."""
    ordered = sorted(values)
    if any(value < 0 for value in ordered):
        raise ValueError("histogram values must be non-negative")
    mean = sum(ordered) / len(ordered) if ordered else 0.0
    maximum = ordered[-1] if ordered else 0
    q = {p: _value_at_quantile(ordered, p) for p in (0.05, 0.25, 0.50, 0.75, 0.95)}
    line = (
        f"{label}: mean={_format_number(mean)}, max= {maximum}, "
        f"q0.05={q[0.05]}, q0.25={q[0.25]},  q0.50={q[0.50]} "
        f"q0.75={q[0.75]} q0.95={q[0.95]}"
    )
    print(line)
    return line
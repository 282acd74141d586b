"""Console rendering for integer sequences."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO


def format_sequence(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def print_sequence(values: Iterable[int], label: str | None = None, stream: TextIO | None = None) -> None:
    """Write *values* on one line, optionally prefixed by *label*."""

    out = stream if stream is not None else sys.stdout
    rendered = format_sequence(values)
    if label:
        line = f"{label} {rendered}" if rendered else label
    else:
        line = rendered
    out.write(line + "\n")
    out.flush()

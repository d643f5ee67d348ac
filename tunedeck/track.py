"""A single playlist entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Track:
    """An audio file on disk together with its length in seconds."""

    path: str
    length: int
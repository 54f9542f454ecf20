"""Write plans produced by the store before anything touches the disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SaveTarget:
    """A single file to be written during a save.

    Attributes:
        path: Destination file path.
        payload: JSON value to serialize into the file.
        key: Top-level key this file externalizes, or None for the main file.
    """

    path: str
    payload: Any
    key: str | None = None


@dataclass
class SavePlan:
    """Every file a save will write, with the main file last.

    Attributes:
        targets: Reference files followed by the main config file.
        skipped: Referenced keys that had no value in the config.
    """

    targets: list[SaveTarget] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def main(self) -> SaveTarget:
        return self.targets[-1]

    @property
    def paths(self) -> list[str]:
        return [t.path for t in self.targets]

"""ConfigStore: dotted-path access to a JSON config persisted across files.

The main file holds the whole tree except for top-level keys marked as
references. Those subtrees live in their own JSON files and the main file
carries a ``@{<relative-path>}`` marker in their place. `restore` reverses the
substitution; markers whose target is not a regular file are kept verbatim.
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from types import MappingProxyType
from typing import Any

from loguru import logger

from splitconfig.core import dotpath
from splitconfig.core.plan import SavePlan, SaveTarget
from splitconfig.core.references import is_marker, make_marker, marker_target
from splitconfig.infrastructure import file_io
from splitconfig.infrastructure.write_tasks import FileWriteRunner


class ConfigFormatError(ValueError):
    """The main config document parsed but is not a JSON object."""


class ConfigStore:
    """In-memory config tree bound to a canonical file on disk."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._filename = os.fspath(filename)
        self._config: dict[str, Any] = {}
        self._references: dict[str, str] = {}

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def config(self) -> dict[str, Any]:
        """The live config tree. Mutations are visible to the store."""
        return self._config

    @property
    def references(self) -> Mapping[str, str]:
        """Read-only view of top-level key -> absolute reference file path."""
        return MappingProxyType(self._references)

    @property
    def base_dir(self) -> str:
        """Directory that reference paths are relative to."""
        return os.path.dirname(os.path.abspath(self._filename))

    # -------- accessors --------

    def has(self, name: str) -> bool:
        """Return True if the dotted `name` exists in the config."""
        return dotpath.has(self._config, name)

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value at dotted `name`, or `default` if absent."""
        return dotpath.get(self._config, name, default)

    def set(self, name: str, value: Any) -> ConfigStore:
        dotpath.set(self._config, name, value)
        return self

    def delete(self, name: str) -> ConfigStore:
        dotpath.delete(self._config, name)
        return self

    # -------- references --------

    def add_reference(self, key: str, path: str | os.PathLike[str]) -> ConfigStore:
        """Externalize top-level `key` to `path` on the next save.

        Relative paths are taken relative to the main file's directory. Each
        reference needs its own file, distinct from the main config file.
        """
        if "." in key:
            raise ValueError(f"Only top-level keys can be references: {key!r}")
        ref_path = file_io.resolve_in_dir(self.base_dir, os.fspath(path))
        if ref_path == os.path.abspath(self._filename):
            raise ValueError(f"Reference {key!r} cannot point at the config file itself")
        for other, other_path in self._references.items():
            if other != key and other_path == ref_path:
                raise ValueError(f"Reference {key!r} shares {ref_path} with {other!r}")
        self._references[key] = ref_path
        return self

    def remove_reference(self, key: str) -> ConfigStore:
        """Store `key` inline again on the next save."""
        self._references.pop(key, None)
        return self

    # -------- persistence --------

    def build_save_plan(self) -> SavePlan:
        """Compute the files a save would write, without touching the disk.

        Marker substitution happens on a shallow copy so the live tree keeps
        the real subtrees.
        """
        plan = SavePlan()
        if not self._references:
            plan.targets.append(SaveTarget(path=self._filename, payload=self._config))
            return plan

        snapshot = dict(self._config)
        base_dir = self.base_dir
        for key, ref_path in self._references.items():
            if key not in snapshot:
                logger.warning("Reference {} has no value in config, skipping", key)
                plan.skipped.append(key)
                continue
            plan.targets.append(SaveTarget(path=ref_path, payload=snapshot[key], key=key))
            snapshot[key] = make_marker(file_io.relative_to_dir(base_dir, ref_path))
        plan.targets.append(SaveTarget(path=self._filename, payload=snapshot))

        seen: set[str] = set()
        for target in plan.targets:
            resolved = os.path.abspath(target.path)
            if resolved in seen:
                raise ValueError(f"More than one save target writes to {resolved}")
            seen.add(resolved)
        return plan

    def save(self) -> None:
        """Write the config file and every reference file.

        Raises:
            TypeError | ValueError: A value is not JSON serializable, or two
                targets share one file; nothing has been written.
            OSError: At least one write failed. Files already written are not
                rolled back.
        """
        plan = self.build_save_plan()
        encoded = [(t.path, file_io.encode_json(t.payload)) for t in plan.targets]
        FileWriteRunner().write_all(encoded)
        logger.info("Saved config {} ({} file(s))", self._filename, len(encoded))

    def restore(self) -> None:
        """Replace the in-memory config with the contents of the config file.

        Referenced subtrees are read back inline. A marker whose target is not a
        regular file is left as the marker string. On any failure the previous
        config and references are kept.

        Raises:
            OSError: The config file or an existing reference file can't be read.
            ValueError: A file is not valid JSON, or the main document is not
                an object (`ConfigFormatError`).
        """
        config = file_io.decode_json(file_io.read_bytes(self._filename))
        if not isinstance(config, dict):
            raise ConfigFormatError(
                f"Config file must contain a JSON object: {self._filename}"
            )

        references: dict[str, str] = {}
        base_dir = self.base_dir
        for key, value in config.items():
            if not is_marker(value):
                continue
            ref_path = file_io.resolve_in_dir(base_dir, marker_target(value))
            if not file_io.is_file(ref_path):
                logger.debug("Reference file for {} not found: {}", key, ref_path)
                continue
            config[key] = file_io.decode_json(file_io.read_bytes(ref_path))
            references[key] = ref_path

        self._config = config
        self._references = references
        logger.info("Restored config {} ({} reference(s))", self._filename, len(references))

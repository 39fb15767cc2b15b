"""Stored list of GTP engines: executable path, arguments and display name."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

CONFIG_FILE_NAME = "engines.json"


@dataclass
class EngineArgs:
    """One configured engine."""

    path: str
    args: str = ""
    name: str = "engine"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "EngineArgs":
        """Create an entry named after the executable's file stem."""
        text = str(path)
        stem = Path(text).stem if text else ""
        return cls(path=text, args="", name=stem or "engine")

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "args": self.args, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> "EngineArgs":
        """Build an entry from a mapping holding string ``path``, ``args`` and ``name``."""
        if not isinstance(data, dict):
            raise ValueError("engine entry must be an object")
        values = {}
        for key in ("path", "args", "name"):
            value = data.get(key)
            if not isinstance(value, str):
                raise ValueError(f"engine entry field {key!r} must be a string")
            values[key] = value
        return cls(**values)


@dataclass
class EnginePaths:
    """The engine list, saved as JSON after every change."""

    config_path: Path
    paths: list[EngineArgs] = field(default_factory=list)
    current_path: Optional[int] = None

    @classmethod
    def load(cls, config_path: Union[str, Path, None] = None) -> "EnginePaths":
        """Read the list; a missing or unreadable file gives an empty list."""
        target = Path(config_path) if config_path is not None else Path.cwd() / CONFIG_FILE_NAME
        try:
            data = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            return cls(config_path=target)
        entries = data.get("paths") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            return cls(config_path=target)
        return cls(config_path=target, paths=[EngineArgs.from_dict(entry) for entry in entries])

    def save(self) -> None:
        document = {"paths": [engine.to_dict() for engine in self.paths]}
        self.config_path.write_text(
            json.dumps(document, ensure_ascii=False, separators=(",", ":")),
            encoding="utf-8",
        )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.paths):
            raise IndexError("index out of bounds")

    def add(self, path: Union[str, Path]) -> None:
        self.paths.append(EngineArgs.from_path(path))
        self.save()

    def change_name(self, index: int, name: str) -> None:
        self._check_index(index)
        self.paths[index].name = name
        self.save()

    def change_args(self, index: int, args: str) -> None:
        self._check_index(index)
        self.paths[index].args = args
        self.save()

    def delete(self, index: int) -> None:
        self._check_index(index)
        del self.paths[index]
        self.save()

    def names(self) -> list[str]:
        return [engine.name for engine in self.paths]
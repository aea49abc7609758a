import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from wire_check.exceptions import SettingsError


@dataclass(frozen=True)
class Settings:
    wire_gen: Optional[str] = None  # path to wire_gen.go; None disables the analysis
    recursive: bool = False  # follow calls from providers into the rest of the package

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Settings":
        """
        Decodes linter settings as they appear in JSON / YAML config:
        `{"wire-gen": "...", "recursive": true}`. Unknown keys are ignored.
        """
        if not isinstance(mapping, Mapping):
            raise SettingsError(f"settings must be an object, got {type(mapping).__name__}")

        wire_gen = mapping.get("wire-gen")
        if wire_gen is not None and not isinstance(wire_gen, str):
            raise SettingsError(f"'wire-gen' must be a string, got {type(wire_gen).__name__}")

        recursive = mapping.get("recursive", False)
        if not isinstance(recursive, bool):
            raise SettingsError(f"'recursive' must be a boolean, got {type(recursive).__name__}")

        return cls(wire_gen=wire_gen or None, recursive=recursive)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "Settings":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SettingsError(f"cannot read settings file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SettingsError(f"invalid JSON in settings file {path}: {e}") from e
        return cls.from_mapping(data)

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from skirmish.engine.game import GameConfig
from skirmish.engine.types import RANKS


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int):
        raise ContentError(f"Expected int for {key}")
    return v


def _require_str_list(obj: Mapping[str, object], key: str) -> list[str]:
    v = obj.get(key)
    if not isinstance(v, list) or not all(isinstance(i, str) for i in v):
        raise ContentError(f"Expected list of strings for {key}")
    return v


def parse_rules(raw: object) -> GameConfig:
    """Turn an already-validated rules document into a GameConfig."""
    if not isinstance(raw, dict):
        raise ContentError("rules.json must be an object")
    raw_copies = raw.get("copies", {})
    if not isinstance(raw_copies, dict):
        raise ContentError("rules.json.copies must be an object")
    # Ascending rank order regardless of the file's key order
    copies = tuple((rank, int(raw_copies.get(rank, 0))) for rank in RANKS)
    cfg = GameConfig(
        player_names=tuple(_require_str_list(raw, "players")),
        starting_life=_require_int(raw, "starting_life"),
        hand_size=_require_int(raw, "hand_size"),
        races=tuple(_require_str_list(raw, "races")),  # type: ignore[arg-type]
        copies=copies,
    )
    try:
        return cfg.validate()
    except ValueError as e:
        raise ContentError(str(e)) from e


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_rules(self, path: Path | None = None) -> GameConfig:
        rules_path = path or self._data_dir / "rules.json"
        raw = _load_json(rules_path)
        schema = _load_json(self._schema_dir / "rules.schema.json")
        validate_json(raw, schema, context=str(rules_path))
        return parse_rules(raw)

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_rules()

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft202012Validator

from .errors import WorldConfigError
from .geometry import Point
from .world import FORWARD_DELTAS, ORIENT_DELTAS, Instruction, Orientation, RoverConfiguration, World

_ORIENTATION_CODE = {"enum": [o.value for o in Orientation]}

WORLD_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["edge"],
    "additionalProperties": False,
    "properties": {
        "edge": {
            "type": "object",
            "required": ["x", "y"],
            "additionalProperties": False,
            "properties": {
                "x": {"type": "integer", "minimum": 0},
                "y": {"type": "integer", "minimum": 0},
            },
        },
        "forwardDeltas": {
            "type": "object",
            "propertyNames": _ORIENTATION_CODE,
            "additionalProperties": {
                "type": "array",
                "items": {"type": "integer"},
                "minItems": 2,
                "maxItems": 2,
            },
        },
        "orientDeltas": {
            "type": "object",
            "propertyNames": {"enum": [i.value for i in Instruction]},
            "additionalProperties": {"type": "integer"},
        },
    },
}


def load_world_document(path: Path) -> dict:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def validate_or_raise(payload: dict, schema: dict = WORLD_SCHEMA) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(payload), key=lambda e: tuple(str(p) for p in e.path))
    if not errors:
        return
    preview = []
    for err in errors[:10]:
        field = "/".join(str(p) for p in err.path) or "<root>"
        preview.append(f"{field}: {err.message}")
    raise WorldConfigError("World config validation failed: " + " | ".join(preview))


def world_from_document(doc: dict) -> World:
    """Build a World from a validated JSON document; omitted keys fall back to the standard rover."""
    validate_or_raise(doc)

    forward_deltas = dict(FORWARD_DELTAS)
    for code, (dx, dy) in doc.get("forwardDeltas", {}).items():
        forward_deltas[Orientation(code)] = Point(int(dx), int(dy))
    orient_deltas = dict(ORIENT_DELTAS)
    for code, delta in doc.get("orientDeltas", {}).items():
        orient_deltas[Instruction(code)] = int(delta)

    edge = doc["edge"]
    return World(
        edge=Point(int(edge["x"]), int(edge["y"])),
        rover=RoverConfiguration(forward_deltas=forward_deltas, orient_deltas=orient_deltas),
    )

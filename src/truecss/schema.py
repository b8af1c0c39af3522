"""Generate JSON Schema for the suite YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from truecss.config import CSS_EXPECTATIONS, SuiteConfig

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

# Collections the models reject when empty: (definition, property)
_NON_EMPTY = [
    ("SuiteConfig", "modules"),
    ("ModuleConfig", "tests"),
    ("TestConfig", "assertions"),
]


def _definition(schema: dict, name: str) -> dict:
    if schema.get("title") == name:
        return schema
    return schema["$defs"][name]


def generate_json_schema() -> dict:
    """Return the suite schema, with the rules pydantic validators enforce.

    Each assertion is a mapping with exactly one key naming its type, and
    ``assert_css`` takes exactly one of its expectation keys.
    """
    schema = SuiteConfig.model_json_schema()
    defs = schema["$defs"]

    for name, prop in _NON_EMPTY:
        _definition(schema, name)["properties"][prop]["minItems"] = 1

    for name, definition in defs.items():
        if name.startswith("Assert") and name.endswith("Assertion"):
            (key,) = definition["required"]
            definition["minProperties"] = 1
            definition["maxProperties"] = 1
            definition["description"] = f"Assertion of type '{key}'"

    defs["CssSpec"]["oneOf"] = [{"required": [key]} for key in CSS_EXPECTATIONS]

    return {"$schema": SCHEMA_DIALECT, **schema}


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")

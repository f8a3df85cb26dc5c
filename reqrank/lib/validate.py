"""
JSON Schema checks for requirement frontmatter and reqrank.yaml.

Schemas ship in reqrank/schemas as <name>.schema.json. YAML hands back
dates and tuples that JSON Schema does not know about, so data is converted
to plain JSON values before it is checked.
"""

import datetime
import json
from pathlib import Path
from typing import Any

import jsonschema

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"

_schemas: dict[str, dict] = {}


class ValidationError(Exception):
    """Data did not match a bundled schema.

    str() reads "[schema] message at path"; path is dotted (e.g.
    "dependencies.0") or "(root)".
    """

    def __init__(self, schema_name: str, message: str, path: str = None):
        self.schema_name = schema_name
        self.path = path
        text = f"[{schema_name}] {message}"
        if path:
            text += f" at {path}"
        super().__init__(text)


def load_schema(schema_name: str) -> dict:
    """Return the parsed schema, reading it from disk on first use."""
    schema = _schemas.get(schema_name)
    if schema is None:
        schema_file = SCHEMAS_DIR / f"{schema_name}.schema.json"
        if not schema_file.exists():
            raise ValidationError(schema_name, f"Schema file not found: {schema_file}")
        schema = _schemas[schema_name] = json.loads(schema_file.read_text())
    return schema


def to_json_compatible(value: Any) -> Any:
    """Convert YAML-loaded values (dates, tuples) into JSON-like data."""
    if isinstance(value, dict):
        return {str(k): to_json_compatible(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(v) for v in value]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


def validate(data: dict, schema_name: str) -> None:
    """Check data against the "requirement" or "config" schema.

    Only the first violation is reported.

    Raises:
        ValidationError: If data does not match
    """
    try:
        jsonschema.validate(instance=to_json_compatible(data), schema=load_schema(schema_name))
    except jsonschema.ValidationError as e:
        location = ".".join(str(p) for p in e.absolute_path) or "(root)"
        raise ValidationError(schema_name, e.message, location) from None

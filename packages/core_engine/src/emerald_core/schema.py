import json
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from emerald_core.issues import Issue

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"

# How a member's name joins its owner's in messages.
_MEMBER_SEPARATORS = {"methods": "#", "attributes": "#", "constants": "::"}


def default_schema_path() -> str:
    return str(SCHEMA_DIR / "host-model.schema.json")


def load_schema(schema_path: str) -> Dict[str, Any]:
    path = Path(schema_path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _to_json_path(parts: List[Any]) -> str:
    if not parts:
        return "/"
    return "/" + "/".join(str(part) for part in parts)


def entity_label(document: Dict[str, Any], parts: List[Any]) -> str:
    """Name the file, type or member an error path points into, e.g. ``Foo::Bar#baz``.

    Walks ``(collection, index)`` pairs of the path and stops at the first
    entry without a usable name; returns "" when not even the top-level
    entity has one.
    """
    label = ""
    node: Any = document
    for key, index in zip(parts[0::2], parts[1::2]):
        items = node.get(key) if isinstance(node, dict) else None
        if not isinstance(items, list) or not isinstance(index, int) or index >= len(items):
            break
        node = items[index]
        name = node.get("name") if isinstance(node, dict) else None
        if not isinstance(name, str) or not name:
            break
        label = f"{label}{_MEMBER_SEPARATORS.get(key, '::')}{name}" if label else name
    return label


def schema_issues(document: Dict[str, Any], schema: Dict[str, Any]) -> List[Issue]:
    validator = Draft202012Validator(schema)
    issues: List[Issue] = []

    for error in sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path]):
        parts = list(error.absolute_path)
        label = entity_label(document, parts)
        issues.append(
            Issue(
                severity="error",
                code="SCHEMA_VALIDATION_FAILED",
                message=f"{label}: {error.message}" if label else error.message,
                path=_to_json_path(parts),
            )
        )

    return issues

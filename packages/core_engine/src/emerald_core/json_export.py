"""Summary exporter: the whole host model as one JSON document.

No templates, no layout. Records have a fixed key order and collections a
fixed entity order, so identical input produces byte-identical ``all.json``.
"""

import json
import logging
from typing import Any, Dict, List

from emerald_core.config import GeneratorOptions
from emerald_core.model import FileEntity, MethodEntity, Store, TypeEntity
from emerald_core.output import ensure_dir, write_file
from emerald_core.registry import add_generator

logger = logging.getLogger(__name__)

SUMMARY_FILE = "all.json"


def _file_record(entity: FileEntity) -> Dict[str, Any]:
    return {
        "name": entity.relative_name,
        "description": entity.description,
    }


def _type_record(entity: TypeEntity) -> Dict[str, Any]:
    return {
        "name": entity.qualified_name,
        "kind": entity.kind,
        "superclass": entity.superclass,
        "description": entity.description,
        "methods": [method.full_name for method in entity.methods],
        "includes": list(entity.includes),
        "constants": [
            {"name": c.name, "value": c.value, "description": c.description}
            for c in entity.constants
        ],
        "attributes": [
            {"name": a.name, "rw": a.rw, "description": a.description}
            for a in entity.attributes
        ],
    }


def _method_record(method: MethodEntity) -> Dict[str, Any]:
    return {
        "name": method.name,
        "full_name": method.full_name,
        "owner": method.owner,
        "visibility": method.visibility,
        "kind": method.kind,
        "call_seq": list(method.signatures),
        "description": method.description,
        "body": method.body,
        "body_format": method.body_format,
    }


def generate_summary(store: Store) -> Dict[str, List[Dict[str, Any]]]:
    return {
        "files": [_file_record(entity) for entity in store.all_files()],
        "types": [_type_record(entity) for entity in store.all_classes_and_modules()],
        "methods": [_method_record(method) for method in store.all_methods()],
    }


def summary_json(store: Store) -> str:
    return json.dumps(generate_summary(store), indent=2, ensure_ascii=False) + "\n"


class JSONGenerator:
    """Writes ``all.json`` instead of HTML pages."""

    DESCRIPTION = "Whole documentation model as a single JSON file"

    def __init__(self, options: GeneratorOptions) -> None:
        self.options = options
        self.op_dir = options.output_path

    def generate(self, store: Store) -> List[str]:
        logger.debug("Sorting classes, modules, and methods...")
        content = summary_json(store)
        ensure_dir(self.op_dir)
        write_file(self.op_dir / SUMMARY_FILE, content)
        logger.info("Wrote %s", self.op_dir / SUMMARY_FILE)
        return [SUMMARY_FILE]


add_generator("json", JSONGenerator)

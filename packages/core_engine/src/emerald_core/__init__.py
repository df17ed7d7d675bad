from emerald_core.config import DATA_DIR, DEFAULT_TITLE, GeneratorOptions
from emerald_core.errors import (
    ConfigurationError,
    EmeraldError,
    ModelError,
    OutputError,
    PathCollisionError,
)
from emerald_core.generator import EmeraldGenerator, copy_base_files, plan_pages
from emerald_core.issues import Issue, has_errors, to_lines
from emerald_core.json_export import JSONGenerator, generate_summary, summary_json
from emerald_core.loader import load_yaml_model
from emerald_core.model import (
    AttributeEntity,
    ConstantEntity,
    FileEntity,
    MethodEntity,
    Store,
    TypeEntity,
    build_store,
    lint_issues,
)
from emerald_core.paths import (
    file_depth,
    method_anchor,
    path_for_file,
    path_for_type,
    root_prefix,
    type_depth,
)
from emerald_core.registry import add_generator, get_generator, list_generators
from emerald_core.schema import default_schema_path, load_schema, schema_issues
from emerald_core.templates import render, render_page, resolve_template, wrap_in_layout

__version__ = "0.1.0"

__all__ = [
    "add_generator",
    "AttributeEntity",
    "build_store",
    "ConfigurationError",
    "ConstantEntity",
    "copy_base_files",
    "DATA_DIR",
    "DEFAULT_TITLE",
    "default_schema_path",
    "EmeraldError",
    "EmeraldGenerator",
    "file_depth",
    "FileEntity",
    "generate_summary",
    "GeneratorOptions",
    "get_generator",
    "has_errors",
    "Issue",
    "JSONGenerator",
    "lint_issues",
    "list_generators",
    "load_schema",
    "load_yaml_model",
    "method_anchor",
    "MethodEntity",
    "ModelError",
    "OutputError",
    "path_for_file",
    "path_for_type",
    "PathCollisionError",
    "plan_pages",
    "render",
    "render_page",
    "resolve_template",
    "root_prefix",
    "schema_issues",
    "Store",
    "summary_json",
    "to_lines",
    "type_depth",
    "TypeEntity",
    "wrap_in_layout",
]

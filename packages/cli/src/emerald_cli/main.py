import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from emerald_core import (
    DEFAULT_TITLE,
    EmeraldError,
    GeneratorOptions,
    Store,
    build_store,
    default_schema_path,
    get_generator,
    lint_issues,
    list_generators,
    load_schema,
    load_yaml_model,
    schema_issues,
)
from emerald_core.issues import Issue, has_errors, summary_line, to_lines

LOG_FORMAT = "[%(levelname)s] %(message)s"


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, format=LOG_FORMAT)


def _print_issues(issues: List[Issue]) -> None:
    if not issues:
        print("No issues found.")
        return
    for line in to_lines(issues):
        print(line)


def _validate_model_file(model_path: str, schema: Dict[str, Any]) -> Tuple[Dict[str, Any], List[Issue]]:
    try:
        document = load_yaml_model(model_path)
    except (FileNotFoundError, ValueError) as exc:
        return {}, [Issue(severity="error", code="MODEL_LOAD_FAILED", message=str(exc))]
    issues = schema_issues(document, schema)
    if not has_errors(issues):
        issues.extend(lint_issues(document))
    return document, issues


def _load_store(args: argparse.Namespace) -> Optional[Store]:
    schema = load_schema(args.schema)
    document, issues = _validate_model_file(args.model, schema)
    if has_errors(issues):
        _print_issues(issues)
        return None
    return build_store(document)


def cmd_generate(args: argparse.Namespace) -> int:
    _configure_logging(args.debug)
    try:
        store = _load_store(args)
        if store is None:
            print("Generation aborted: host model validation failed.")
            return 1
        options = GeneratorOptions(op_dir=args.op, main_page=args.main, title=args.title)
        generator = get_generator(args.fmt)(options)
        written = generator.generate(store)
    except EmeraldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {len(written)} file(s) to {options.output_path}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    schema = load_schema(args.schema)
    _, issues = _validate_model_file(args.model, schema)
    _print_issues(issues)
    print(summary_line(issues))
    return 1 if has_errors(issues) else 0


def cmd_generators(args: argparse.Namespace) -> int:
    for name in list_generators():
        print(f"{name:10s}  {get_generator(name).DESCRIPTION}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emerald", description="Emerald documentation generator")
    sub = parser.add_subparsers(dest="command", required=True)

    generate_parser = sub.add_parser("generate", help="Generate documentation from a host model")
    generate_parser.add_argument("model", help="Path to host model YAML/JSON")
    generate_parser.add_argument("-f", "--fmt", default="emerald", help="Generator to use (default: emerald)")
    generate_parser.add_argument("-o", "--op", default="doc", help="Output directory (default: doc)")
    generate_parser.add_argument("--main", help="File or class/module whose page becomes index.html")
    generate_parser.add_argument("--title", default=DEFAULT_TITLE, help="Site title")
    generate_parser.add_argument("--schema", default=default_schema_path(), help="Path to host model JSON schema")
    generate_parser.add_argument("--debug", action="store_true", help="Log every written file")
    generate_parser.set_defaults(func=cmd_generate)

    validate_parser = sub.add_parser("validate", help="Validate a host model document")
    validate_parser.add_argument("model", help="Path to host model YAML/JSON")
    validate_parser.add_argument("--schema", default=default_schema_path(), help="Path to host model JSON schema")
    validate_parser.set_defaults(func=cmd_validate)

    generators_parser = sub.add_parser("generators", help="List available generators")
    generators_parser.set_defaults(func=cmd_generators)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

"""The host model: documented files, classes, modules and their members.

The host tool hands a generator one ``Store`` per run. Entities are frozen;
generators only read them.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from emerald_core.errors import ModelError
from emerald_core.issues import Issue

NAMESPACE_SEPARATOR = "::"

TYPE_KINDS = ("class", "module")
VISIBILITIES = ("public", "protected", "private")
METHOD_KINDS = ("instance", "class", "constructor")
BODY_FORMATS = ("html", "raw")
ATTRIBUTE_RW = ("R", "W", "RW")


def file_name_problem(relative_name: str) -> Optional[str]:
    """Why a file name cannot be laid out under the output directory, or None."""
    if not relative_name:
        return "name is empty"
    if relative_name.startswith("/"):
        return "name must be relative to the project root"
    if any(not segment for segment in relative_name.split("/")):
        return "name has an empty path segment"
    return None


def type_name_problem(qualified_name: str) -> Optional[str]:
    """Why a qualified name cannot be laid out under the output directory, or None."""
    segments = qualified_name.split(NAMESPACE_SEPARATOR)
    if any(not segment for segment in segments):
        return "name has an empty namespace segment"
    if any("/" in segment for segment in segments):
        return "name segments cannot contain '/'"
    return None


@dataclass(frozen=True)
class FileEntity:
    relative_name: str
    description: str = ""

    def __post_init__(self) -> None:
        problem = file_name_problem(self.relative_name)
        if problem:
            raise ModelError(f"File '{self.relative_name}': {problem}")


@dataclass(frozen=True)
class ConstantEntity:
    name: str
    value: str = ""
    description: str = ""


@dataclass(frozen=True)
class AttributeEntity:
    name: str
    rw: str = "RW"
    description: str = ""


@dataclass(frozen=True)
class MethodEntity:
    name: str
    owner: str
    visibility: str = "public"
    kind: str = "instance"
    call_seq: Tuple[str, ...] = ()
    description: str = ""
    body: str = ""
    body_format: str = "raw"

    @property
    def singleton(self) -> bool:
        return self.kind == "class"

    @property
    def pretty_name(self) -> str:
        return ("::" if self.singleton else "#") + self.name

    @property
    def full_name(self) -> str:
        return self.owner + self.pretty_name

    @property
    def signatures(self) -> Tuple[str, ...]:
        return self.call_seq or (self.name,)


@dataclass(frozen=True)
class TypeEntity:
    qualified_name: str
    kind: str = "class"
    superclass: Optional[str] = None
    description: str = ""
    methods: Tuple[MethodEntity, ...] = ()
    includes: Tuple[str, ...] = ()
    constants: Tuple[ConstantEntity, ...] = ()
    attributes: Tuple[AttributeEntity, ...] = ()

    def __post_init__(self) -> None:
        problem = type_name_problem(self.qualified_name)
        if problem:
            raise ModelError(f"Type '{self.qualified_name}': {problem}")
        if self.kind not in TYPE_KINDS:
            raise ModelError(f"{self.qualified_name}: unknown kind {self.kind!r}")
        if self.kind == "module" and self.superclass:
            raise ModelError(f"{self.qualified_name}: a module cannot have a superclass")
        for method in self.methods:
            if method.owner != self.qualified_name:
                raise ModelError(
                    f"{method.full_name}: listed under {self.qualified_name} but owned by {method.owner}"
                )

    @property
    def is_module(self) -> bool:
        return self.kind == "module"

    @property
    def name(self) -> str:
        return self.qualified_name.split(NAMESPACE_SEPARATOR)[-1]

    @property
    def namespace(self) -> str:
        return NAMESPACE_SEPARATOR.join(self.qualified_name.split(NAMESPACE_SEPARATOR)[:-1])


def _method_sort_key(method: MethodEntity) -> Tuple[str, str]:
    return (method.full_name, method.name)


class Store:
    """Everything the host documented during one run."""

    def __init__(self, files: Iterable[FileEntity] = (), types: Iterable[TypeEntity] = ()) -> None:
        self._files = list(files)
        self._types: Dict[str, TypeEntity] = {}
        for entity in types:
            if entity.qualified_name in self._types:
                raise ModelError(f"{entity.qualified_name}: documented twice")
            self._types[entity.qualified_name] = entity

    def all_files(self) -> List[FileEntity]:
        return list(self._files)

    def all_classes_and_modules(self) -> List[TypeEntity]:
        return sorted(self._types.values(), key=lambda entity: entity.qualified_name)

    def all_methods(self) -> List[MethodEntity]:
        methods = [method for entity in self._types.values() for method in entity.methods]
        return sorted(methods, key=_method_sort_key)

    def find_type(self, qualified_name: str) -> Optional[TypeEntity]:
        return self._types.get(qualified_name)


# ---------------------------------------------------------------------------
# Building a store from a plain document
# ---------------------------------------------------------------------------

_ITEM_KINDS = {dict: "mapping", str: "string"}


def _require_name(raw: Dict[str, Any], label: str) -> str:
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise ModelError(f"{label}: missing required field 'name'")
    return name


def _entries(raw: Dict[str, Any], key: str, label: str, item_type: type = dict) -> List[Any]:
    """The list under ``key``; absent or null means empty."""
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ModelError(f"{label}: {key} must be a list, got {type(value).__name__}")
    for index, item in enumerate(value):
        if not isinstance(item, item_type):
            raise ModelError(
                f"{label}: {key} #{index} must be a {_ITEM_KINDS[item_type]}, got {type(item).__name__}"
            )
    return value


def _choice(raw: Dict[str, Any], key: str, allowed: Tuple[str, ...], default: str, label: str) -> str:
    value = raw.get(key) or default
    if value not in allowed:
        raise ModelError(f"{label}: {key} must be one of {', '.join(allowed)}, got {value!r}")
    return value


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _call_seq(raw: Dict[str, Any], label: str) -> Tuple[str, ...]:
    call_seq = raw.get("call_seq")
    if isinstance(call_seq, str):
        return tuple(line.strip() for line in call_seq.splitlines() if line.strip())
    return tuple(_entries(raw, "call_seq", label, str))


def _build_method(raw: Dict[str, Any], owner: str, position: int) -> MethodEntity:
    name = _require_name(raw, f"{owner} method #{position}")
    label = f"{owner}#{name}"
    return MethodEntity(
        name=name,
        owner=owner,
        visibility=_choice(raw, "visibility", VISIBILITIES, "public", label),
        kind=_choice(raw, "kind", METHOD_KINDS, "instance", label),
        call_seq=_call_seq(raw, label),
        description=_text(raw.get("description")),
        body=_text(raw.get("body")),
        body_format=_choice(raw, "body_format", BODY_FORMATS, "raw", label),
    )


def _build_type(raw: Dict[str, Any], position: int) -> TypeEntity:
    qualified_name = _require_name(raw, f"type #{position}")
    kind = _choice(raw, "kind", TYPE_KINDS, "class", qualified_name)
    superclass = raw.get("superclass") or None
    if superclass is not None and not isinstance(superclass, str):
        raise ModelError(f"{qualified_name}: superclass must be a string, got {type(superclass).__name__}")
    constants = tuple(
        ConstantEntity(
            name=_require_name(item, f"{qualified_name} constant #{index}"),
            value=_text(item.get("value")),
            description=_text(item.get("description")),
        )
        for index, item in enumerate(_entries(raw, "constants", qualified_name))
    )
    attributes = tuple(
        AttributeEntity(
            name=_require_name(item, f"{qualified_name} attribute #{index}"),
            rw=_choice(item, "rw", ATTRIBUTE_RW, "RW", f"{qualified_name}.{item.get('name')}"),
            description=_text(item.get("description")),
        )
        for index, item in enumerate(_entries(raw, "attributes", qualified_name))
    )
    methods = tuple(
        _build_method(item, qualified_name, index)
        for index, item in enumerate(_entries(raw, "methods", qualified_name))
    )
    return TypeEntity(
        qualified_name=qualified_name,
        kind=kind,
        superclass=superclass,
        description=_text(raw.get("description")),
        methods=methods,
        includes=tuple(_entries(raw, "includes", qualified_name, str)),
        constants=constants,
        attributes=attributes,
    )


def build_store(document: Dict[str, Any]) -> Store:
    """Turn a host model document (``files`` and ``types`` lists) into a ``Store``."""
    files = [
        FileEntity(
            relative_name=_require_name(raw, f"file #{index}"),
            description=_text(raw.get("description")),
        )
        for index, raw in enumerate(_entries(document, "files", "host model"))
    ]
    types = [_build_type(raw, index) for index, raw in enumerate(_entries(document, "types", "host model"))]
    return Store(files=files, types=types)


def lint_issues(document: Dict[str, Any]) -> List[Issue]:
    """Semantic checks a JSON schema cannot express."""
    issues: List[Issue] = []

    seen_files = set()
    for index, raw in enumerate(document.get("files") or []):
        name = raw.get("name", "")
        path = f"/files/{index}"
        if name in seen_files:
            issues.append(Issue("error", "DUPLICATE_FILE", f"File '{name}' is listed twice", path))
        seen_files.add(name)
        problem = file_name_problem(name)
        if problem:
            issues.append(Issue("error", "INVALID_FILE_NAME", f"File '{name}': {problem}", path))

    seen_types = set()
    for index, raw in enumerate(document.get("types") or []):
        name = raw.get("name", "")
        path = f"/types/{index}"
        if name in seen_types:
            issues.append(Issue("error", "DUPLICATE_TYPE", f"Type '{name}' is documented twice", path))
        seen_types.add(name)
        if raw.get("kind") == "module" and raw.get("superclass"):
            issues.append(Issue("error", "MODULE_SUPERCLASS", f"Module '{name}' cannot have a superclass", path))
        problem = type_name_problem(name)
        if problem:
            issues.append(Issue("error", "INVALID_TYPE_NAME", f"Type '{name}': {problem}", path))
        if not raw.get("description"):
            issues.append(Issue("warn", "UNDOCUMENTED_TYPE", f"Type '{name}' has no description", path))
        for m_index, method in enumerate(raw.get("methods") or []):
            if not method.get("description") and not method.get("body"):
                issues.append(
                    Issue(
                        "warn",
                        "UNDOCUMENTED_METHOD",
                        f"Method '{name}#{method.get('name', '')}' has no documentation",
                        f"{path}/methods/{m_index}",
                    )
                )

    return issues

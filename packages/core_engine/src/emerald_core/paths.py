"""Output path naming and relative root prefixes.

Paths follow Darkfish's cross-reference naming, so a link to ``Foo::Bar#baz``
published against Darkfish output keeps working against Emerald output.
Every returned path is relative to the output directory and uses ``/``;
prepend the current root prefix to get a complete href.
"""

from urllib.parse import quote_plus

from emerald_core.model import NAMESPACE_SEPARATOR, MethodEntity

CURRENT_DIR = "./"
PARENT_DIR = "../"


def path_for_file(relative_name: str) -> str:
    return relative_name.replace(".", "_") + ".html"


def path_for_type(qualified_name: str) -> str:
    return "/".join(qualified_name.split(NAMESPACE_SEPARATOR)) + ".html"


def method_anchor(method: MethodEntity) -> str:
    """Anchor of a method inside its type's page, e.g. ``method-i-baz``."""
    prefix = "c" if method.singleton else "i"
    escaped = quote_plus(method.name).replace("%", "-")
    if escaped.startswith("-"):
        escaped = escaped[1:]
    return f"method-{prefix}-{escaped}"


def root_prefix(depth: int) -> str:
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    return PARENT_DIR * depth if depth else CURRENT_DIR


def file_depth(relative_name: str) -> int:
    # Last component is the file itself.
    return len(relative_name.split("/")) - 1


def type_depth(qualified_name: str) -> int:
    return len(qualified_name.split(NAMESPACE_SEPARATOR)) - 1

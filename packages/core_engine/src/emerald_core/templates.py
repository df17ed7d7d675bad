"""Page templates and the shared layout.

Each template id maps to a function that builds the page-specific fragment
from one entity. ``wrap_in_layout`` then places that fragment into the site
shell. The current root (relative prefix back to the output directory) and the
page title are passed in explicitly for every page; every href and asset
reference a template produces starts with that root.
"""

import html
from typing import Callable, Dict, List, Optional, Sequence, Union

from emerald_core.config import DEFAULT_TITLE
from emerald_core.errors import ConfigurationError
from emerald_core.model import (
    AttributeEntity,
    ConstantEntity,
    FileEntity,
    MethodEntity,
    Store,
    TypeEntity,
)
from emerald_core.paths import method_anchor, path_for_file, path_for_type

Entity = Union[FileEntity, TypeEntity]
TemplateFunc = Callable[[Entity, str, str, Optional[Store]], str]

STYLESHEET = "stylesheets/rdoc.css"
SCRIPT = "javascripts/emerald.js"

PLACEHOLDER_TEXT = "This is the RDoc documentation."


def _esc(text: object) -> str:
    """HTML-escape a string."""
    return html.escape(str(text)) if text else ""


def _type_link(qualified_name: str, current_root: str, store: Optional[Store]) -> str:
    """Link to a type's page when the host documented it, plain text otherwise."""
    if store is not None and store.find_type(qualified_name) is not None:
        href = current_root + path_for_type(qualified_name)
        return f'<a href="{_esc(href)}">{_esc(qualified_name)}</a>'
    return f"<code>{_esc(qualified_name)}</code>"


def _description_html(text: str, empty_note: str) -> str:
    if not text:
        return f'<p class="missing-docs">{_esc(empty_note)}</p>'
    paragraphs = [chunk.strip() for chunk in text.split("\n\n") if chunk.strip()]
    return "\n".join(f"<p>{_esc(chunk)}</p>" for chunk in paragraphs)


# ---------------------------------------------------------------------------
# File pages
# ---------------------------------------------------------------------------

def _render_file(entity: FileEntity, current_root: str, current_title: str, store: Optional[Store]) -> str:
    parts = [f'<div class="file-page" id="file-{_esc(entity.relative_name)}">']
    parts.append(f'<h1><span class="kind kind-file">file</span> {_esc(current_title)}</h1>')
    parts.append('<section class="description">')
    parts.append(_description_html(entity.description, "There is no documentation for this file."))
    parts.append("</section>")
    parts.append("</div>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Class and module pages
# ---------------------------------------------------------------------------

def _constants_section(constants: Sequence[ConstantEntity]) -> str:
    parts = [f'<section class="constants" id="constants"><h2>Constants ({len(constants)})</h2>']
    if constants:
        parts.append("<table>\n<thead><tr><th>Name</th><th>Value</th><th>Description</th></tr></thead>\n<tbody>")
        for constant in constants:
            parts.append(
                "<tr>"
                f'<td class="const-name" id="{_esc(constant.name)}"><code>{_esc(constant.name)}</code></td>'
                f'<td class="const-value"><code>{_esc(constant.value)}</code></td>'
                f"<td>{_esc(constant.description)}</td>"
                "</tr>"
            )
        parts.append("</tbody></table>")
    parts.append("</section>")
    return "\n".join(parts)


def _attributes_section(attributes: Sequence[AttributeEntity]) -> str:
    parts = [f'<section class="attributes" id="attributes"><h2>Attributes ({len(attributes)})</h2>']
    if attributes:
        parts.append("<table>\n<thead><tr><th>Name</th><th>Access</th><th>Description</th></tr></thead>\n<tbody>")
        for attribute in attributes:
            parts.append(
                "<tr>"
                f'<td class="attr-name" id="attribute-i-{_esc(attribute.name)}"><code>{_esc(attribute.name)}</code></td>'
                f'<td><span class="badge badge-rw">[{_esc(attribute.rw)}]</span></td>'
                f"<td>{_esc(attribute.description)}</td>"
                "</tr>"
            )
        parts.append("</tbody></table>")
    parts.append("</section>")
    return "\n".join(parts)


def _method_html(method: MethodEntity) -> str:
    parts = [
        f'<div class="method method-{_esc(method.visibility)} method-{_esc(method.kind)}" '
        f'id="{_esc(method_anchor(method))}">'
    ]
    parts.append('<div class="method-heading">')
    for signature in method.signatures:
        parts.append(f'<code class="method-callseq">{_esc(signature)}</code>')
    parts.append(
        f'<span class="badge badge-{_esc(method.visibility)}">{_esc(method.visibility)}</span>'
        f'<span class="badge badge-kind">{_esc(method.kind)}</span>'
    )
    parts.append("</div>")
    if method.description:
        parts.append(f'<div class="method-description">{_description_html(method.description, "")}</div>')
    if method.body:
        if method.body_format == "html":
            parts.append(f'<div class="method-body">{method.body}</div>')
        else:
            parts.append(f'<pre class="method-body">{_esc(method.body)}</pre>')
    parts.append("</div>")
    return "\n".join(parts)


def _methods_section(methods: Sequence[MethodEntity]) -> str:
    parts = [f'<section class="methods" id="methods"><h2>Methods ({len(methods)})</h2>']
    parts.append('<ul class="method-index">')
    for method in methods:
        parts.append(f'<li><a href="#{_esc(method_anchor(method))}">{_esc(method.pretty_name)}</a></li>')
    parts.append("</ul>")
    for method in methods:
        parts.append(_method_html(method))
    parts.append("</section>")
    return "\n".join(parts)


def _render_type(entity: TypeEntity, current_root: str, current_title: str, store: Optional[Store]) -> str:
    parts = [f'<div class="type-page" id="{_esc(entity.kind)}-{_esc(entity.qualified_name)}">']
    parts.append(f'<h1><span class="kind kind-{_esc(entity.kind)}">{_esc(entity.kind)}</span> {_esc(current_title)}</h1>')

    meta: List[str] = []
    if entity.namespace:
        meta.append(f"<li>Namespace: {_type_link(entity.namespace, current_root, store)}</li>")
    if entity.superclass:
        meta.append(f"<li>Superclass: {_type_link(entity.superclass, current_root, store)}</li>")
    parts.append(f'<ul class="type-meta">{"".join(meta)}</ul>')

    parts.append('<section class="description">')
    parts.append(_description_html(entity.description, f"There is no documentation for this {entity.kind}."))
    parts.append("</section>")

    parts.append(f'<section class="includes" id="includes"><h2>Included Modules ({len(entity.includes)})</h2><ul>')
    for included in entity.includes:
        parts.append(f"<li>{_type_link(included, current_root, store)}</li>")
    parts.append("</ul></section>")

    parts.append(_constants_section(entity.constants))
    parts.append(_attributes_section(entity.attributes))
    parts.append(_methods_section(entity.methods))
    parts.append("</div>")
    return "\n".join(parts)


TEMPLATES: Dict[str, TemplateFunc] = {
    "file": _render_file,
    "type": _render_type,
}


def resolve_template(template_id: str) -> TemplateFunc:
    try:
        return TEMPLATES[template_id]
    except KeyError:
        known = ", ".join(sorted(TEMPLATES))
        raise ConfigurationError(f"Unknown template '{template_id}' (known: {known})") from None


def render(
    template_id: str,
    entity: Entity,
    current_root: str,
    current_title: str,
    store: Optional[Store] = None,
) -> str:
    """Render the page-specific fragment for ``entity``."""
    return resolve_template(template_id)(entity, current_root, current_title, store)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def _navigation(current_root: str, store: Optional[Store]) -> str:
    if store is None:
        return ""
    parts = ['<nav class="toc">']
    parts.append('<div class="search-box"><input type="text" id="search" placeholder="Search..." oninput="filterNavigation()"></div>')
    parts.append("<h2>Files</h2><ul>")
    for entity in store.all_files():
        href = current_root + path_for_file(entity.relative_name)
        parts.append(f'<li><a href="{_esc(href)}">{_esc(entity.relative_name)}</a></li>')
    parts.append("</ul>")
    parts.append("<h2>Classes and Modules</h2><ul>")
    for entity in store.all_classes_and_modules():
        href = current_root + path_for_type(entity.qualified_name)
        parts.append(
            f'<li><a href="{_esc(href)}"><span class="kind kind-{_esc(entity.kind)}">'
            f"{_esc(entity.kind[0].upper())}</span> {_esc(entity.qualified_name)}</a></li>"
        )
    parts.append("</ul></nav>")
    return "\n".join(parts)


def wrap_in_layout(
    body: str,
    current_root: str,
    current_title: str,
    store: Optional[Store] = None,
    site_title: str = DEFAULT_TITLE,
) -> str:
    """Place a rendered fragment into the shared page shell."""
    root = _esc(current_root)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{_esc(current_title)} - {_esc(site_title)}</title>
<link rel="stylesheet" href="{root}{STYLESHEET}">
<script src="{root}{SCRIPT}"></script>
</head>
<body>
<header>
  <h1><a href="{root}index.html">{_esc(site_title)}</a></h1>
</header>
<div class="container">
{_navigation(current_root, store)}
<main>
{body}
</main>
</div>
<footer>
  Generated by <strong>Emerald</strong>
</footer>
</body>
</html>
"""


def render_page(
    template_id: str,
    entity: Entity,
    current_root: str,
    current_title: str,
    store: Optional[Store] = None,
    site_title: str = DEFAULT_TITLE,
) -> str:
    """Render ``entity`` and wrap it into the layout exactly once."""
    body = render(template_id, entity, current_root, current_title, store)
    return wrap_in_layout(body, current_root, current_title, store, site_title=site_title)


def placeholder_index(site_title: str = DEFAULT_TITLE) -> str:
    """The ``index.html`` written when no main page is designated."""
    return (
        f"<!DOCTYPE html>\n<html><head><title>{_esc(site_title)}</title></head>"
        f"<body><p>{PLACEHOLDER_TEXT}</p></body></html>\n"
    )

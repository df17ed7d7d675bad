"""Static HTML site generator.

Every class, module and documented file gets its own page: the page-specific
template is rendered for the entity, then wrapped into the shared layout.

About relative paths: the output directory must work both when opened from
disk and when served as the web root, so every link in a generated page is
relative. Before a page is rendered its root prefix (``./``, ``../``, ...) is
computed from the page's nesting depth and passed to the templates together
with the page title; nothing carries over from the previous page.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from emerald_core.config import ASSET_DIRS, GeneratorOptions
from emerald_core.errors import ConfigurationError, PathCollisionError
from emerald_core.model import FileEntity, Store, TypeEntity
from emerald_core.output import copy_file, ensure_dir, write_file
from emerald_core.paths import file_depth, path_for_file, path_for_type, root_prefix, type_depth
from emerald_core.registry import add_generator
from emerald_core.templates import placeholder_index, resolve_template, wrap_in_layout

logger = logging.getLogger(__name__)

INDEX_PAGE = "index.html"


@dataclass(frozen=True)
class PagePlan:
    template_id: str
    entity: Union[FileEntity, TypeEntity]
    path: str
    root: str
    title: str

    @property
    def label(self) -> str:
        if isinstance(self.entity, FileEntity):
            return f"file {self.entity.relative_name}"
        return f"{self.entity.kind} {self.entity.qualified_name}"


def plan_pages(store: Store) -> List[PagePlan]:
    """Pages in write order: files as the host lists them, then types by name."""
    pages = []
    for entity in store.all_files():
        pages.append(
            PagePlan(
                template_id="file",
                entity=entity,
                path=path_for_file(entity.relative_name),
                root=root_prefix(file_depth(entity.relative_name)),
                title=entity.relative_name,
            )
        )
    for entity in store.all_classes_and_modules():
        pages.append(
            PagePlan(
                template_id="type",
                entity=entity,
                path=path_for_type(entity.qualified_name),
                root=root_prefix(type_depth(entity.qualified_name)),
                title=entity.qualified_name,
            )
        )
    return pages


def check_collisions(pages: List[PagePlan]) -> None:
    claimed: Dict[str, str] = {INDEX_PAGE: "the index page"}
    for page in pages:
        if page.path in claimed:
            raise PathCollisionError(page.path, claimed[page.path], page.label)
        claimed[page.path] = page.label


def check_assets(data_dir: Path) -> None:
    for name in ASSET_DIRS:
        source = Path(data_dir) / name
        if not source.is_dir() or not os.access(source, os.R_OK | os.X_OK):
            raise ConfigurationError(f"Bundled asset directory missing or unreadable: {source}")


def copy_base_files(op_dir: Path, data_dir: Path) -> List[str]:
    """Copy stylesheets, scripts and images, replacing whatever is there."""
    copied = []
    for name in ASSET_DIRS:
        source = Path(data_dir) / name
        target = Path(op_dir) / name
        ensure_dir(target)
        for asset in sorted(source.iterdir()):
            if not asset.is_file():
                continue
            copy_file(asset, target / asset.name)
            copied.append(f"{name}/{asset.name}")
    return copied


class EmeraldGenerator:
    """Writes one HTML page per file, class and module, plus ``index.html``."""

    DESCRIPTION = "Modern generator for RDoc"
    TEMPLATE_IDS = ("file", "type")

    def __init__(self, options: GeneratorOptions) -> None:
        self.options = options
        self.op_dir = options.output_path
        self.templates = {template_id: resolve_template(template_id) for template_id in self.TEMPLATE_IDS}
        check_assets(options.data_dir)

    def _main_page(self, pages: List[PagePlan]) -> Optional[PagePlan]:
        main = self.options.main_page
        if not main:
            return None
        for page in pages:
            if page.title == main:
                return page
        raise ConfigurationError(f"Main page '{main}' is not a documented file, class or module")

    def _render(self, page: PagePlan, root: str, store: Store) -> str:
        body = self.templates[page.template_id](page.entity, root, page.title, store)
        return wrap_in_layout(body, root, page.title, store, site_title=self.options.title)

    def generate(self, store: Store) -> List[str]:
        """Write the whole site. Returns written paths relative to the output directory."""
        pages = plan_pages(store)
        check_collisions(pages)
        main_page = self._main_page(pages)

        ensure_dir(self.op_dir)
        written = copy_base_files(self.op_dir, self.options.data_dir)
        logger.debug("Copied %d asset(s) into %s", len(written), self.op_dir)

        for page in pages:
            path = self.op_dir / page.path
            ensure_dir(path.parent)
            write_file(path, self._render(page, page.root, store))
            logger.debug("Wrote %s (root %s)", page.path, page.root)
            written.append(page.path)

        if main_page is not None:
            # The index sits at the top, whatever the main page's own depth.
            write_file(self.op_dir / INDEX_PAGE, self._render(main_page, root_prefix(0), store))
        else:
            write_file(self.op_dir / INDEX_PAGE, placeholder_index(self.options.title))
        written.append(INDEX_PAGE)

        logger.info("Generated %d page(s) in %s", len(pages) + 1, self.op_dir)
        return written


add_generator("emerald", EmeraldGenerator)

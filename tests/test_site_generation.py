"""End-to-end tests for the HTML site generator."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "packages" / "core_engine" / "src"))

from emerald_core import EmeraldGenerator, GeneratorOptions, build_store, load_yaml_model, plan_pages
from emerald_core.errors import ConfigurationError, ModelError, OutputError, PathCollisionError
from emerald_core.model import FileEntity, MethodEntity, Store, TypeEntity
from emerald_core.registry import get_generator

SAMPLE_MODEL = str(ROOT / "model-examples" / "emerald.model.yaml")


def _foo_bar_store() -> Store:
    return Store(
        files=[FileEntity(relative_name="lib/foo.rb")],
        types=[
            TypeEntity(
                qualified_name="Foo::Bar",
                kind="module",
                methods=(MethodEntity(name="baz", owner="Foo::Bar", visibility="public"),),
            )
        ],
    )


def _generate(tmp_path: Path, store: Store, **options) -> list:
    generator = EmeraldGenerator(GeneratorOptions(op_dir=str(tmp_path / "doc"), **options))
    return generator.generate(store)


def _snapshot(directory: Path) -> dict:
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }


# ---------------------------------------------------------------------------
# Layout on disk
# ---------------------------------------------------------------------------

class TestEndToEnd:
    def test_foo_bar_scenario(self, tmp_path):
        _generate(tmp_path, _foo_bar_store())
        out = tmp_path / "doc"

        file_page = (out / "lib" / "foo_rb.html").read_text(encoding="utf-8")
        assert 'href="../stylesheets/rdoc.css"' in file_page
        assert "There is no documentation for this file." in file_page

        type_page = (out / "Foo" / "Bar.html").read_text(encoding="utf-8")
        assert 'href="../stylesheets/rdoc.css"' in type_page
        assert 'id="method-i-baz"' in type_page
        assert "Methods (1)" in type_page

        index = (out / "index.html").read_text(encoding="utf-8")
        assert "This is the RDoc documentation." in index

    def test_assets_copied(self, tmp_path):
        written = _generate(tmp_path, _foo_bar_store())
        out = tmp_path / "doc"
        assert (out / "stylesheets" / "rdoc.css").is_file()
        assert (out / "javascripts" / "emerald.js").is_file()
        assert any((out / "images").iterdir())
        assert "stylesheets/rdoc.css" in written

    def test_written_paths(self, tmp_path):
        written = _generate(tmp_path, _foo_bar_store())
        assert written[-3:] == ["lib/foo_rb.html", "Foo/Bar.html", "index.html"]

    def test_top_level_file_has_current_dir_root(self, tmp_path):
        _generate(tmp_path, Store(files=[FileEntity("README.rdoc")]))
        page = (tmp_path / "doc" / "README_rdoc.html").read_text(encoding="utf-8")
        assert 'href="./stylesheets/rdoc.css"' in page

    def test_root_resets_between_pages(self, tmp_path):
        store = Store(
            files=[FileEntity("lib/a/b/deep.rb"), FileEntity("top.rb")],
            types=[TypeEntity("A::B::C"), TypeEntity("Z")],
        )
        _generate(tmp_path, store)
        out = tmp_path / "doc"
        assert 'href="../../../stylesheets/rdoc.css"' in (out / "lib" / "a" / "b" / "deep_rb.html").read_text()
        assert 'href="./stylesheets/rdoc.css"' in (out / "top_rb.html").read_text()
        assert 'href="../../stylesheets/rdoc.css"' in (out / "A" / "B" / "C.html").read_text()
        assert 'href="./stylesheets/rdoc.css"' in (out / "Z.html").read_text()

    def test_sample_model(self, tmp_path):
        _generate(tmp_path, build_store(load_yaml_model(SAMPLE_MODEL)), main_page="README.rdoc")
        out = tmp_path / "doc"
        assert (out / "RDoc" / "Generator" / "Emerald.html").is_file()
        assert (out / "RDoc" / "Generator" / "Emerald" / "EmeraldError.html").is_file()
        assert (out / "lib" / "rdoc" / "generator" / "emerald_rb.html").is_file()


# ---------------------------------------------------------------------------
# Ordering and determinism
# ---------------------------------------------------------------------------

class TestOrdering:
    def test_types_written_sorted(self, tmp_path):
        store = Store(types=[TypeEntity("B"), TypeEntity("A"), TypeEntity("C")])
        written = _generate(tmp_path, store)
        assert [p for p in written if p in ("A.html", "B.html", "C.html")] == ["A.html", "B.html", "C.html"]

    def test_plan_pages_order(self):
        store = Store(
            files=[FileEntity("z.rb"), FileEntity("a.rb")],
            types=[TypeEntity("B"), TypeEntity("A")],
        )
        assert [page.path for page in plan_pages(store)] == ["z_rb.html", "a_rb.html", "A.html", "B.html"]

    def test_rerun_is_byte_identical(self, tmp_path):
        store = build_store(load_yaml_model(SAMPLE_MODEL))
        _generate(tmp_path, store, main_page="RDoc::Generator::Emerald")
        first = _snapshot(tmp_path / "doc")
        _generate(tmp_path, store, main_page="RDoc::Generator::Emerald")
        assert _snapshot(tmp_path / "doc") == first


# ---------------------------------------------------------------------------
# Index page
# ---------------------------------------------------------------------------

class TestIndexPage:
    def test_main_file_copied_with_top_root(self, tmp_path):
        _generate(tmp_path, _foo_bar_store(), main_page="lib/foo.rb")
        index = (tmp_path / "doc" / "index.html").read_text(encoding="utf-8")
        assert "lib/foo.rb" in index
        assert 'href="./stylesheets/rdoc.css"' in index
        assert 'href="../stylesheets/rdoc.css"' not in index
        assert 'href="../stylesheets/rdoc.css"' in (tmp_path / "doc" / "lib" / "foo_rb.html").read_text()

    def test_main_type(self, tmp_path):
        _generate(tmp_path, _foo_bar_store(), main_page="Foo::Bar")
        index = (tmp_path / "doc" / "index.html").read_text(encoding="utf-8")
        assert 'id="method-i-baz"' in index
        assert 'href="./Foo/Bar.html"' in index

    def test_placeholder_uses_site_title(self, tmp_path):
        _generate(tmp_path, _foo_bar_store(), title="Widgets & Co")
        index = (tmp_path / "doc" / "index.html").read_text(encoding="utf-8")
        assert "<title>Widgets &amp; Co</title>" in index
        assert "This is the RDoc documentation." in index

    def test_pages_rendered_through_resolved_templates(self, tmp_path):
        generator = EmeraldGenerator(GeneratorOptions(op_dir=str(tmp_path / "doc")))
        generator.templates = dict(generator.templates, file=lambda entity, root, title, store: "<p>custom</p>")
        generator.generate(_foo_bar_store())
        assert "<p>custom</p>" in (tmp_path / "doc" / "lib" / "foo_rb.html").read_text(encoding="utf-8")
        assert "<p>custom</p>" not in (tmp_path / "doc" / "Foo" / "Bar.html").read_text(encoding="utf-8")

    def test_unknown_main_page_fails_before_writing(self, tmp_path):
        with pytest.raises(ConfigurationError, match="README"):
            _generate(tmp_path, _foo_bar_store(), main_page="README")
        assert not (tmp_path / "doc").exists()


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestFailures:
    def test_path_collision(self, tmp_path):
        store = Store(files=[FileEntity("Foo/Bar")], types=[TypeEntity("Foo::Bar")])
        with pytest.raises(PathCollisionError) as info:
            _generate(tmp_path, store)
        assert info.value.path == "Foo/Bar.html"
        assert not (tmp_path / "doc").exists()

    def test_type_named_index_collides(self, tmp_path):
        with pytest.raises(PathCollisionError, match="index.html"):
            _generate(tmp_path, Store(types=[TypeEntity("index")]))

    def test_write_failure_keeps_earlier_files(self, tmp_path):
        out = tmp_path / "doc"
        out.mkdir()
        (out / "lib").write_text("not a directory", encoding="utf-8")
        store = Store(files=[FileEntity("a.rb"), FileEntity("lib/foo.rb")])
        with pytest.raises(OutputError) as info:
            _generate(tmp_path, store)
        assert "lib" in info.value.path
        assert (out / "a_rb.html").is_file()
        assert not (out / "index.html").exists()

    def test_missing_assets_is_startup_error(self, tmp_path):
        with pytest.raises(ConfigurationError, match="asset"):
            EmeraldGenerator(GeneratorOptions(op_dir=str(tmp_path / "doc"), data_dir=tmp_path / "nowhere"))

    def test_empty_output_dir_rejected(self):
        with pytest.raises(ConfigurationError):
            GeneratorOptions(op_dir="  ")

    def test_rooted_file_name_never_reaches_the_writer(self, tmp_path):
        outside = tmp_path / "outside" / "x.rb"
        with pytest.raises(ModelError):
            _generate(tmp_path, Store(files=[FileEntity(str(outside))]))
        assert not (tmp_path / "outside").exists()
        assert not (tmp_path / "doc").exists()

    def test_every_page_lands_inside_output_dir(self, tmp_path):
        written = _generate(tmp_path, build_store(load_yaml_model(SAMPLE_MODEL)))
        out = (tmp_path / "doc").resolve()
        for relative in written:
            target = (out / relative).resolve()
            assert out in target.parents
            assert target.is_file()


# ---------------------------------------------------------------------------
# Static assets
# ---------------------------------------------------------------------------

class TestAssets:
    def test_deleted_stylesheet_restored(self, tmp_path):
        _generate(tmp_path, _foo_bar_store())
        stylesheet = tmp_path / "doc" / "stylesheets" / "rdoc.css"
        original = stylesheet.read_bytes()
        stylesheet.unlink()
        _generate(tmp_path, _foo_bar_store())
        assert stylesheet.read_bytes() == original

    def test_modified_asset_overwritten(self, tmp_path):
        _generate(tmp_path, _foo_bar_store())
        script = tmp_path / "doc" / "javascripts" / "emerald.js"
        original = script.read_bytes()
        script.write_text("// local edit", encoding="utf-8")
        _generate(tmp_path, _foo_bar_store())
        assert script.read_bytes() == original


def test_registered_as_emerald():
    assert get_generator("emerald") is EmeraldGenerator
    assert get_generator("Emerald") is EmeraldGenerator

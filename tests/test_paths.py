import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "packages" / "core_engine" / "src"))

from emerald_core.model import MethodEntity
from emerald_core.paths import (
    file_depth,
    method_anchor,
    path_for_file,
    path_for_type,
    root_prefix,
    type_depth,
)


class PathForFileTests(unittest.TestCase):
    def test_dots_become_underscores(self) -> None:
        self.assertEqual("lib/foo_rb.html", path_for_file("lib/foo.rb"))

    def test_every_dot_is_replaced(self) -> None:
        self.assertEqual("lib/foo_bar_rb.html", path_for_file("lib/foo.bar.rb"))
        self.assertEqual("_hidden_rb.html", path_for_file(".hidden.rb"))

    def test_top_level_file(self) -> None:
        self.assertEqual("README_rdoc.html", path_for_file("README.rdoc"))

    def test_name_without_dots(self) -> None:
        self.assertEqual("bin/emerald.html", path_for_file("bin/emerald"))

    def test_stable(self) -> None:
        self.assertEqual(path_for_file("a/b.c"), path_for_file("a/b.c"))


class PathForTypeTests(unittest.TestCase):
    def test_namespaced(self) -> None:
        self.assertEqual("Foo/Bar.html", path_for_type("Foo::Bar"))

    def test_top_level(self) -> None:
        self.assertEqual("Foo.html", path_for_type("Foo"))

    def test_deeply_nested(self) -> None:
        self.assertEqual("RDoc/Generator/Emerald.html", path_for_type("RDoc::Generator::Emerald"))

    def test_dots_are_kept(self) -> None:
        self.assertEqual("Foo/Bar.baz.html", path_for_type("Foo::Bar.baz"))


class RootPrefixTests(unittest.TestCase):
    def test_depth_zero_is_current_dir(self) -> None:
        self.assertEqual("./", root_prefix(0))

    def test_parent_segments(self) -> None:
        self.assertEqual("../", root_prefix(1))
        self.assertEqual("../../", root_prefix(2))
        self.assertEqual(5, root_prefix(5).count("../"))

    def test_negative_depth(self) -> None:
        with self.assertRaises(ValueError):
            root_prefix(-1)

    def test_file_depth(self) -> None:
        self.assertEqual(0, file_depth("README.rdoc"))
        self.assertEqual(1, file_depth("lib/foo.rb"))
        self.assertEqual(3, file_depth("lib/rdoc/generator/emerald.rb"))

    def test_type_depth(self) -> None:
        self.assertEqual(0, type_depth("Foo"))
        self.assertEqual(1, type_depth("Foo::Bar"))
        self.assertEqual(2, type_depth("RDoc::Generator::Emerald"))


class MethodAnchorTests(unittest.TestCase):
    def test_instance_method(self) -> None:
        self.assertEqual("method-i-baz", method_anchor(MethodEntity(name="baz", owner="Foo::Bar")))

    def test_constructor_is_instance_side(self) -> None:
        method = MethodEntity(name="new", owner="Foo", kind="constructor")
        self.assertEqual("method-i-new", method_anchor(method))

    def test_class_method(self) -> None:
        method = MethodEntity(name="setup_options", owner="Foo", kind="class")
        self.assertEqual("method-c-setup_options", method_anchor(method))

    def test_operator_names_are_escaped(self) -> None:
        self.assertEqual("method-i-3D-3D", method_anchor(MethodEntity(name="==", owner="Foo")))
        self.assertEqual("method-i-5B-5D", method_anchor(MethodEntity(name="[]", owner="Foo")))

    def test_predicate_and_bang(self) -> None:
        self.assertEqual("method-i-empty-3F", method_anchor(MethodEntity(name="empty?", owner="Foo")))
        self.assertEqual("method-i-save-21", method_anchor(MethodEntity(name="save!", owner="Foo")))

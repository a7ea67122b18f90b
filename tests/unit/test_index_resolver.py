"""Tests for the YAML-index resolver."""

import pytest

from deptree.deps.index_resolver import IndexResolver, parse_index
from deptree.deps.resolver import (
    IndexLoadError,
    ResolutionError,
    Resolver,
    UnknownDistributionError,
)
from deptree.models.distribution import Distributions

INDEX = {
    "Moose": ["Try-Tiny", "Class-MOP", "Package-Stash"],
    "Class-MOP": ["Try-Tiny"],
    "Package-Stash": [],
    "Try-Tiny": [],
    "zlib": [],
    "attr": [],
}


class TestResolverContract:
    """The abstract resolver cannot be used directly."""

    def test_resolver_is_abstract(self):
        with pytest.raises(TypeError):
            Resolver()

    def test_custom_resolver(self):
        class EmptyResolver(Resolver):
            def resolve(self, *names):
                return Distributions()

        assert EmptyResolver().resolve("anything") == []

    def test_unknown_distribution_is_resolution_error(self):
        err = UnknownDistributionError("foo", required_by="bar")
        assert isinstance(err, ResolutionError)
        assert err.name == "foo"
        assert "required by 'bar'" in str(err)


class TestIndexResolver:
    """Tests for IndexResolver.resolve."""

    def test_resolve_single_root(self):
        tree = IndexResolver(INDEX).resolve("Moose")
        assert tree.names() == ["Moose"]
        moose = tree[0]
        assert moose.dependencies.names() == ["Class-MOP", "Package-Stash", "Try-Tiny"]
        assert moose.dependencies.get("Class-MOP").dependencies.names() == ["Try-Tiny"]

    def test_resolve_roots_sorted(self):
        tree = IndexResolver(INDEX).resolve("zlib", "attr")
        assert tree.names() == ["attr", "zlib"]
        assert tree.to_json() == '{"attr": {},"zlib": {}}'

    def test_resolve_no_names(self):
        assert IndexResolver(INDEX).resolve() == []

    def test_duplicate_roots_collapse(self):
        tree = IndexResolver(INDEX).resolve("attr", "attr")
        assert tree.names() == ["attr"]

    def test_repeated_dependency_names_collapse(self):
        tree = IndexResolver({"a": ["b", "b"], "b": []}).resolve("a")
        assert tree[0].dependencies.names() == ["b"]

    def test_nodes_not_shared_between_branches(self):
        tree = IndexResolver(INDEX).resolve("Moose")
        moose = tree[0]
        direct = moose.dependencies.get("Try-Tiny")
        nested = moose.dependencies.get("Class-MOP").dependencies.get("Try-Tiny")
        assert direct is not nested

    def test_each_resolve_builds_a_new_tree(self):
        resolver = IndexResolver(INDEX)
        assert resolver.resolve("attr")[0] is not resolver.resolve("attr")[0]

    def test_unknown_root(self):
        with pytest.raises(UnknownDistributionError) as exc_info:
            IndexResolver(INDEX).resolve("Nope")
        assert exc_info.value.name == "Nope"
        assert exc_info.value.required_by is None

    def test_unknown_dependency_strict(self):
        resolver = IndexResolver({"a": ["missing"]})
        with pytest.raises(UnknownDistributionError) as exc_info:
            resolver.resolve("a")
        assert exc_info.value.name == "missing"
        assert exc_info.value.required_by == "a"

    def test_unknown_dependency_lenient(self):
        tree = IndexResolver({"a": ["missing"]}, strict=False).resolve("a")
        assert tree.to_json() == '{"a": {"missing": {}}}'

    def test_depth_limit(self):
        resolver = IndexResolver({"a": ["b"], "b": ["c"], "c": []}, max_depth=2)
        with pytest.raises(ResolutionError, match="max depth 2"):
            resolver.resolve("a")

    def test_depth_limit_exact(self):
        tree = IndexResolver({"a": ["b"], "b": []}, max_depth=2).resolve("a")
        assert tree.to_json() == '{"a": {"b": {}}}'

    def test_cyclic_index_stops_at_depth_limit(self):
        resolver = IndexResolver({"a": ["b"], "b": ["a"]}, max_depth=10)
        with pytest.raises(ResolutionError):
            resolver.resolve("a")

    def test_invalid_max_depth(self):
        with pytest.raises(ValueError):
            IndexResolver(INDEX, max_depth=0)


class TestIndexFiles:
    """Tests for loading YAML index files."""

    def test_from_file_with_wrapper(self, tmp_path):
        path = tmp_path / "deptree.yml"
        path.write_text(
            "distributions:\n"
            "  Moose:\n"
            "    - Try-Tiny\n"
            "  Try-Tiny: []\n"
        )
        tree = IndexResolver.from_file(path).resolve("Moose")
        assert tree.to_json() == '{"Moose": {"Try-Tiny": {}}}'

    def test_from_file_bare_mapping(self, tmp_path):
        path = tmp_path / "deptree.yml"
        path.write_text("a: [b]\nb:\n")
        resolver = IndexResolver.from_file(path)
        assert resolver.index == {"a": ["b"], "b": []}

    def test_from_file_passes_options(self, tmp_path):
        path = tmp_path / "deptree.yml"
        path.write_text("a: [missing]\n")
        resolver = IndexResolver.from_file(path, strict=False, max_depth=3)
        assert resolver.strict is False
        assert resolver.max_depth == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(IndexLoadError, match="file not found"):
            IndexResolver.from_file(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "deptree.yml"
        path.write_text("not: valid: yaml: [")
        with pytest.raises(IndexLoadError, match="invalid YAML"):
            IndexResolver.from_file(path)

    def test_load_error_is_resolution_error(self, tmp_path):
        with pytest.raises(ResolutionError):
            IndexResolver.from_file(tmp_path / "nope.yml")


class TestParseIndex:
    """Tests for index validation."""

    def test_empty(self):
        assert parse_index(None) == {}
        assert parse_index({"distributions": None}) == {}

    def test_single_string_dependency(self):
        assert parse_index({"a": "b"}) == {"a": ["b"]}

    def test_not_a_mapping(self):
        with pytest.raises(IndexLoadError):
            parse_index(["a", "b"])

    def test_bad_dependency_list(self):
        with pytest.raises(IndexLoadError, match="dependencies of 'a'"):
            parse_index({"a": {"b": 1}})

    def test_non_string_name(self):
        with pytest.raises(IndexLoadError, match="invalid distribution name"):
            parse_index({1: []})

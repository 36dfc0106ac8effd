"""Tests for style merging helpers."""

from types import MappingProxyType

from styled_variants.styled_system import copy_style, merge_styles


class TestCopyStyle:
    """Tests for copy_style."""

    def test_nested_mappings_copied(self):
        source = {"color": "red", ":hover": {"color": "blue"}}
        copied = copy_style(source)
        copied[":hover"]["color"] = "green"
        assert source[":hover"]["color"] == "blue"

    def test_read_only_mappings_become_dicts(self):
        source = MappingProxyType({":hover": MappingProxyType({"color": "blue"})})
        copied = copy_style(source)
        assert type(copied[":hover"]) is dict


class TestMergeStyles:
    """Tests for merge_styles."""

    def test_scalars_overwrite(self):
        assert merge_styles({"color": "red", "margin": 0}, {"color": "blue"}) == {
            "color": "blue",
            "margin": 0,
        }

    def test_nested_merged_key_by_key(self):
        target = {":hover": {"color": "red"}}
        merge_styles(target, {":hover": {"background": "blue"}})
        assert target == {":hover": {"color": "red", "background": "blue"}}

    def test_mapping_replaces_scalar(self):
        target = {"border": "none"}
        merge_styles(target, {"border": {"width": 1}})
        assert target == {"border": {"width": 1}}

    def test_scalar_replaces_mapping(self):
        target = {":hover": {"color": "red"}}
        merge_styles(target, {":hover": "unset"})
        assert target == {":hover": "unset"}

    def test_source_not_shared(self):
        """Should not alias nested dicts from the source."""
        source = {":hover": {"color": "red"}}
        target = merge_styles({}, source)
        target[":hover"]["color"] = "blue"
        assert source == {":hover": {"color": "red"}}

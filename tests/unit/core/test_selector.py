"""Unit tests for field selector serialization."""

import pytest

from malapi.core import FieldSpecError, fields_param, serialize_fields
from malapi.core.selector import as_field_spec


class TestSerializeFields:
    """Test serialize_fields output."""

    def test_empty_spec(self):
        assert serialize_fields({}) == ""

    def test_falsy_entries_dropped(self):
        assert serialize_fields({"a": True, "b": False, "c": None}) == "a"

    def test_nested_selection(self):
        assert serialize_fields({"a": True, "b": {"c": True, "d": False}}) == "a,b{c}"

    def test_empty_nested_selection_collapses_to_key(self):
        """A nested spec with nothing selected requests the bare field."""
        assert serialize_fields({"a": {"b": False}}) == "a"

    def test_empty_mapping_selects_key(self):
        assert serialize_fields({"a": {}}) == "a"

    def test_multi_level_nesting(self):
        assert serialize_fields({"a": {"b": {"c": True}}}) == "a{b{c}}"

    def test_other_falsy_values_dropped(self):
        assert serialize_fields({"a": 0, "b": "", "c": 1, "d": "yes"}) == "c,d"

    def test_insertion_order_kept(self):
        spec = {"z": True, "a": True, "m": {"y": True, "b": True}}
        assert serialize_fields(spec) == "z,a,m{y,b}"

    def test_deterministic(self):
        spec = {"alternative_titles": True, "my_list_status": {"status": True, "score": True}}
        first = serialize_fields(spec)
        assert first == serialize_fields(spec)
        assert first == "alternative_titles,my_list_status{status,score}"

    def test_input_not_mutated(self):
        spec = {"a": {"b": False}, "c": None}
        serialize_fields(spec)
        assert spec == {"a": {"b": False}, "c": None}

    def test_cycle_raises(self):
        spec: dict = {"a": True}
        spec["self"] = spec
        with pytest.raises(FieldSpecError):
            serialize_fields(spec)

    def test_shared_subtree_is_not_a_cycle(self):
        shared = {"x": True}
        assert serialize_fields({"a": shared, "b": shared}) == "a{x},b{x}"


class TestFieldsParam:
    """Test the query parameter helper."""

    def test_none(self):
        assert fields_param(None) is None

    def test_empty_selection_omitted(self):
        assert fields_param({"a": False}) is None

    def test_name_list(self):
        assert fields_param(["mean", "rank"]) == "mean,rank"

    def test_single_name(self):
        assert as_field_spec("mean") == {"mean": True}

    def test_mapping(self):
        assert fields_param({"my_list_status": {"score": True}}) == "my_list_status{score}"


class TestTypedFieldSelections:
    """TypedDict selections are plain dicts at runtime."""

    def test_detailed_anime_fields(self):
        from malapi.fields import DetailedAnimeFields

        fields: DetailedAnimeFields = {
            "mean": True,
            "my_list_status": {"status": True, "num_episodes_watched": True},
            "statistics": False,
        }
        assert serialize_fields(fields) == "mean,my_list_status{status,num_episodes_watched}"

    def test_user_manga_list_fields(self):
        from malapi.fields import UserMangaListFields

        fields: UserMangaListFields = {"list_status": True, "num_chapters": True}
        assert fields_param(fields) == "list_status,num_chapters"

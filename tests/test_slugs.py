"""
Unit Tests for slug and id generation.
"""

import re

import pytest

from seen_jeem.slugs import (
    legacy_pack_id,
    new_question_id,
    random_suffix,
    slugify,
    stable_suffix,
    synth_pack_id,
    synth_question_id,
)


class TestSlugify:
    """Tests for slugify()."""

    def test_slugify_when_latin_name_then_lowercases_and_dashes(self):
        assert slugify("Hello World!") == "hello-world"

    def test_slugify_when_edge_punctuation_then_strips_dashes(self):
        assert slugify("  --Sports & Fun--  ") == "sports-fun"

    def test_slugify_when_arabic_name_then_keeps_letters(self):
        assert slugify("علوم") == "علوم"
        assert slugify("تاريخ الإسلام") == "تاريخ-الإسلام"

    def test_slugify_when_only_symbols_then_returns_empty(self):
        assert slugify("!!!") == ""
        assert slugify(None) == ""

    def test_slugify_when_number_then_stringifies(self):
        assert slugify(2024) == "2024"

    @pytest.mark.parametrize("name", ["Hello World!", "علوم عامة", "  a--b  ", "Ünïcode Stuff", "x_y.z"])
    def test_slugify_when_applied_twice_then_unchanged(self, name):
        once = slugify(name)
        assert slugify(once) == once


class TestIdSynthesis:
    """Tests for pack and question id helpers."""

    def test_legacy_pack_id_when_first_pack_then_zero_padded(self):
        assert legacy_pack_id("علوم", 0) == "علوم-01"
        assert legacy_pack_id("Science", 11) == "science-12"

    def test_legacy_pack_id_when_empty_slug_then_uses_placeholder(self):
        assert legacy_pack_id("!!!", 2) == "cat-03"

    def test_random_suffix_when_called_then_base36_of_length(self):
        assert re.fullmatch(r"[0-9a-z]{4}", random_suffix())

    def test_synth_pack_id_when_stable_then_repeatable(self):
        first = synth_pack_id("My Pack", [0], stable=True)
        assert first == synth_pack_id("My Pack", [0], stable=True)
        assert first.startswith("my-pack-")
        assert first != synth_pack_id("My Pack", [1], stable=True)

    def test_synth_pack_id_when_blank_name_then_uses_pack_base(self):
        assert synth_pack_id("", stable=False).startswith("pack-")

    def test_stable_suffix_when_parts_differ_then_differs(self):
        assert stable_suffix(["a", 1]) != stable_suffix(["a", 2])

    def test_new_question_id_when_called_then_has_timestamp_shape(self):
        assert re.fullmatch(r"q_\d+_\d+", new_question_id())

    def test_synth_question_id_when_stable_then_derived_from_content(self):
        parts = ["pack", "cat", 100, 0, "q", "a"]
        assert synth_question_id(parts, stable=True) == synth_question_id(parts, stable=True)
        assert synth_question_id(parts, stable=True).startswith("q_")

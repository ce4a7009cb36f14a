"""
Unit Tests for merge/replace reconciliation.
"""

import pytest

from seen_jeem.reconcile import ImportMode, reconcile, union_by_id

EXISTING_PACKS = [{"id": "p1", "name": "old"}, {"id": "p2", "name": "two"}]
EXISTING_QUESTIONS = [{"id": "q1", "q": "same text"}]


class TestUnionById:
    """Tests for union_by_id()."""

    def test_union_when_ids_collide_then_existing_kept(self):
        merged = union_by_id(EXISTING_PACKS, [{"id": "p1", "name": "new"}, {"id": "p3", "name": "three"}])
        assert merged == EXISTING_PACKS + [{"id": "p3", "name": "three"}]

    def test_union_when_incoming_repeats_id_then_first_kept(self):
        merged = union_by_id([], [{"id": "a", "v": 1}, {"id": "a", "v": 2}])
        assert merged == [{"id": "a", "v": 1}]

    def test_union_when_same_content_different_ids_then_both_kept(self):
        merged = union_by_id(EXISTING_QUESTIONS, [{"id": "q2", "q": "same text"}])
        assert [q["id"] for q in merged] == ["q1", "q2"]


class TestReconcile:
    """Tests for reconcile()."""

    def test_reconcile_when_merge_then_appends_unseen(self):
        packs, questions = reconcile(
            EXISTING_PACKS, EXISTING_QUESTIONS, [{"id": "p3"}], [{"id": "q1"}, {"id": "q9"}], "merge"
        )
        assert [p["id"] for p in packs] == ["p1", "p2", "p3"]
        assert [q["id"] for q in questions] == ["q1", "q9"]

    def test_reconcile_when_replace_then_incoming_only(self):
        packs, questions = reconcile(EXISTING_PACKS, EXISTING_QUESTIONS, [{"id": "p3"}], [], ImportMode.REPLACE)
        assert packs == [{"id": "p3"}]
        assert questions == []

    def test_reconcile_when_merged_twice_then_idempotent(self):
        incoming = ([{"id": "p3"}], [{"id": "q5"}])
        once = reconcile(EXISTING_PACKS, EXISTING_QUESTIONS, *incoming)
        twice = reconcile(once[0], once[1], *incoming)
        assert once == twice

    def test_reconcile_when_order_of_modes_swapped_then_results_differ(self):
        x = ([{"id": "x"}], [{"id": "qx"}])
        y = ([{"id": "y"}], [{"id": "qy"}])

        after_replace = reconcile(EXISTING_PACKS, EXISTING_QUESTIONS, *y, mode="replace")
        replace_then_merge = reconcile(*after_replace, *x, mode="merge")

        after_merge = reconcile(EXISTING_PACKS, EXISTING_QUESTIONS, *x, mode="merge")
        merge_then_replace = reconcile(*after_merge, *y, mode="replace")

        assert replace_then_merge != merge_then_replace

    def test_reconcile_when_inputs_given_then_not_mutated(self):
        existing = [{"id": "p1"}]
        reconcile(existing, [], [{"id": "p2"}], [])
        assert existing == [{"id": "p1"}]


class TestImportMode:
    """Tests for ImportMode.parse()."""

    def test_parse_when_mixed_case_then_normalized(self):
        assert ImportMode.parse("REPLACE") is ImportMode.REPLACE
        assert ImportMode.parse(None) is ImportMode.MERGE

    def test_parse_when_unknown_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown import mode"):
            ImportMode.parse("append")

"""
Unit tests for week-level mutations.

Tests for:
- add/remove/duplicate weeks and duration resynchronization
- set_week_duration growth and truncation
- reorder_weeks permutation checks and renumbering
- rename and collapse state
"""

import pytest

from domain.ids import SequentialIdGenerator
from domain.models import Weekday
from domain.mutations import (
    ErrorCategory,
    MutationErrorCode,
    add_item_at,
    add_week,
    duplicate_week,
    link_at,
    new_exercise,
    new_program,
    remove_week,
    rename_week,
    reorder_weeks,
    set_all_weeks_collapsed,
    set_week_duration,
    toggle_week_collapsed,
)


@pytest.mark.unit
class TestNewProgram:
    def test_fresh_program_has_one_empty_week(self, ids):
        doc = new_program(ids)
        assert doc.duration == 1
        assert len(doc.weeks) == 1
        assert doc.weeks[0].id == "week-1"
        assert doc.weeks[0].name == "Week 1"
        assert all(day.items == [] for day in doc.weeks[0].days.values())

    def test_duration_must_be_positive(self, ids):
        with pytest.raises(ValueError):
            new_program(ids, duration=0)


@pytest.mark.unit
class TestAddRemoveWeek:
    def test_add_week_appends_and_resyncs(self, ids, empty_program):
        result = add_week(empty_program, ids)

        assert result.success is True
        doc = result.value
        assert doc.duration == 2
        assert [w.name for w in doc.weeks] == ["Week 1", "Week 2"]
        assert [w.position for w in doc.weeks] == [1, 2]
        assert empty_program.duration == 1

    def test_remove_week_out_of_range(self, empty_program):
        result = remove_week(empty_program, 5)

        assert result.success is False
        assert result.error.code == MutationErrorCode.NOT_FOUND
        assert result.error.category == ErrorCategory.STRUCTURAL_PRECONDITION

    def test_remove_last_week_refused(self, empty_program):
        result = remove_week(empty_program, 0)

        assert result.success is False
        assert result.error.code == MutationErrorCode.LAST_WEEK

    def test_remove_week_renames_default_names(self, ids):
        doc = new_program(ids, duration=3)
        doc = rename_week(doc, 2, "Deload").value

        doc = remove_week(doc, 0).value

        assert doc.duration == 2
        assert [w.name for w in doc.weeks] == ["Week 1", "Deload"]
        assert [w.position for w in doc.weeks] == [1, 2]
        assert [w.id for w in doc.weeks] == ["week-2", "week-3"]


@pytest.mark.unit
class TestDuplicateWeek:
    def test_duplicate_copies_items_with_fresh_ids(self, ids, monday_program):
        result = duplicate_week(monday_program, 0, ids)

        assert result.success is True
        doc = result.value
        assert doc.duration == 2
        original = doc.weeks[0].day(Weekday.MON).items
        copied = doc.weeks[1].day(Weekday.MON).items
        assert [i.title for i in copied] == ["Tee Work", "Band Pulls"]
        assert {i.id for i in copied}.isdisjoint({i.id for i in original})
        assert doc.weeks[1].name == "Week 2"

    def test_duplicate_remaps_superset_groups(self, ids, monday_program):
        doc = link_at(monday_program, 0, Weekday.MON, "item-1", "item-2", ids).value

        doc = duplicate_week(doc, 0, ids).value

        source = doc.weeks[0].day(Weekday.MON).items
        copy = doc.weeks[1].day(Weekday.MON).items
        assert copy[0].superset_id == copy[1].superset_id
        assert copy[0].superset_id != source[0].superset_id
        assert [i.superset_order for i in copy] == [1, 2]

    def test_duplicate_missing_week(self, ids, empty_program):
        result = duplicate_week(empty_program, 3, ids)
        assert result.error.code == MutationErrorCode.NOT_FOUND

    def test_colliding_generator_is_refused(self, monday_program):
        result = duplicate_week(monday_program, 0, SequentialIdGenerator())

        assert result.success is False
        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT
        assert result.value_or(monday_program) is monday_program

    def test_reserved_generator_skips_loaded_ids(self, monday_program):
        fresh = SequentialIdGenerator()
        fresh.reserve([*monday_program.week_ids, *monday_program.item_ids])

        doc = duplicate_week(monday_program, 0, fresh).value

        assert doc.weeks[1].id == "week-2"
        assert doc.weeks[1].day(Weekday.MON).item_ids == ["item-3", "item-4"]


@pytest.mark.unit
class TestSetWeekDuration:
    def test_grow(self, ids, empty_program):
        doc = set_week_duration(empty_program, 4, ids).value
        assert doc.duration == 4
        assert len(doc.weeks) == 4
        assert [w.name for w in doc.weeks] == ["Week 1", "Week 2", "Week 3", "Week 4"]

    def test_grow_with_colliding_generator_is_refused(self, empty_program):
        result = set_week_duration(empty_program, 2, SequentialIdGenerator())

        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT
        assert result.value_or(empty_program) is empty_program

    def test_shrink_discards_tail_content(self, ids, titled_program):
        doc = set_week_duration(titled_program, 3, ids).value
        for week_index in (1, 2):
            item = new_exercise(ids, f"Week {week_index + 1} work")
            doc = add_item_at(doc, week_index, Weekday.WED, item).value

        doc = set_week_duration(doc, 1, ids).value

        assert doc.duration == 1
        assert len(doc.weeks) == 1
        assert doc.total_items == 0

    def test_same_length_is_unchanged(self, ids, monday_program):
        doc = set_week_duration(monday_program, 1, ids).value
        assert doc == monday_program

    def test_rejects_zero(self, ids, empty_program):
        result = set_week_duration(empty_program, 0, ids)
        assert result.success is False
        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT
        assert result.value_or(empty_program) is empty_program


@pytest.mark.unit
class TestReorderWeeks:
    def test_reorder_renumbers(self, ids):
        doc = new_program(ids, duration=3)
        doc = rename_week(doc, 0, "Intro").value

        doc = reorder_weeks(doc, ["week-3", "week-1", "week-2"]).value

        assert [w.id for w in doc.weeks] == ["week-3", "week-1", "week-2"]
        assert [w.position for w in doc.weeks] == [1, 2, 3]
        assert [w.name for w in doc.weeks] == ["Week 1", "Intro", "Week 3"]

    @pytest.mark.parametrize(
        "week_ids",
        [
            ["week-1", "week-2"],
            ["week-1", "week-2", "week-9"],
            ["week-1", "week-1", "week-2"],
            ["week-1", "week-2", "week-3", "week-3"],
        ],
    )
    def test_invalid_permutation(self, ids, week_ids):
        doc = new_program(ids, duration=3)

        result = reorder_weeks(doc, week_ids)

        assert result.success is False
        assert result.error.code == MutationErrorCode.INVALID_PERMUTATION
        assert result.error.category == ErrorCategory.INVALID_PERMUTATION


@pytest.mark.unit
class TestWeekDisplayState:
    def test_rename_blank_restores_default(self, empty_program):
        doc = rename_week(empty_program, 0, "Deload").value
        assert doc.weeks[0].name == "Deload"
        doc = rename_week(doc, 0, "   ").value
        assert doc.weeks[0].name == "Week 1"

    def test_rename_missing_week(self, empty_program):
        assert rename_week(empty_program, 1, "x").error.code == MutationErrorCode.NOT_FOUND

    def test_toggle_collapsed(self, empty_program):
        doc = toggle_week_collapsed(empty_program, 0).value
        assert doc.weeks[0].collapsed is True
        doc = toggle_week_collapsed(doc, 0).value
        assert doc.weeks[0].collapsed is False

    def test_set_all_collapsed(self, ids):
        doc = new_program(ids, duration=3)
        doc = set_all_weeks_collapsed(doc, True).value
        assert all(w.collapsed for w in doc.weeks)

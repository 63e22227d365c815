"""
Unit tests for item-level mutations and item constructors.
"""

import pytest

from domain.models import (
    Day,
    ExerciseItem,
    Routine,
    RoutineExercise,
    RoutineItem,
    VideoDescriptor,
    VideoItem,
    Weekday,
)
from domain.mutations import (
    MutationErrorCode,
    SupersetAdjacency,
    add_item,
    add_item_at,
    clear_day,
    delete_item,
    delete_item_at,
    edit_item,
    edit_item_at,
    link,
    new_exercise,
    new_routine_reference,
    new_video_reference,
    reorder_items,
    reorder_items_at,
    superset_groups,
)


@pytest.fixture
def day(ids) -> Day:
    """Monday with three exercises: item-1, item-2, item-3."""
    return Day(
        weekday=Weekday.MON,
        items=[
            new_exercise(ids, "Tee Work", sets=3, reps=10, tempo="2-0-2"),
            new_exercise(ids, "Band Pulls"),
            new_exercise(ids, "Med Ball Throws"),
        ],
    )


@pytest.mark.unit
class TestConstructors:
    def test_new_exercise(self, ids):
        item = new_exercise(ids, "Tee Work", sets=3, reps=10, tempo="2-0-2")
        assert item.id == "item-1"
        assert (item.sets, item.reps, item.tempo) == (3, 10, "2-0-2")

    def test_new_video_reference_snapshots_descriptor(self, ids):
        descriptor = VideoDescriptor(
            id="vid-1",
            title="Hip Lead Drill",
            description="Leading with the hips",
            duration="4:12",
            url="https://videos.example.com/vid-1.mp4",
            thumbnail="https://videos.example.com/vid-1.jpg",
        )

        item = new_video_reference(ids, descriptor)

        assert isinstance(item, VideoItem)
        assert item.title == "Hip Lead Drill"
        assert item.video_id == "vid-1"
        assert item.video_title == "Hip Lead Drill"
        assert item.video_url == "https://videos.example.com/vid-1.mp4"
        assert item.video_thumbnail == "https://videos.example.com/vid-1.jpg"
        assert item.duration == "4:12"

    def test_new_routine_reference_copies_only_identity(self, ids):
        routine = Routine(
            id="r1",
            name="Warmup A",
            description="General warmup",
            exercises=[RoutineExercise(title="Arm Circles"), RoutineExercise(title="Lunges")],
        )

        item = new_routine_reference(ids, routine)

        assert isinstance(item, RoutineItem)
        assert item.routine_id == "r1"
        assert item.title == "Warmup A"
        assert item.routine_name == "Warmup A"
        assert item.routine_description == "General warmup"
        assert not hasattr(item, "exercises")
        assert routine.exercise_count == 2


@pytest.mark.unit
class TestAddItem:
    def test_add_appends(self, ids, day):
        item = new_exercise(ids, "Fence Drill")
        result = add_item(day, item)
        assert result.success is True
        assert result.value.item_ids == ["item-1", "item-2", "item-3", "item-4"]
        assert len(day.items) == 3

    def test_add_duplicate_id_refused(self, day):
        result = add_item(day, ExerciseItem(id="item-1", title="Again"))
        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT

    def test_add_at_refuses_id_used_elsewhere_in_program(self, monday_program):
        duplicate = ExerciseItem(id="item-1", title="Again")
        result = add_item_at(monday_program, 0, Weekday.TUE, duplicate)
        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT

    def test_add_at_stale_week(self, ids, monday_program):
        result = add_item_at(monday_program, 4, Weekday.TUE, new_exercise(ids, "Fence Drill"))
        assert result.success is False
        assert result.error.code == MutationErrorCode.NOT_FOUND

    def test_add_at_keeps_other_days(self, ids, monday_program):
        doc = add_item_at(monday_program, 0, Weekday.TUE, new_exercise(ids, "Fence Drill")).value
        assert doc.weeks[0].day(Weekday.MON).item_ids == ["item-1", "item-2"]
        assert doc.weeks[0].day(Weekday.TUE).item_ids == ["item-3"]

    def test_add_clears_incoming_superset_fields(self, day):
        grouped = ExerciseItem(
            id="x",
            title="Solo",
            superset_id="g",
            superset_order=1,
            superset_description="Pair with nothing",
        )

        result = add_item(day, grouped)

        added = result.value.find("x")
        assert (added.superset_id, added.superset_order, added.superset_description) == (None, None, None)
        assert superset_groups(result.value) == []

    def test_add_at_clears_incoming_superset_fields(self, monday_program):
        grouped = ExerciseItem(id="x", title="Solo", superset_id="g", superset_order=1)

        doc = add_item_at(monday_program, 0, Weekday.TUE, grouped).value

        assert doc.superset_ids == []
        assert doc.weeks[0].day(Weekday.TUE).items[0].in_superset is False


@pytest.mark.unit
class TestEditItem:
    def test_edit_merges_patch(self, day):
        result = edit_item(day, "item-1", {"reps": 12, "notes": "Focus on contact"})

        edited = result.value.find("item-1")
        assert edited.reps == 12
        assert edited.sets == 3
        assert edited.notes == "Focus on contact"
        assert edited.id == "item-1"

    def test_edit_missing_item(self, day):
        result = edit_item(day, "nope", {"reps": 12})
        assert result.error.code == MutationErrorCode.NOT_FOUND

    @pytest.mark.parametrize("patch", [{"id": "other"}, {"kind": "video"}])
    def test_identity_and_kind_are_immutable(self, day, patch):
        result = edit_item(day, "item-1", patch)
        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT

    def test_unknown_field_refused(self, day):
        result = edit_item(day, "item-1", {"video_id": "vid-1"})
        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT

    def test_invalid_value_refused(self, day):
        result = edit_item(day, "item-1", {"sets": 0})
        assert result.error.code == MutationErrorCode.INVALID_ARGUMENT
        assert day.find("item-1").sets == 3

    def test_superset_membership_preserved(self, ids, day):
        day = link(day, "item-1", "item-2", ids).value

        result = edit_item(day, "item-1", {"title": "Tee Work (high)", "superset_id": None})

        edited = result.value.find("item-1")
        assert edited.title == "Tee Work (high)"
        assert edited.superset_id == "superset-1"
        assert edited.superset_order == 1

    def test_edit_at(self, monday_program):
        doc = edit_item_at(monday_program, 0, Weekday.MON, "item-2", {"reps": 20}).value
        assert doc.weeks[0].day(Weekday.MON).find("item-2").reps == 20


@pytest.mark.unit
class TestDeleteItem:
    def test_delete(self, day):
        result = delete_item(day, "item-2")
        assert result.value.item_ids == ["item-1", "item-3"]

    def test_delete_missing(self, day):
        assert delete_item(day, "nope").error.code == MutationErrorCode.NOT_FOUND

    def test_delete_superset_member_clears_partner(self, ids, day):
        day = link(day, "item-1", "item-2", ids).value

        day = delete_item(day, "item-1").value

        partner = day.find("item-2")
        assert partner.superset_id is None
        assert partner.superset_order is None

    def test_delete_at(self, monday_program):
        doc = delete_item_at(monday_program, 0, Weekday.MON, "item-1").value
        assert doc.weeks[0].day(Weekday.MON).item_ids == ["item-2"]

    def test_clear_day(self, monday_program):
        doc = clear_day(monday_program, 0, Weekday.MON).value
        assert doc.weeks[0].day(Weekday.MON).is_rest_day is True


@pytest.mark.unit
class TestReorderItems:
    def test_reorder(self, day):
        result = reorder_items(day, ["item-3", "item-1", "item-2"])
        assert result.value.item_ids == ["item-3", "item-1", "item-2"]

    @pytest.mark.parametrize(
        "item_ids",
        [[], ["item-1", "item-2"], ["item-1", "item-2", "item-9"], ["item-1", "item-1", "item-2"]],
    )
    def test_invalid_permutation(self, day, item_ids):
        result = reorder_items(day, item_ids)
        assert result.error.code == MutationErrorCode.INVALID_PERMUTATION

    def test_no_adjacency_keeps_group_split(self, ids, day):
        day = link(day, "item-1", "item-2", ids).value

        result = reorder_items(day, ["item-1", "item-3", "item-2"])

        assert result.value.item_ids == ["item-1", "item-3", "item-2"]

    def test_cluster_adjacency_pulls_members_together(self, ids, day):
        day = link(day, "item-1", "item-3", ids).value

        result = reorder_items(
            day, ["item-3", "item-2", "item-1"], adjacency=SupersetAdjacency.CLUSTER
        )

        assert result.value.item_ids == ["item-1", "item-3", "item-2"]

    def test_reorder_at(self, monday_program):
        doc = reorder_items_at(monday_program, 0, Weekday.MON, ["item-2", "item-1"]).value
        assert doc.weeks[0].day(Weekday.MON).item_ids == ["item-2", "item-1"]

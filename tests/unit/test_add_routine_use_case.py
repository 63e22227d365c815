"""
Unit tests for AddRoutineUseCase.

Tests for:
- Referencing an existing catalog routine
- Creating a routine inline and referencing it
- The catalog keeps the exercises; the document only gets one item
"""

import pytest

from application.exceptions import CollaboratorError
from application.use_cases import AddRoutineUseCase
from domain.models import RoutineExercise, RoutineItem, Weekday


@pytest.fixture
def use_case(routine_catalog, ids) -> AddRoutineUseCase:
    return AddRoutineUseCase(catalog=routine_catalog, ids=ids)


class TestAddExistingRoutine:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_adds_single_reference(self, use_case, monday_program, routine_catalog):
        result = await use_case.execute(monday_program, 0, Weekday.TUE, "routine-warmup-a")

        assert result.success is True
        items = result.document.weeks[0].day(Weekday.TUE).items
        assert len(items) == 1
        assert isinstance(items[0], RoutineItem)
        assert items[0].routine_id == "routine-warmup-a"
        assert items[0].title == "Warmup A"
        assert result.routine.exercise_count == 3
        assert routine_catalog.get_all()[0].exercise_count == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_routine(self, use_case, monday_program):
        result = await use_case.execute(monday_program, 0, Weekday.TUE, "routine-nope")

        assert result.success is False
        assert result.error == "Routine routine-nope not found"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_catalog_failure(self, use_case, monday_program, routine_catalog):
        routine_catalog.fail_with = CollaboratorError("Routine catalog unavailable")

        result = await use_case.execute(monday_program, 0, Weekday.TUE, "routine-warmup-a")

        assert result.success is False
        assert result.error == "Routine catalog unavailable"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_stale_week_index(self, use_case, monday_program):
        result = await use_case.execute(monday_program, 3, Weekday.TUE, "routine-warmup-a")

        assert result.success is False
        assert result.document is None


class TestCreateAndAddRoutine:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_creates_then_references(self, use_case, monday_program, routine_catalog):
        exercises = [RoutineExercise(title="Skips"), RoutineExercise(title="Carioca", reps=20)]

        result = await use_case.create_and_add(
            monday_program, 0, Weekday.FRI, "  Field Warmup ", "Outdoor warmup", exercises
        )

        assert result.success is True
        assert result.routine.id == "routine-1"
        assert result.routine.name == "Field Warmup"
        item = result.document.weeks[0].day(Weekday.FRI).items[0]
        assert item.routine_id == "routine-1"
        assert item.routine_description == "Outdoor warmup"
        assert len(routine_catalog.get_all()) == 2

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name, exercises",
        [("", [RoutineExercise(title="Skips")]), ("Field Warmup", [])],
    )
    async def test_invalid_input_does_not_touch_catalog(
        self, use_case, monday_program, routine_catalog, name, exercises
    ):
        result = await use_case.create_and_add(
            monday_program, 0, Weekday.FRI, name, "", exercises
        )

        assert result.success is False
        assert len(routine_catalog.get_all()) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_stale_week_checked_before_create(self, use_case, monday_program, routine_catalog):
        result = await use_case.create_and_add(
            monday_program, 2, Weekday.FRI, "Field Warmup", "", [RoutineExercise(title="Skips")]
        )

        assert result.success is False
        assert len(routine_catalog.get_all()) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_failure(self, use_case, monday_program, routine_catalog):
        routine_catalog.fail_with = CollaboratorError("Routine catalog unavailable", 503)

        result = await use_case.create_and_add(
            monday_program, 0, Weekday.FRI, "Field Warmup", "", [RoutineExercise(title="Skips")]
        )

        assert result.success is False
        assert result.error == "Routine catalog unavailable"

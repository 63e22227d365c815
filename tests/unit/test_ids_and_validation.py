"""
Unit tests for id generation and scalar-field validation.
"""

import pytest

from domain.ids import SequentialIdGenerator, UuidIdGenerator, default_id_generator
from domain.models import FocusArea
from domain.validation import (
    DURATION_REQUIRED,
    FOCUS_AREA_REQUIRED,
    TITLE_REQUIRED,
    validate_details,
)


@pytest.mark.unit
class TestIdGenerators:
    def test_sequential_counts_per_prefix(self):
        ids = SequentialIdGenerator()
        assert [ids.new_id("item"), ids.new_id("week"), ids.new_id("item")] == [
            "item-1",
            "week-1",
            "item-2",
        ]

    def test_sequential_start(self):
        assert SequentialIdGenerator(start=5).new_id("superset") == "superset-5"

    def test_sequential_skips_reserved_ids(self):
        ids = SequentialIdGenerator()
        ids.reserve(["item-1", "item-2", "item-4", "week-1"])
        assert [ids.new_id("item"), ids.new_id("item"), ids.new_id("week")] == [
            "item-3",
            "item-5",
            "week-2",
        ]

    def test_uuid_ids_are_prefixed_and_unique(self):
        ids = UuidIdGenerator()
        generated = {ids.new_id("item") for _ in range(50)}
        assert len(generated) == 50
        assert all(value.startswith("item-") for value in generated)

    def test_default_is_uuid(self):
        assert isinstance(default_id_generator(), UuidIdGenerator)


@pytest.mark.unit
class TestValidateDetails:
    def test_valid(self, titled_program):
        assert validate_details(titled_program) == []

    def test_fresh_program(self, empty_program):
        assert validate_details(empty_program) == [TITLE_REQUIRED, FOCUS_AREA_REQUIRED]

    def test_whitespace_title(self, titled_program):
        assert validate_details(titled_program.with_title("   ")) == [TITLE_REQUIRED]

    def test_custom_focus_area_accepted(self, titled_program):
        doc = titled_program.with_focus_area(FocusArea.custom("Footwork"))
        assert validate_details(doc) == []

    def test_zero_duration(self, titled_program):
        doc = titled_program.model_copy(update={"duration": 0})
        assert DURATION_REQUIRED in validate_details(doc)

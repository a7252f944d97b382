"""Tests for section splitting and classification."""

import pytest

from plan_ingestor.parsers.sections import (
    SectionKind,
    classify_nutrition_chunk,
    classify_workout_title,
    nutrition_sections,
    split_blank_line_chunks,
    split_markdown_sections,
    workout_sections,
)


class TestSplitMarkdownSections:
    def test_headings_become_titles(self):
        text = "## Warm-up\n- Jog\n## Monday\nExercises:\n- Squats"
        assert split_markdown_sections(text) == [
            ("Warm-up", "- Jog\n"),
            ("Monday", "Exercises:\n- Squats"),
        ]

    def test_preamble_is_untitled(self):
        sections = split_markdown_sections("Monday: Legs\n# Recovery\n- Sleep")
        assert sections[0] == (None, "Monday: Legs\n")
        assert sections[1][0] == "Recovery"

    def test_no_headings_is_one_untitled_section(self):
        assert split_markdown_sections("Monday: Legs") == [(None, "Monday: Legs")]

    def test_empty_text(self):
        assert split_markdown_sections("") == []


class TestSplitBlankLineChunks:
    def test_splits_and_drops_empty_chunks(self):
        text = "MEALS:\n1. Eggs\n\n\n  \nHYDRATION:\nWater\n\n"
        assert split_blank_line_chunks(text) == ["MEALS:\n1. Eggs", "HYDRATION:\nWater"]


class TestClassifyWorkoutTitle:
    @pytest.mark.parametrize("title, expected", [
        ("Weekly Schedule", (SectionKind.SCHEDULE, None)),
        ("Your Workout Schedule", (SectionKind.SCHEDULE, None)),
        ("Weekly Workout Plan", (SectionKind.SCHEDULE, None)),
        ("Warm-up", (SectionKind.WARMUP, None)),
        ("Warm Up (10 minutes)", (SectionKind.WARMUP, None)),
        ("Cool-down", (SectionKind.COOLDOWN, None)),
        ("Nutrition Tips", (SectionKind.NUTRITION, None)),
        ("Diet", (SectionKind.NUTRITION, None)),
        ("Recovery", (SectionKind.RECOVERY, None)),
        ("Rest and Sleep", (SectionKind.RECOVERY, None)),
        ("Monday: Upper Body", (SectionKind.DAY, "Monday")),
        ("**THURSDAY**", (SectionKind.DAY, "Thursday")),
        ("Introduction", (SectionKind.UNKNOWN, None)),
    ])
    def test_titles(self, title, expected):
        assert classify_workout_title(title) == expected

    def test_untitled_is_schedule(self):
        assert classify_workout_title(None) == (SectionKind.SCHEDULE, None)

    def test_rest_wins_over_day_name(self):
        # Priority order puts recovery before the day check
        assert classify_workout_title("Sunday - Rest") == (SectionKind.RECOVERY, None)


class TestClassifyNutritionChunk:
    @pytest.mark.parametrize("chunk, expected", [
        ("WEEKLY NUTRITION SCHEDULE:\nMonday:", SectionKind.SCHEDULE),
        ("MEALS:\n1. Eggs", SectionKind.MEALS),
        ("NUTRITION GUIDELINES:\n- Eat", SectionKind.GUIDELINES),
        ("HYDRATION:\nWater", SectionKind.HYDRATION),
        ("SUPPLEMENTS (if appropriate):\n- Creatine", SectionKind.SUPPLEMENTS),
        ("Tuesday:\n- Lunch: Wrap", SectionKind.SCHEDULE),
        ("**MEALS:**\n1. Eggs", SectionKind.MEALS),
        ("Some closing words", SectionKind.UNKNOWN),
        ("monday:\n- Breakfast: Eggs", SectionKind.UNKNOWN),
    ])
    def test_chunks(self, chunk, expected):
        assert classify_nutrition_chunk(chunk) == expected

    def test_headers_are_case_sensitive(self):
        assert classify_nutrition_chunk("Meals:\n1. Eggs") == SectionKind.UNKNOWN


class TestWorkoutSections:
    def test_unknown_sections_are_dropped(self):
        text = "# Introduction\nWelcome!\n## Monday\n- Squats 3x10"
        sections = workout_sections(text)
        assert [s.kind for s in sections] == [SectionKind.DAY]
        assert sections[0].day == "Monday"


class TestNutritionSections:
    def test_inline_header_text_is_body(self):
        sections = nutrition_sections("HYDRATION: Drink 3 liters daily.")
        assert len(sections) == 1
        assert sections[0].kind == SectionKind.HYDRATION
        assert sections[0].body.strip() == "Drink 3 liters daily."

    def test_day_line_chunk_keeps_day_line(self):
        sections = nutrition_sections("Monday:\n- Breakfast: Eggs")
        assert sections[0].kind == SectionKind.SCHEDULE
        assert sections[0].body.startswith("Monday:")

    def test_headerless_chunk_continues_previous(self):
        text = "NUTRITION GUIDELINES:\n- Eat protein\n\n- Limit sugar"
        sections = nutrition_sections(text)
        assert [s.kind for s in sections] == [SectionKind.GUIDELINES, SectionKind.GUIDELINES]
        assert sections[0].continued is False
        assert sections[1].continued is True

    def test_leading_headerless_chunk_is_dropped(self):
        sections = nutrition_sections("Here is your plan!\n\nHYDRATION:\nWater")
        assert [s.kind for s in sections] == [SectionKind.HYDRATION]

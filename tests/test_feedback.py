"""Tests for strengths, weaknesses and message generation."""

import pytest

from career_predictor.core.scoring.feedback import (
    DEFAULT_STRENGTH,
    DEFAULT_WEAKNESS,
    generate_motivational_message,
    generate_reality_check,
    generate_strengths,
    generate_weaknesses,
)
from career_predictor.core.scoring.types import AssessmentInput, Category


def _input(make_assessment, **overrides) -> AssessmentInput:
    return AssessmentInput.model_validate(make_assessment(**overrides))


# ============================================================================
# Strengths
# ============================================================================


class TestStrengths:
    def test_all_strengths_in_order(self, strong_assessment):
        strengths = generate_strengths(AssessmentInput.model_validate(strong_assessment))
        assert strengths == [
            "Exceptionally high motivation level",
            "Excellent learning consistency",
            "Dedicated study time allocation",
            "Healthy sleep patterns",
            "Regular physical activity",
            "Relevant background experience",
            "Well-thought-out learning plan",
        ]

    def test_moderate_drive_uses_second_tier(self, make_assessment):
        strengths = generate_strengths(_input(make_assessment, motivation=6, consistency=7))
        assert "Good motivation and drive" in strengths
        assert "Decent learning routine" in strengths
        assert "Exceptionally high motivation level" not in strengths
        assert "Excellent learning consistency" not in strengths

    def test_tiers_are_exclusive(self, make_assessment):
        strengths = generate_strengths(_input(make_assessment, motivation=10))
        assert "Exceptionally high motivation level" in strengths
        assert "Good motivation and drive" not in strengths

    def test_fallback_when_nothing_triggers(self, weak_assessment):
        assert generate_strengths(AssessmentInput.model_validate(weak_assessment)) == [DEFAULT_STRENGTH]

    def test_sleep_window_is_inclusive(self, make_assessment):
        assert "Healthy sleep patterns" in generate_strengths(_input(make_assessment, sleepHours=7))
        assert "Healthy sleep patterns" in generate_strengths(_input(make_assessment, sleepHours=9))
        assert "Healthy sleep patterns" not in generate_strengths(_input(make_assessment, sleepHours=9.5))


# ============================================================================
# Weaknesses
# ============================================================================


class TestWeaknesses:
    def test_weak_habits(self, weak_assessment):
        weaknesses = generate_weaknesses(AssessmentInput.model_validate(weak_assessment))
        assert weaknesses == [
            "Limited daily study time",
            "Insufficient sleep affecting performance",
            "High recreational time reducing focus",
            "Lack of physical activity affecting energy",
            "Low motivation levels",
            "Inconsistent learning habits",
            "Limited relevant experience",
            "Vague future learning plans",
        ]

    def test_excessive_sleep(self, make_assessment):
        weaknesses = generate_weaknesses(_input(make_assessment, sleepHours=10))
        assert "Excessive sleep reducing productive hours" in weaknesses
        assert "Insufficient sleep affecting performance" not in weaknesses

    def test_fallback_when_nothing_triggers(self, strong_assessment):
        assert generate_weaknesses(AssessmentInput.model_validate(strong_assessment)) == [DEFAULT_WEAKNESS]

    def test_text_length_boundary(self, make_assessment):
        at_boundary = generate_weaknesses(
            _input(make_assessment, previousExperience="x" * 30, futureLearningPlan="x" * 29)
        )
        assert "Limited relevant experience" not in at_boundary
        assert "Vague future learning plans" in at_boundary

    def test_text_length_counts_emoji_twice(self, make_assessment):
        weaknesses = generate_weaknesses(
            _input(make_assessment, previousExperience="🚀" * 15, futureLearningPlan="🚀" * 14)
        )
        assert "Limited relevant experience" not in weaknesses
        assert "Vague future learning plans" in weaknesses

    def test_exercise_boundary(self, make_assessment):
        assert "Lack of physical activity affecting energy" not in generate_weaknesses(
            _input(make_assessment, exerciseHours=0.5)
        )


# ============================================================================
# Messages
# ============================================================================


class TestMessages:
    @pytest.mark.parametrize(
        "category,opening",
        [
            (Category.HIGH, "Outstanding work, Alex!"),
            (Category.MEDIUM, "Great progress, Alex!"),
            (Category.LOW, "Alex, every expert was once a beginner!"),
        ],
    )
    def test_motivational_message_by_category(self, category, opening):
        assert generate_motivational_message(category, "Alex").startswith(opening)

    def test_motivational_message_accepts_plain_string(self):
        assert generate_motivational_message("high", "Alex") == generate_motivational_message(
            Category.HIGH, "Alex"
        )

    def test_reality_check_interpolates_goal(self, weak_assessment):
        message = generate_reality_check(AssessmentInput.model_validate(weak_assessment))
        assert message.startswith(
            "Based on your current habits and the 6months timeline for achieving Product Manager,"
        )

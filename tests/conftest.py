"""Pytest configuration and fixtures."""

import os

import pytest

STRONG_EXPERIENCE = (
    "Two years as a QA tester automating regression suites in Python, plus a "
    "bootcamp capstone building a REST API with a small team."
)
STRONG_PLAN = (
    "Finish a data structures course, ship two portfolio projects on GitHub, "
    "and practice interview problems every weekday for the next six months."
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["PREDICTOR_ENV"] = "test"


def _assessment(**overrides) -> dict:
    """Build a camelCase assessment payload with sensible defaults."""
    payload = {
        "name": "Alex Rivera",
        "age": "27",
        "currentRole": "QA tester",
        "studyHours": 2,
        "sleepHours": 8,
        "exerciseHours": 1,
        "recreationHours": 3,
        "workHours": 8,
        "currentSkills": "Python, SQL",
        "learningStyle": "hands-on",
        "motivation": 7,
        "consistency": 6,
        "dreamJob": "Software Engineer",
        "timeframe": "2years",
        "previousExperience": STRONG_EXPERIENCE,
        "futureLearningPlan": STRONG_PLAN,
        "challenges": "",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_assessment():
    return _assessment


@pytest.fixture
def strong_assessment() -> dict:
    """Excellent habits and a realistic timeline; clamps to 95."""
    return _assessment(
        studyHours=5,
        sleepHours=8,
        exerciseHours=1.5,
        recreationHours=2,
        workHours=6,
        motivation=9,
        consistency=9,
        timeframe="2years",
        dreamJob="Software Engineer",
    )


@pytest.fixture
def weak_assessment() -> dict:
    """Poor habits and a rushed timeline; clamps to 15."""
    return _assessment(
        name="Sam",
        studyHours=0.5,
        sleepHours=5,
        exerciseHours=0,
        recreationHours=7,
        motivation=3,
        consistency=3,
        timeframe="6months",
        dreamJob="Product Manager",
        previousExperience="None yet",
        futureLearningPlan="Watch videos",
    )


@pytest.fixture
def medium_assessment() -> dict:
    """Contributions cancel out exactly, leaving the base score of 50."""
    return _assessment(
        name="Jordan",
        studyHours=1,
        sleepHours=6,
        exerciseHours=0,
        recreationHours=5,
        motivation=3,
        consistency=3,
        timeframe="5years",
        dreamJob="Product Manager",
        previousExperience="Retail",
        futureLearningPlan="Online courses",
    )

"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides
fixtures that can be used across all test files.
"""
import pytest
from unittest.mock import Mock

from story_generator.core.models import StoryTicket, BugTicket


# ===== Test Data Fixtures =====

@pytest.fixture
def sample_story():
    """Fixture providing a fully populated story"""
    return StoryTicket(
        title="Add dark mode",
        description="As a user, I want dark mode, so that I reduce eye strain.",
        acceptance_bullets=(
            "A dark theme toggle is available in settings",
            "The chosen theme persists across sessions",
            "All screens respect the dark palette",
        ),
        acceptance_gherkin=(
            "Given the user is on the settings page",
            "When the user enables dark mode",
            "Then every screen renders with the dark palette",
        ),
    )


@pytest.fixture
def sample_bug():
    """Fixture providing a fully populated bug"""
    return BugTicket(
        title="Login crashes the app",
        description="The app closes when the login button is pressed.",
        steps=("Open the app", "Enter valid credentials", "Press Login"),
        expected_result="The dashboard is shown.",
        actual_result="The app crashes.",
    )


@pytest.fixture
def story_reply():
    """Well-formed LLM reply for a story"""
    return (
        "Title: Add dark mode\n"
        "Description: As a user, I want dark mode, so that I reduce eye strain.\n"
        "Acceptance Criteria (bullets):\n"
        "- A dark theme toggle is available in settings\n"
        "- The chosen theme persists across sessions\n"
        "- All screens respect the dark palette\n"
        "Acceptance Criteria (Gherkin):\n"
        "Given the user is on the settings page\n"
        "When the user enables dark mode\n"
        "Then every screen renders with the dark palette"
    )


@pytest.fixture
def bug_reply():
    """Well-formed LLM reply for a bug"""
    return (
        "Title: Login crashes the app\n"
        "Description: The app closes when the login button is pressed.\n"
        "Steps to Reproduce:\n"
        "1. Open the app\n"
        "2. Enter valid credentials\n"
        "3. Press Login\n"
        "Expected Result:\n"
        "The dashboard is shown.\n"
        "Actual Result:\n"
        "The app crashes."
    )


# ===== Mock Fixtures =====

@pytest.fixture
def mock_llm_client():
    """Fixture providing a mocked LLM client"""
    mock = Mock()
    mock.complete.return_value = "Title: Stub\nDescription: Stub description"
    mock.status_label.return_value = "AI: ON (gpt-3.5-turbo)"
    return mock


# ===== Pytest Configuration =====

def pytest_configure(config):
    """Pytest configuration hook"""
    config.addinivalue_line(
        "markers",
        "unit: Unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (exercise several components together)"
    )

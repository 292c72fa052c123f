"""Global pytest fixtures for ENLIST."""

from __future__ import annotations

from pathlib import Path

import pytest

from enlist.config import DEFAULT_ROLE_ENV, NEWSLETTER_ENABLED_ENV, REDACTOR_MODE_ENV

CLI_ENV = (
    "ENLIST_LOG_PATH",
    "ENLIST_LOGGER_LEVELS",
    "ENLIST_FLIGHT_RECORDER",
    "ENLIST_FLIGHT_RECORDER_CAPACITY",
    "ENLIST_FORCE_FLUSH_FLIGHT_RECORDER",
)


@pytest.fixture(autouse=True)
def clean_enlist_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every test start without ENLIST_* configuration in the environment."""
    for name in (DEFAULT_ROLE_ENV, NEWSLETTER_ENABLED_ENV, REDACTOR_MODE_ENV, *CLI_ENV):
        monkeypatch.delenv(name, raising=False)


TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {"unit": "unit", "integration": "integration", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Add the default mark of an item's top-level folder (unit/integration/e2e)."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if (marker_name := FOLDER_MARKERS.get(folder)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))

from __future__ import annotations

import pytest

from relay.cli.context import CONFIG_ENV, NO_COLOR_ENV, VERBOSE_ENV
from relay.services.release.config import (
    EVENT_PATH_ENV,
    RELEASE_NOTES_TOKEN_ENV,
    STEP_OUTPUT_ENV,
    WEBHOOK_URL_ENV,
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CI-provided variables from leaking into tests.

    Blank values read as unset, and monkeypatch restores them even when the
    CLI callback writes to os.environ.
    """
    for name in (
        CONFIG_ENV,
        VERBOSE_ENV,
        NO_COLOR_ENV,
        EVENT_PATH_ENV,
        STEP_OUTPUT_ENV,
        WEBHOOK_URL_ENV,
        RELEASE_NOTES_TOKEN_ENV,
    ):
        monkeypatch.setenv(name, "")

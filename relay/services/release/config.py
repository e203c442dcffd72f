from __future__ import annotations

from typing import Literal

# Secrets are supplied by the CI environment, never by relay.toml.
WEBHOOK_URL_ENV = "DISCORD_WEBHOOK_URL"
RELEASE_NOTES_TOKEN_ENV = "RELEASE_NOTES_API_TOKEN"

EVENT_PATH_ENV = "GITHUB_EVENT_PATH"
STEP_OUTPUT_ENV = "GITHUB_OUTPUT"

type JobName = Literal["announce", "notes_email"]

ANNOUNCE_JOB: JobName = "announce"
NOTES_EMAIL_JOB: JobName = "notes_email"

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

type ReleaseErrorKind = Literal[
    "invalid_event",
    "invalid_input",
    "config_missing",
    "git_failed",
    "webhook_failed",
    "email_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

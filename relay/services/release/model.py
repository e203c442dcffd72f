from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from relay.services.release.config import JobName

type ReleaseChannel = Literal["preview", "stable"]
type JobStatus = Literal["sent", "skipped", "dry_run"]


@dataclass(frozen=True, slots=True)
class ReleaseEvent:
    tag_name: str
    body: str
    prerelease: bool
    repository_owner: str | None = None

    @property
    def channel(self) -> ReleaseChannel:
        return "preview" if self.prerelease else "stable"


@dataclass(frozen=True, slots=True)
class JobOutcome:
    job: JobName
    status: JobStatus
    detail: str

    @property
    def sent(self) -> bool:
        return self.status == "sent"

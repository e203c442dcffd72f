from __future__ import annotations

import json
from pathlib import Path

from relay.core.config import Config
from relay.core.result import Err, Ok, Result
from relay.git.repository import Repository
from relay.net.http import HttpClient
from relay.output.console import ConsoleProtocol, Style
from relay.services.release import config as release_config
from relay.services.release.announce import (
    format_announcement,
    post_announcement,
    release_url_for,
)
from relay.services.release.config import JobName
from relay.services.release.email import build_email_payload, send_release_notes_email
from relay.services.release.errors import ReleaseError
from relay.services.release.model import JobOutcome, ReleaseEvent
from relay.services.release.outputs import bool_output, write_step_outputs
from relay.services.release.promotion import preview_tag_for, was_promoted_from_preview


def owner_guard(*, job: JobName, event: ReleaseEvent, config: Config) -> JobOutcome | None:
    """Return a skipped outcome when the event comes from another owner.

    Events without an owner (manual runs) are not filtered.
    """
    required = config.guard.repository_owner
    if required is None or event.repository_owner is None:
        return None
    if event.repository_owner == required:
        return None
    return JobOutcome(
        job=job,
        status="skipped",
        detail=f"repository owner {event.repository_owner} is not {required}",
    )


def run_announce(
    *,
    event: ReleaseEvent,
    config: Config,
    http: HttpClient,
    webhook_url: str | None,
    console: ConsoleProtocol,
    dry_run: bool = False,
    verbose: bool = False,
    step_output: Path | None = None,
) -> Result[JobOutcome, ReleaseError]:
    job = release_config.ANNOUNCE_JOB
    skipped = owner_guard(job=job, event=event, config=config)
    if skipped is not None:
        return Ok(skipped)

    url = release_url_for(prerelease=event.prerelease, config=config.announce)
    if step_output is not None:
        written = write_step_outputs(step_output, {"URL": url})
        if isinstance(written, Err):
            return written

    content = format_announcement(event, config=config.announce)
    console.print(f"{event.channel} release {event.tag_name}: {url}", Style.DIM)
    if verbose:
        console.print(content, Style.DIM)

    if dry_run:
        return Ok(JobOutcome(job=job, status="dry_run", detail=f"{len(content)} chars"))

    if not webhook_url:
        return Err(
            ReleaseError(
                kind="config_missing",
                message="chat webhook URL is not set",
                hint=f"set {release_config.WEBHOOK_URL_ENV} or pass --webhook-url",
            )
        )

    posted = post_announcement(http=http, webhook_url=webhook_url, content=content)
    if isinstance(posted, Err):
        return posted
    return Ok(JobOutcome(job=job, status="sent", detail=f"{len(content)} chars"))


def check_promotion(
    *,
    event: ReleaseEvent,
    config: Config,
    repo: Repository,
    step_output: Path | None = None,
) -> Result[bool, ReleaseError]:
    promoted = was_promoted_from_preview(
        repo=repo,
        tag=event.tag_name,
        suffix=config.email.preview_suffix,
    )
    if isinstance(promoted, Err):
        return promoted

    if step_output is not None:
        written = write_step_outputs(step_output, {"was_preview": bool_output(promoted.value)})
        if isinstance(written, Err):
            return written
    return promoted


def run_release_notes_email(
    *,
    event: ReleaseEvent,
    config: Config,
    http: HttpClient,
    repo: Repository,
    token: str | None,
    console: ConsoleProtocol,
    dry_run: bool = False,
    verbose: bool = False,
    step_output: Path | None = None,
) -> Result[JobOutcome, ReleaseError]:
    job = release_config.NOTES_EMAIL_JOB
    skipped = owner_guard(job=job, event=event, config=config)
    if skipped is not None:
        return Ok(skipped)

    if event.prerelease:
        return Ok(JobOutcome(job=job, status="skipped", detail="prerelease"))

    promoted = check_promotion(event=event, config=config, repo=repo, step_output=step_output)
    if isinstance(promoted, Err):
        return promoted

    preview_tag = preview_tag_for(event.tag_name, suffix=config.email.preview_suffix)
    if not promoted.value:
        return Ok(JobOutcome(job=job, status="skipped", detail=f"no {preview_tag} tag"))

    console.print(f"{event.tag_name} was promoted from {preview_tag}", Style.DIM)
    if verbose:
        payload = build_email_payload(event)
        console.print(json.dumps(payload, ensure_ascii=False, indent=2), Style.DIM)

    if dry_run:
        return Ok(JobOutcome(job=job, status="dry_run", detail=config.email.api_url))

    if not token:
        return Err(
            ReleaseError(
                kind="config_missing",
                message="release notes API token is not set",
                hint=f"set {release_config.RELEASE_NOTES_TOKEN_ENV} or pass --token",
            )
        )

    sent = send_release_notes_email(
        http=http,
        api_url=config.email.api_url,
        token=token,
        event=event,
    )
    if isinstance(sent, Err):
        return sent
    return Ok(JobOutcome(job=job, status="sent", detail=config.email.api_url))

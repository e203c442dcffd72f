"""Git operations module.

Usage:
    from relay.git import Repository

    repo = Repository(Path("."))
    if repo.tag_exists("v0.150.0-pre").unwrap_or(False):
        print("promoted from preview")
"""

from relay.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]

"""
Git inspection.

Read-only helpers around the ``git`` binary: listing remotes, turning a
remote into a browsable repository URL and reading the latest author.
"""

from typing import Iterable, List, Optional
import logging
import re
import subprocess

from .errors import RepositoryNotFoundError, SubprocessError

logger = logging.getLogger(__name__)

HOSTING_MARKER = "github"
HOSTING_HOST = "github.com"

REMOTE_SPLIT_RE = re.compile(r"[:\s+]")


def run_git(*args: str, check: bool = True) -> str:
    """
    Run ``git`` with ``args`` and return its standard output.

    Raises:
        SubprocessError: if git cannot be started, or exits non-zero
            while ``check`` is set
    """
    cmd = ["git", *args]
    logger.debug(f"Running {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise SubprocessError(f"{' '.join(cmd)}: {e}", command=cmd) from e

    if check and result.returncode != 0:
        raise SubprocessError(
            f"{' '.join(cmd)} failed: {(result.stderr or result.stdout).strip()}",
            command=cmd,
            returncode=result.returncode,
        )

    return result.stdout


def remote_lines() -> List[str]:
    """Lines of ``git remote -v``, e.g. ``origin\\tgit@github.com:a/b.git (fetch)``."""
    return run_git("remote", "-v").splitlines()


def find_remote(lines: Iterable[str], marker: str = HOSTING_MARKER) -> Optional[str]:
    """First line mentioning ``marker``, or None."""
    for line in lines:
        if marker in line:
            return line
    return None


def remote_to_url(line: str, host: str = HOSTING_HOST) -> str:
    """
    Turn a ``git remote -v`` line into an https URL.

    The line is split on single colons, whitespace or plus characters and
    the third field is used as the repository path, so
    ``origin git@github.com:acme/widget.git (fetch)`` becomes
    ``https://github.com/acme/widget.git``. Remote URLs of other shapes
    are not understood.
    """
    fields = REMOTE_SPLIT_RE.split(line)
    if len(fields) < 3:
        raise RepositoryNotFoundError(f"Could not parse git remote: {line}")
    return f"https://{host}/{fields[2]}"


def repository_url(marker: str = HOSTING_MARKER, host: str = HOSTING_HOST) -> str:
    """URL of the first remote pointing at the hosting provider."""
    line = find_remote(remote_lines(), marker)
    if not line:
        raise RepositoryNotFoundError("Could not find any repository URL to GitHub.")
    return remote_to_url(line, host)


def author(format: str = "%an") -> str:
    """
    First line of ``git log --format=<format>``.

    ``%an`` is the author name and ``%ae`` the author email. Returns an
    empty string when there is no history.
    """
    output = run_git("log", f"--format={format}", check=False)
    lines = output.splitlines()
    return lines[0] if lines else ""

"""Map a caller-supplied path onto the file it most likely names."""

import logging
import os

logger = logging.getLogger(__name__)


def _anchor(path: str, base: str | os.PathLike) -> str:
    if os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(os.fspath(base), path))


def candidate_paths(
    path: str,
    cwd: str | os.PathLike | None = None,
    fallback_root: str | os.PathLike | None = None,
) -> list[str]:
    """Build the ordered list of locations to try for `path`.

    Always three entries, duplicates kept:
      1. the input as given
      2. the input anchored at the working directory
      3. the input anchored at the fallback root (or the working directory
         again when no fallback root is configured)

    Absolute inputs are passed through unchanged in every slot.
    """
    working_dir = os.fspath(cwd) if cwd is not None else os.getcwd()
    fallback = fallback_root if fallback_root is not None else working_dir
    return [
        path,
        _anchor(path, working_dir),
        _anchor(path, fallback),
    ]


def first_existing(candidates: list[str]) -> str | None:
    """Return the first candidate present on disk, if any."""
    for candidate in candidates:
        if os.path.exists(candidate):
            logger.debug(f"Resolved {candidates[0]!r} to {candidate}")
            return candidate
    return None

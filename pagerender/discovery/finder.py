"""Layout and partial discovery under the template directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from ..core.errors import DiscoveryError

logger = logging.getLogger(__name__)


def _raise_walk_error(exc: OSError) -> None:
    raise DiscoveryError(f"Cannot read {exc.filename}: {exc.strerror}") from exc


def find_files(root: Path | str, extension: str) -> list[str]:
    """Recursively list template files under ``root``.

    Args:
        root: Directory to walk
        extension: Suffix to match exactly (case-sensitive), e.g. ".html"

    Returns:
        POSIX paths relative to ``root``, in sorted walk order
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise DiscoveryError(f"Template directory not found: {root_path}")

    suffix = extension if extension.startswith(".") else f".{extension}"

    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath, filename)
            if path.suffix == suffix:
                found.append(path.relative_to(root_path).as_posix())

    return found


def collect_by_tag(
    root: Path | str, tags: Iterable[str], extension: str = ".html"
) -> list[str]:
    """Collect files whose path contains one of ``tags``.

    Matches are grouped per tag, in tag order. A file matching several
    tags is listed once per tag.

    Args:
        root: Template directory
        tags: Substrings marking file roles, e.g. ["layout", "partial"]
        extension: Template file extension

    Returns:
        Paths relative to ``root``, suitable for RendererConfig.partials
    """
    collected: list[str] = []
    for tag in tags:
        matches = [path for path in find_files(root, extension) if tag in path]
        logger.debug(f"Tag {tag!r}: {len(matches)} file(s) under {root}")
        collected.extend(matches)

    return collected

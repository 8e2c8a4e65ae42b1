"""Copy static assets verbatim into the build output."""

from __future__ import annotations

import logging
import shutil
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


def copy_passthrough(
    mapping: cabc.Mapping[str, str], *, root: Path, output_dir: Path
) -> list[Path]:
    """Copy each ``source -> destination`` entry and return the written paths.

    Parameters
    ----------
    mapping : Mapping[str, str]
        Source paths relative to ``root`` mapped to destinations relative to
        ``output_dir``.
    root : Path
        Project directory the sources are resolved against.
    output_dir : Path
        Build output directory.

    Returns
    -------
    list[Path]
        Destination paths that were written. Missing sources are logged and
        skipped.
    """
    written: list[Path] = []
    for source_name, dest_name in mapping.items():
        source = root / source_name
        destination = output_dir / dest_name
        if source.is_dir():
            shutil.copytree(source, destination, dirs_exist_ok=True)
        elif source.is_file():
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, destination)
        else:
            logger.warning("Passthrough source %s does not exist; skipping", source)
            continue
        logger.debug("Copied %s -> %s", source, destination)
        written.append(destination)
    return written


__all__ = ["copy_passthrough"]

"""Copy the stylesheet and image assets into the output tree."""

from __future__ import annotations

import logging
import shutil
from importlib.resources import files
from pathlib import Path

from ._constants import IMAGES_DIR, STYLES_FILE

logger = logging.getLogger(__name__)


def default_stylesheet() -> str:
    """Return the stylesheet bundled with the package."""
    return files("geopolitica_pages").joinpath("static", STYLES_FILE).read_text(
        encoding="utf-8"
    )


def copy_styles(src_dir: Path, dest_dir: Path) -> Path:
    """Write ``styles.css`` into ``dest_dir``.

    The stylesheet is read from ``src_dir/styles.css`` when present, otherwise
    the bundled default is used.

    Returns
    -------
    Path
        Path of the written stylesheet.
    """
    source = src_dir / STYLES_FILE
    if source.is_file():
        css = source.read_text(encoding="utf-8")
    else:
        logger.info("No stylesheet at %s; writing the default styles.", source)
        css = default_stylesheet()
    dest = dest_dir / STYLES_FILE
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(css, encoding="utf-8")
    return dest


def copy_images(src_dir: Path, dest_dir: Path) -> list[Path]:
    """Copy ``src_dir/images`` into ``dest_dir/images``, one level deep.

    Files directly inside ``images/`` and inside its immediate
    sub-directories are copied; anything nested further is skipped. A missing
    source directory is a no-op.

    Returns
    -------
    list[Path]
        Destination paths of the copied files, in directory order.
    """
    source = src_dir / IMAGES_DIR
    if not source.is_dir():
        return []
    target = dest_dir / IMAGES_DIR
    target.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for entry in sorted(source.iterdir()):
        if entry.is_dir():
            subdir = target / entry.name
            subdir.mkdir(parents=True, exist_ok=True)
            for sub in sorted(entry.iterdir()):
                if sub.is_dir():
                    continue
                copied.append(Path(shutil.copyfile(sub, subdir / sub.name)))
        else:
            copied.append(Path(shutil.copyfile(entry, target / entry.name)))
    return copied


__all__ = ["copy_images", "copy_styles", "default_stylesheet"]

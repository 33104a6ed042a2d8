from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def install_file(src: str, dst: str, *, dry_run: bool = False) -> None:
    """Copy src over dst byte-for-byte, replacing whatever is there.

    The destination directory must already exist.
    """

    s = Path(src)
    d = Path(dst)
    if not s.is_file():
        raise FileNotFoundError(src)

    if dry_run:
        logger.info("Would copy %s -> %s", str(s), str(d))
        return

    logger.info("Copy %s -> %s", str(s), str(d))
    shutil.copy2(s, d)


def ensure_dir(path: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would create directory %s", str(p))
        return
    if p.is_dir():
        logger.debug("Directory exists: %s", str(p))
    p.mkdir(parents=True, exist_ok=True)

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

FALLBACK_LOG_NAME = "ripple-launcher.log"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def _open_log_file(log_path: str) -> Tuple[logging.Handler, str]:
    p = Path(log_path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(p), str(p)
    except OSError:
        fallback = Path.cwd() / FALLBACK_LOG_NAME
        return logging.FileHandler(fallback), str(fallback)


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Attach launcher handlers to the root logger once.

    Console goes to stderr so stdout stays with the banner and the target
    program. Returns the log file in use, or None when console-only.
    """

    root = logging.getLogger()
    root.setLevel(level)
    if getattr(root, "_ripple_configured", False):
        return getattr(root, "_ripple_log_path", None)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)
    chosen_path: Optional[str] = None

    if log_path:
        handler, chosen_path = _open_log_file(log_path)
        handler.setFormatter(fmt)
        root.addHandler(handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        root.addHandler(console)

    setattr(root, "_ripple_configured", True)
    setattr(root, "_ripple_log_path", chosen_path)
    return chosen_path

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def exit_status(returncode: int) -> int:
    """Map a Popen returncode to a shell-style exit status (128 + signal)."""

    if returncode < 0:
        return 128 - returncode
    return returncode


def run_cmd(
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - stdin/stdout/stderr are inherited; the child reports its own errors.
    - Never raises on a non-zero status; callers decide what to do with it.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))
    if env:
        logger.debug("ENV %s", " ".join(f"{k}={shlex.quote(v)}" for k, v in env.items()))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0)

    p = subprocess.run(
        argv_list,
        cwd=cwd,
        env=dict(os.environ, **(env or {})),
    )

    if p.returncode != 0:
        logger.error("Command failed (%s): %s", p.returncode, _fmt_argv(argv_list))

    return CmdResult(argv=argv_list, returncode=exit_status(p.returncode))

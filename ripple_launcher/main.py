from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .launcher_config import LauncherConfig, load_launcher_config
from .logging_utils import configure_logging
from .pipeline import LaunchCtx, PipelineResult, run_pipeline
from .steps import BuildStep, CopyManifestsStep, EnsureConfigDirStep, InstallBinaryStep, RunStep

logger = logging.getLogger(__name__)


HELP = """\
Ripple Help
ripple init - Initializes the manifests and other Device configurations
ripple run {Device IP} - Starts Ripple in the local PC
Example: ripple run 10.0.0.1
ripple -h for help
"""


def init_steps():
    return [
        InstallBinaryStep(),
        EnsureConfigDirStep(),
        CopyManifestsStep(),
    ]


def run_steps():
    return [
        BuildStep(),
        RunStep(),
    ]


COMMANDS = {
    "init": init_steps,
    "run": run_steps,
}


def print_help() -> int:
    sys.stdout.write(HELP)
    return 0


def run_command(
    command: str,
    *,
    cfg: LauncherConfig,
    host: Optional[str] = None,
    dry_run: bool = False,
) -> PipelineResult:
    """Run the pipeline behind a subcommand (init or run)."""

    ctx = LaunchCtx(cfg=cfg, host=host or "", dry_run=dry_run)
    steps = COMMANDS[command]()

    try:
        result = run_pipeline(ctx=ctx, steps=steps)
    except Exception:
        logger.exception("ripple %s failed", command)
        raise

    if result.ok:
        logger.info("ripple %s finished (%s)", command, ", ".join(result.ran_steps))
    return result


def build_parser() -> argparse.ArgumentParser:
    # add_help=False: unknown input must fall through to our own banner.
    p = argparse.ArgumentParser(prog="ripple", add_help=False)
    p.add_argument("-h", "--help", action="store_true", dest="show_help")
    p.add_argument("--config", default=None, help="Path to launcher config (yaml)")
    p.add_argument("--dry-run", action="store_true", help="Log actions without executing them")
    return p


def split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split into leading launcher options and the subcommand with its arguments.

    Options after the subcommand belong to it, so `ripple init -h` still inits.
    """

    i = 0
    while i < len(argv) and argv[i].startswith("-") and argv[i] != "-":
        if argv[i] == "--config":
            i += 1
        i += 1
    return argv[:i], argv[i:]


def main(argv: Optional[list[str]] = None) -> int:
    options, rest = split_argv(list(sys.argv[1:] if argv is None else argv))
    args, _unknown = build_parser().parse_known_args(options)
    command = rest[0] if rest else None

    if args.show_help or command not in COMMANDS:
        return print_help()

    cfg = load_launcher_config(args.config)
    configure_logging(log_path=cfg.log_path, level=cfg.log_level)
    if cfg.source:
        logger.info("Using launcher config %s", cfg.source)

    host = rest[1] if command == "run" and len(rest) > 1 else None
    result = run_command(command, cfg=cfg, host=host, dry_run=bool(args.dry_run))
    return result.returncode


if __name__ == "__main__":
    raise SystemExit(main())

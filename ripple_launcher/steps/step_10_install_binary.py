from __future__ import annotations

import logging

from ..lib.assets import install_file
from ..pipeline import LaunchCtx

logger = logging.getLogger(__name__)


class InstallBinaryStep:
    step_id = "10_install_binary"

    def run(self, ctx: LaunchCtx) -> int:
        src = ctx.cfg.executable
        dst = ctx.cfg.installed_binary

        # A bare module (python -m ripple_launcher.main) cannot run on its own.
        if src.suffix == ".py":
            raise RuntimeError(
                f"Refusing to install {src}: run init through the `ripple` console script"
            )

        if dst.exists() and src.resolve() == dst.resolve():
            logger.info("Already running from %s; binary left as is", str(dst))
            return 0

        # The bin dir is expected to exist already (cargo creates it).
        install_file(str(src), str(dst), dry_run=ctx.dry_run)
        logger.info("Installed %s", str(dst))
        return 0

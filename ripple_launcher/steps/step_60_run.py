from __future__ import annotations

import logging

from ..lib.command import run_cmd
from ..pipeline import LaunchCtx

logger = logging.getLogger(__name__)


class RunStep:
    step_id = "60_run"

    def run(self, ctx: LaunchCtx) -> int:
        logger.info("Starting target with %s=%s", ctx.cfg.host_env_var, ctx.host)
        res = run_cmd(
            ctx.cfg.run_command,
            env=ctx.child_env,
            cwd=str(ctx.cfg.project_dir),
            dry_run=ctx.dry_run,
        )
        return res.returncode

from __future__ import annotations

from ..lib.command import run_cmd
from ..pipeline import LaunchCtx


class BuildStep:
    step_id = "50_build"

    def run(self, ctx: LaunchCtx) -> int:
        res = run_cmd(
            ctx.cfg.build_command,
            env=ctx.child_env,
            cwd=str(ctx.cfg.project_dir),
            dry_run=ctx.dry_run,
        )
        return res.returncode

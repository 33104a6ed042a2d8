from __future__ import annotations

from ..lib.assets import ensure_dir
from ..pipeline import LaunchCtx


class EnsureConfigDirStep:
    step_id = "20_config_dir"

    def run(self, ctx: LaunchCtx) -> int:
        ensure_dir(str(ctx.cfg.config_dir), dry_run=ctx.dry_run)
        return 0

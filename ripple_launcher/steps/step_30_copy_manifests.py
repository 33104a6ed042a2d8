from __future__ import annotations

import logging

from ..lib.assets import install_file
from ..pipeline import LaunchCtx

logger = logging.getLogger(__name__)


class CopyManifestsStep:
    step_id = "30_copy_manifests"

    def run(self, ctx: LaunchCtx) -> int:
        # Each copy stands alone: a failure leaves earlier copies in place.
        manifests = ctx.cfg.manifests
        for src, dst in manifests:
            install_file(str(src), str(dst), dry_run=ctx.dry_run)

        logger.info("Manifests installed into %s (%d files)", str(ctx.cfg.config_dir), len(manifests))
        return 0

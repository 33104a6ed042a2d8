from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from .launcher_config import LauncherConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchCtx:
    cfg: LauncherConfig
    host: str = ""
    dry_run: bool = False

    @property
    def child_env(self) -> dict[str, str]:
        """Environment additions handed to build/run children."""
        return {self.cfg.host_env_var: self.host}


class Step(Protocol):
    """A single blocking step. Returns an exit status; 0 means continue."""

    step_id: str

    def run(self, ctx: LaunchCtx) -> int:
        ...


@dataclass(frozen=True)
class PipelineResult:
    returncode: int
    ran_steps: List[str]
    failed_step: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_pipeline(*, ctx: LaunchCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first non-zero status.

    Exceptions raised by a step are not caught here.
    """

    ran: List[str] = []
    rc = 0

    for step in steps:
        logger.info("Running step %s", step.step_id)
        rc = step.run(ctx)
        ran.append(step.step_id)
        if rc != 0:
            logger.error("Step %s failed with status %s; stopping", step.step_id, rc)
            return PipelineResult(returncode=rc, ran_steps=ran, failed_step=step.step_id)

    return PipelineResult(returncode=rc, ran_steps=ran)

import pytest

from ripple_launcher.launcher_config import LauncherConfig
from ripple_launcher.pipeline import LaunchCtx, run_pipeline


class Recorder:
    def __init__(self, step_id, rc, calls):
        self.step_id = step_id
        self.rc = rc
        self.calls = calls

    def run(self, ctx):
        self.calls.append(self.step_id)
        return self.rc


class Boom:
    step_id = "boom"

    def run(self, ctx):
        raise PermissionError("nope")


@pytest.fixture
def ctx():
    return LaunchCtx(cfg=LauncherConfig(), host="10.0.0.1")


def test_runs_all_steps_in_order(ctx):
    calls = []
    steps = [Recorder("a", 0, calls), Recorder("b", 0, calls), Recorder("c", 0, calls)]

    result = run_pipeline(ctx=ctx, steps=steps)

    assert calls == ["a", "b", "c"]
    assert result.ok
    assert result.ran_steps == ["a", "b", "c"]
    assert result.failed_step is None


def test_stops_at_first_failure(ctx):
    calls = []
    steps = [Recorder("a", 0, calls), Recorder("b", 4, calls), Recorder("c", 0, calls)]

    result = run_pipeline(ctx=ctx, steps=steps)

    assert calls == ["a", "b"]
    assert result.returncode == 4
    assert result.failed_step == "b"


def test_step_exceptions_propagate(ctx):
    calls = []
    with pytest.raises(PermissionError):
        run_pipeline(ctx=ctx, steps=[Recorder("a", 0, calls), Boom(), Recorder("c", 0, calls)])
    assert calls == ["a"]


def test_empty_pipeline_succeeds(ctx):
    result = run_pipeline(ctx=ctx, steps=[])
    assert result.ok
    assert result.ran_steps == []


def test_child_env_uses_configured_variable():
    ctx = LaunchCtx(cfg=LauncherConfig(raw={"host_env_var": "THUNDER_HOST"}), host="h")
    assert ctx.child_env == {"THUNDER_HOST": "h"}
    assert LaunchCtx(cfg=LauncherConfig()).child_env == {"DEVICE_HOST": ""}

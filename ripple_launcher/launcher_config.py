from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_NAME = "ripple-launcher.yaml"
CONFIG_ENV_VAR = "RIPPLE_LAUNCHER_CONFIG"
LOG_LEVEL_ENV_VAR = "RIPPLE_LOG_LEVEL"

# Contract with the target program.
HOST_ENV_VAR = "DEVICE_HOST"

DEFAULT_MANIFESTS: List[Tuple[str, str]] = [
    ("examples/manifest.json", "firebolt-device-manifest.json"),
    ("examples/default-extn-manifest.json", "firebolt-extn-manifest.json"),
    ("examples/firebolt-app-library.json", "firebolt-app-library.json"),
]

DEFAULT_BUILD_COMMAND = ["cargo", "build", "--features", "local_dev"]
DEFAULT_RUN_COMMAND = ["cargo", "run", "--features", "local_dev", "core/main"]


def _expand(p: str) -> Path:
    return Path(os.path.expanduser(p))


@dataclass(frozen=True)
class LauncherConfig:
    raw: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None

    @property
    def _paths(self) -> Dict[str, Any]:
        return self.raw.get("paths") or {}

    @property
    def project_dir(self) -> Path:
        return _expand(str(self._paths.get("project_dir") or "."))

    @property
    def bin_dir(self) -> Path:
        return _expand(str(self._paths.get("bin_dir") or "~/.cargo/bin"))

    @property
    def config_dir(self) -> Path:
        return _expand(str(self._paths.get("config_dir") or "~/.ripple"))

    @property
    def executable(self) -> Path:
        exe = self._paths.get("executable")
        if exe:
            return _expand(str(exe))
        return Path(sys.argv[0])

    @property
    def binary_name(self) -> str:
        return str(self.raw.get("binary_name") or "ripple")

    @property
    def installed_binary(self) -> Path:
        return self.bin_dir / self.binary_name

    @property
    def manifests(self) -> List[Tuple[Path, Path]]:
        """(source, destination) pairs; sources resolve against project_dir."""
        entries = self.raw.get("manifests")
        pairs: List[Tuple[str, str]]
        if entries is None:
            pairs = list(DEFAULT_MANIFESTS)
        else:
            pairs = []
            for e in entries:
                if not isinstance(e, dict) or not e.get("source") or not e.get("dest"):
                    raise ValueError(f"manifest entry needs source and dest: {e!r}")
                pairs.append((str(e["source"]), str(e["dest"])))
        return [(self.project_dir / src, self.config_dir / dst) for src, dst in pairs]

    @property
    def host_env_var(self) -> str:
        return str(self.raw.get("host_env_var") or HOST_ENV_VAR)

    @property
    def build_command(self) -> List[str]:
        return _argv((self.raw.get("commands") or {}).get("build"), DEFAULT_BUILD_COMMAND)

    @property
    def run_command(self) -> List[str]:
        return _argv((self.raw.get("commands") or {}).get("run"), DEFAULT_RUN_COMMAND)

    @property
    def log_level(self) -> int:
        name = os.environ.get(LOG_LEVEL_ENV_VAR) or (self.raw.get("logging") or {}).get("level") or "INFO"
        level = logging.getLevelName(str(name).upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
        return level

    @property
    def log_path(self) -> Optional[str]:
        p = (self.raw.get("logging") or {}).get("path")
        return str(_expand(str(p))) if p else None


def _argv(value: Any, default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    if isinstance(value, str):
        raise ValueError(f"command must be a list of arguments, got string: {value!r}")
    return [str(a) for a in value]


def resolve_config_path(explicit: Optional[str] = None) -> Tuple[Optional[str], bool]:
    """Return (path, required). Only explicitly requested paths are required."""

    if explicit:
        return explicit, True
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return from_env, True
    return DEFAULT_CONFIG_NAME, False


def load_launcher_config(path: Optional[str] = None) -> LauncherConfig:
    config_path, required = resolve_config_path(path)
    p = Path(str(config_path))
    if not p.exists():
        if required:
            raise FileNotFoundError(str(p))
        return LauncherConfig()

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("launcher config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the launcher config") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{p} must contain a mapping/object")

    logger.debug("Loaded launcher config from %s", p)
    return LauncherConfig(raw=raw, source=str(p))

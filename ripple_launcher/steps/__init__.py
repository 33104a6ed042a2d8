from .step_10_install_binary import InstallBinaryStep
from .step_20_config_dir import EnsureConfigDirStep
from .step_30_copy_manifests import CopyManifestsStep
from .step_50_build import BuildStep
from .step_60_run import RunStep

__all__ = [
    "InstallBinaryStep",
    "EnsureConfigDirStep",
    "CopyManifestsStep",
    "BuildStep",
    "RunStep",
]

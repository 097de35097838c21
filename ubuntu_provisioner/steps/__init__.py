from .step_00_preconditions import RequireRootStep, RequireShellStep
from .step_10_reset_workspace import ResetWorkspaceStep
from .step_20_configure_mirrors import ConfigureMirrorsStep
from .step_25_system_update import SystemUpdateStep
from .step_30_install_base_packages import InstallBasePackagesStep
from .step_40_configure_dotfiles import ConfigureBashrcStep, ConfigureVimrcStep
from .step_50_install_docker import InstallDockerStep, PullDockerImagesStep
from .step_60_install_miniconda import ConfigureCondaStep, CreateCondaEnvsStep, InstallMinicondaStep
from .step_70_install_source_tool import InstallSourceToolStep
from .step_90_teardown_workspace import TeardownWorkspaceStep

__all__ = [
    "RequireRootStep",
    "RequireShellStep",
    "ResetWorkspaceStep",
    "ConfigureMirrorsStep",
    "SystemUpdateStep",
    "InstallBasePackagesStep",
    "ConfigureBashrcStep",
    "ConfigureVimrcStep",
    "InstallDockerStep",
    "PullDockerImagesStep",
    "InstallMinicondaStep",
    "ConfigureCondaStep",
    "CreateCondaEnvsStep",
    "InstallSourceToolStep",
    "TeardownWorkspaceStep",
]

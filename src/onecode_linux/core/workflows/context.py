"""Collaborators shared by the install and update workflows."""

from dataclasses import dataclass

from onecode_linux.core.backup import BackupManager
from onecode_linux.core.build import BuildRunner
from onecode_linux.core.dependencies import DependencyChecker
from onecode_linux.core.git import GitRepository
from onecode_linux.core.package import DebInstaller
from onecode_linux.core.workflows.prompts import Prompter
from onecode_linux.domain.types import GlobalConfig, SettingsProfile


@dataclass(slots=True)
class WorkflowContext:
    """Everything a workflow needs, built once by the CLI.

    Tests construct this directly with mocks in place of the collaborators.
    """

    config: GlobalConfig
    prompter: Prompter
    repository: GitRepository
    dependencies: DependencyChecker
    builder: BuildRunner
    installer: DebInstaller
    backups: BackupManager

    @classmethod
    def from_config(
        cls,
        config: GlobalConfig,
        prompter: Prompter,
        profile: SettingsProfile | None = None,
    ) -> "WorkflowContext":
        """Create the production collaborators from configuration."""
        install_dir = config["directory"]["install"]
        return cls(
            config=config,
            prompter=prompter,
            repository=GitRepository(
                install_dir, config["source"]["repo_url"]
            ),
            dependencies=DependencyChecker(),
            builder=BuildRunner(install_dir),
            installer=DebInstaller(
                install_dir, config["app"]["sandbox_path"]
            ),
            backups=BackupManager(profile or SettingsProfile()),
        )

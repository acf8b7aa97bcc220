"""Command handlers for the 1code-linux CLI."""

from .backup import BackupHandler
from .base import BaseCommandHandler
from .install import InstallCommandHandler
from .update import UpdateHandler
from .upgrade import UpgradeHandler

__all__ = [
    "BackupHandler",
    "BaseCommandHandler",
    "InstallCommandHandler",
    "UpdateHandler",
    "UpgradeHandler",
]

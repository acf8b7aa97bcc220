"""Default filesystem locations."""

from pathlib import Path

from onecode_linux.constants import CONFIG_DIR_NAME, DEFAULT_CONFIG_SUBDIR


class Paths:
    """Default locations of the tool's files and of the 1Code install.

    These only seed settings.conf; runtime code reads the configured
    ``[directory]`` values instead.
    """

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / DEFAULT_CONFIG_SUBDIR / CONFIG_DIR_NAME

    INSTALL_DIR = HOME_DIR / ".local" / "share" / "1code"
    BIN_DIR = HOME_DIR / ".local" / "bin"
    # Electron userData directory of the 21st desktop app
    APP_SETTINGS_DIR = HOME_DIR / DEFAULT_CONFIG_SUBDIR / "21st-desktop"
    BACKUP_DIR = HOME_DIR / ".local" / "share" / CONFIG_DIR_NAME / "backups"

    @staticmethod
    def expand_path(path_str: str) -> Path:
        """Expand ``~`` and make the path absolute without requiring it.

        >>> Paths.expand_path("~/.local/bin")
        PosixPath('/home/user/.local/bin')
        """
        return Path(path_str).expanduser().resolve(strict=False)

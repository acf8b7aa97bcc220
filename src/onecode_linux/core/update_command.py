"""The ``update-1code`` helper script placed on the user's PATH."""

import os
import shlex
import shutil
import sys
from pathlib import Path

from onecode_linux.constants import APP_NAME, UPDATE_COMMAND_NAME
from onecode_linux.logger import get_logger

logger = get_logger(__name__)

PATH_HINT = "echo 'export PATH=\"$HOME/.local/bin:$PATH\"' >> ~/.bashrc"


def _invocation() -> str:
    """Command line that runs this tool, preferring the installed script."""
    executable = shutil.which(APP_NAME)
    if executable:
        return shlex.quote(executable)
    return f"{shlex.quote(sys.executable)} -m onecode_linux.main"


def render_update_script() -> str:
    """Return the bash script that forwards to ``1code-linux update``."""
    return f'#!/bin/bash\nexec {_invocation()} update "$@"\n'


def install_update_command(bin_dir: Path) -> Path:
    """Write the update helper into bin_dir and make it executable.

    Returns:
        Path of the written script

    """
    logger.info("🔄 Installing update command...")
    bin_dir.mkdir(parents=True, exist_ok=True)
    script = bin_dir / UPDATE_COMMAND_NAME
    script.write_text(render_update_script(), encoding="utf-8")
    script.chmod(0o755)
    logger.debug("Wrote %s", script)
    return script


def bin_dir_on_path(bin_dir: Path, path_env: str | None = None) -> bool:
    """Return True if bin_dir is listed in PATH."""
    if path_env is None:
        path_env = os.environ.get("PATH", "")
    target = bin_dir.expanduser().resolve()
    return any(
        Path(entry).expanduser().resolve() == target
        for entry in path_env.split(os.pathsep)
        if entry
    )

"""Artifact writing and execution helpers for InstallHelper."""

import logging
import os
import sys
from typing import Optional

from rich.console import Console

from installhelper.constants import SCRIPT_MODE
from installhelper.errors import HelperError


class ArtifactService:
    """Encapsulates artifact file side effects."""

    def __init__(self, logger: logging.Logger, console: Console, command_runner):
        self.logger = logger
        self.console = console
        self.command_runner = command_runner

    def write_text(self, path: str, content: str):
        self.console.print(f"[blue]Saving to {path}...[/blue]")
        try:
            with open(path, "w", encoding="utf-8", newline="") as file_obj:
                file_obj.write(content)
        except OSError as exc:
            raise HelperError(f"Could not write '{path}': {exc}") from exc
        self.logger.debug("Wrote %s characters to %s", len(content), path)

    def set_permissions(self, path: str, mode: int):
        if sys.platform == "win32":
            return

        try:
            os.chmod(path, mode)
        except Exception as exc:
            self.logger.warning("Could not set permissions on %s: %s", path, exc)

    def write_script(self, path: str, content: str):
        self.write_text(path, content)
        self.set_permissions(path, SCRIPT_MODE)

    def script_command(self, path: str):
        with open(path, "rb") as file_obj:
            has_shebang = file_obj.read(2) == b"#!"
        if has_shebang:
            return [path]
        # bash runs shebang-less executables itself; exec() refuses them
        return ["bash", path]

    def execute_script(self, path: str, workdir: Optional[str] = None) -> int:
        """Run the script in the foreground and return its exit status.

        Output is not captured and no timeout applies.
        """
        script_path = os.path.abspath(path)
        self.console.print("[blue]Running the install script now...[/blue]")
        result = self.command_runner.run(
            self.script_command(script_path),
            check=False,
            cwd=workdir,
        )
        self.logger.debug("Install script exited with status %s", result.returncode)
        return result.returncode

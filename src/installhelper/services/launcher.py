"""Host launcher integration for InstallHelper."""

import os
import sys
import webbrowser
from pathlib import Path

from installhelper.errors import HelperError


class LauncherService:
    """Opens files with the host's default handler."""

    def __init__(self, command_runner, logger, platform: str = sys.platform, browser=webbrowser):
        self.command_runner = command_runner
        self.logger = logger
        self.platform = platform
        self.browser = browser

    def opener_command(self):
        if self.platform == "darwin":
            return ["open"]
        if self.platform == "win32":
            return None
        return ["xdg-open"]

    def open(self, path: str) -> bool:
        """Try the platform opener, then the browser. Returns False if neither worked."""
        absolute_path = os.path.abspath(path)

        if self._open_with_platform(absolute_path):
            return True

        try:
            return bool(self.browser.open(Path(absolute_path).as_uri()))
        except Exception as exc:
            self.logger.debug("Browser fallback failed for %s: %s", absolute_path, exc)
            return False

    def _open_with_platform(self, path: str) -> bool:
        if self.platform == "win32":
            try:
                os.startfile(path)
                return True
            except OSError as exc:
                self.logger.debug("os.startfile failed for %s: %s", path, exc)
                return False

        command = self.opener_command()
        try:
            result = self.command_runner.run(command + [path], check=False, capture_output=True)
        except HelperError as exc:
            self.logger.debug("Opener unavailable: %s", exc)
            return False
        return result.returncode == 0

"""README discovery helpers for InstallHelper."""

import os
from typing import Optional

from installhelper.constants import README_CANDIDATES, README_PREFIX
from installhelper.errors import HelperError
from installhelper.errors_catalog import actionable_error


class ReadmeService:
    """Locates and reads the primary README of a cloned repository."""

    SKIPPED_DIRS = {".git"}

    def __init__(self, logger):
        self.logger = logger

    def locate(self, repo_dir: str) -> str:
        for name in README_CANDIDATES:
            candidate = os.path.join(repo_dir, name)
            if os.path.isfile(candidate):
                return candidate

        found = self._search(repo_dir)
        if found is None:
            raise HelperError(
                actionable_error("readme_not_found", name=os.path.basename(repo_dir.rstrip(os.sep)))
            )
        return found

    def _search(self, repo_dir: str) -> Optional[str]:
        """Return the first ``readme*`` file in walk order.

        The order follows the filesystem and is not stable across platforms, so callers
        must not rely on which file wins when several match.
        """
        for current_root, dirs, files in os.walk(repo_dir):
            dirs[:] = [directory for directory in dirs if directory not in self.SKIPPED_DIRS]
            for file_name in files:
                if file_name.casefold().startswith(README_PREFIX):
                    return os.path.join(current_root, file_name)
        return None

    def read(self, path: str) -> str:
        self.logger.debug("Reading README from %s", path)
        try:
            with open(path, "r") as file_obj:
                return file_obj.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise HelperError(f"Could not read README file '{path}': {exc}") from exc

"""Repository acquisition service for InstallHelper."""

import os
from typing import Optional

from installhelper.errors import HelperError
from installhelper.errors_catalog import actionable_error
from installhelper.models import RepositoryReference


class RepositoryService:
    """Clones a repository with git and checks the expected directory exists."""

    def __init__(self, command_runner, logger, console, workdir: Optional[str] = None):
        self.command_runner = command_runner
        self.logger = logger
        self.console = console
        self.workdir = workdir or os.getcwd()

    def local_path(self, reference: RepositoryReference) -> str:
        return os.path.join(self.workdir, reference.local_name)

    def clone(self, url: str) -> RepositoryReference:
        reference = RepositoryReference.from_url(url)
        self.console.print(f"[blue]Cloning the repository from: {url}[/blue]")
        self.logger.info("Cloning %s into %s", url, self.workdir)

        # git decides the target directory itself; verification below catches a mismatch
        self.command_runner.run(["git", "clone", url], check=False, cwd=self.workdir)

        self.ensure_cloned(reference)
        return reference

    def ensure_cloned(self, reference: RepositoryReference):
        path = self.local_path(reference)
        if not os.path.isdir(path):
            raise HelperError(actionable_error("repository_not_found", name=reference.local_name))
        self.logger.debug("Repository directory present: %s", path)

import logging
import os
from typing import Callable, Optional

import requests
from rich.console import Console

from .constants import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_API_URL,
    DEFAULT_MODEL,
    INSTALL_SCRIPT_FILE,
    INSTALL_SYSTEM_PROMPT,
    INSTALL_USER_PROMPT,
    INSTRUCTIONS_FILE,
    INSTRUCTIONS_SYSTEM_PROMPT,
    INSTRUCTIONS_USER_PROMPT,
)
from .errors import EmptyCompletionError, HelperError
from .models import ChatCompletionRequest, RepositoryReference
from .services.artifacts import ArtifactService
from .services.command_runner import CommandRunner
from .services.completion import CompletionService
from .services.launcher import LauncherService
from .services.readme import ReadmeService
from .services.repository import RepositoryService
from .services.validation import ValidationService

console = Console()
logger = logging.getLogger("installhelper")


class InstallHelper:
    def __init__(
        self,
        api_key: Optional[str],
        api_key_env: str = DEFAULT_API_KEY_ENV,
        repo_url: Optional[str] = None,
        language: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        api_url: str = DEFAULT_API_URL,
        install_script_file: str = INSTALL_SCRIPT_FILE,
        instructions_file: str = INSTRUCTIONS_FILE,
        request_timeout: Optional[float] = None,
        allow_insecure_http: bool = False,
        no_open: bool = False,
        input_func: Optional[Callable[[str], str]] = None,
        requests_module=requests,
    ):
        self.api_key = api_key
        self.api_key_env = api_key_env
        self.repo_url = repo_url
        self.language = language
        self.model = model
        self.api_url = api_url
        self.no_open = no_open
        self.input_func = input_func or console.input

        self.cwd = os.getcwd()
        self.install_script_file = os.path.join(self.cwd, install_script_file)
        self.instructions_file = os.path.join(self.cwd, instructions_file)

        self.validation_service = ValidationService(allow_insecure_http=allow_insecure_http)
        self.command_runner = CommandRunner(logger=logger)
        self.repository_service = RepositoryService(
            command_runner=self.command_runner,
            logger=logger,
            console=console,
            workdir=self.cwd,
        )
        self.readme_service = ReadmeService(logger=logger)
        self.completion_service = CompletionService(
            api_url=api_url,
            api_key=api_key or "",
            logger=logger,
            requests_module=requests_module,
            timeout=request_timeout,
        )
        self.artifact_service = ArtifactService(
            logger=logger,
            console=console,
            command_runner=self.command_runner,
        )
        self.launcher_service = LauncherService(command_runner=self.command_runner, logger=logger)

    def check_credentials(self):
        self.validation_service.require_credential(self.api_key, self.api_key_env)
        self.validation_service.enforce_https_policy(self.api_url, "API endpoint", logger, console)

    def prompt_repository_url(self) -> str:
        console.print(
            "Welcome! This tool will clone a GitHub repository, generate and run an install "
            "script, and then provide simplified instructions in your desired language."
        )
        value = self.repo_url
        if value is None:
            value = self.input_func(
                "Please enter the GitHub repository URL "
                "(e.g., https://github.com/owner/repo.git): "
            )
        return self.validation_service.require_text(value, "empty_repository_url")

    def prompt_language(self) -> str:
        console.print("In which language would you like the simplified instructions?")
        value = self.language
        if value is None:
            value = self.input_func("Language (e.g. 'English', 'Spanish', 'French', 'German', etc.): ")
        return self.validation_service.require_text(value, "empty_language")

    def acquire_repository(self, url: str) -> RepositoryReference:
        return self.repository_service.clone(url)

    def load_readme(self, reference: RepositoryReference) -> str:
        readme_path = self.readme_service.locate(self.repository_service.local_path(reference))
        console.print(f"[green]Found README file at: {readme_path}[/green]")
        logger.info("Using README %s", readme_path)
        return self.readme_service.read(readme_path)

    def build_install_request(self, readme_text: str) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            system_prompt=INSTALL_SYSTEM_PROMPT,
            user_prompt=f"README content:\n{readme_text}\n\n{INSTALL_USER_PROMPT}",
        )

    def build_instructions_request(self, readme_text: str, language: str) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            system_prompt=INSTRUCTIONS_SYSTEM_PROMPT,
            user_prompt=(
                f"README content:\n{readme_text}\n\n"
                f"Language requested: {language}\n\n"
                f"{INSTRUCTIONS_USER_PROMPT}"
            ),
        )

    def _request_completion(self, request: ChatCompletionRequest, label: str) -> str:
        try:
            return self.completion_service.complete(request, label)
        except EmptyCompletionError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            console.print(f"Full response from {self.model} was:")
            console.print(exc.raw_response, markup=False, highlight=False, soft_wrap=True)
            raise

    def generate_install_script(self, readme_text: str):
        console.print(f"[blue]Requesting an installation Bash script from {self.model}. Please wait...[/blue]")
        script = self._request_completion(self.build_install_request(readme_text), "install script")

        self.artifact_service.write_script(self.install_script_file, script)
        # the script's own exit status does not change control flow
        self.artifact_service.execute_script(self.install_script_file, workdir=self.cwd)

    def generate_instructions(self, readme_text: str, language: str):
        console.print(
            f"[blue]Requesting simplified instructions from {self.model} in {language} as HTML. "
            "Please wait...[/blue]"
        )
        html = self._request_completion(
            self.build_instructions_request(readme_text, language),
            "simplified instructions",
        )

        self.artifact_service.write_text(self.instructions_file, html)
        self.open_instructions()

    def open_instructions(self):
        if self.no_open:
            console.print(f"Simplified instructions saved to {self.instructions_file}.")
            return

        console.print(f"[blue]Opening {self.instructions_file}...[/blue]")
        if not self.launcher_service.open(self.instructions_file):
            message = f"Could not open file automatically. Please open {self.instructions_file} manually."
            console.print(f"[yellow]{message}[/yellow]")
            logger.warning(message)

    def run(self) -> int:
        try:
            logger.info("Starting InstallHelper...")

            self.check_credentials()
            url = self.prompt_repository_url()
            reference = self.acquire_repository(url)
            readme_text = self.load_readme(reference)

            self.generate_install_script(readme_text)

            language = self.prompt_language()
            self.generate_instructions(readme_text, language)

            console.print("[bold green]All done! Thank you for using InstallHelper.[/bold green]")
            return 0

        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1
        except EmptyCompletionError as exc:
            logger.error(str(exc))
            return 1
        except HelperError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return 1
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {exc}")
            logger.exception("Unexpected error")
            return 1

import logging
import os

import click
from rich.logging import RichHandler

from .constants import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_API_URL,
    DEFAULT_CONFIG_FILE,
    DEFAULT_MODEL,
    INSTALL_SCRIPT_FILE,
    INSTRUCTIONS_FILE,
)
from .core import InstallHelper
from .errors import HelperError
from .services.config_loader import ConfigLoader


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option("--repo-url", required=False, help="Repository URL to clone (skips the prompt).")
@click.option(
    "--language",
    required=False,
    help="Language for the simplified instructions (skips the prompt).",
)
@click.option("--model", required=False, help=f"Model identifier (default: {DEFAULT_MODEL}).")
@click.option(
    "--api-url",
    required=False,
    help=f"Chat-completion endpoint (default: {DEFAULT_API_URL}).",
)
@click.option(
    "--api-key-env",
    required=False,
    help=f"Environment variable holding the API key (default: {DEFAULT_API_KEY_ENV}).",
)
@click.option(
    "--install-script-file",
    required=False,
    type=click.Path(),
    help=f"Where to write the generated install script (default: {INSTALL_SCRIPT_FILE}).",
)
@click.option(
    "--instructions-file",
    required=False,
    type=click.Path(),
    help=f"Where to write the simplified instructions (default: {INSTRUCTIONS_FILE}).",
)
@click.option(
    "--request-timeout",
    required=False,
    type=float,
    default=None,
    help="HTTP timeout in seconds for model requests. No timeout by default.",
)
@click.option(
    "--allow-insecure-http",
    is_flag=True,
    default=None,
    help="Allow an HTTP API endpoint (insecure). By default only HTTPS is accepted.",
)
@click.option(
    "--no-open",
    is_flag=True,
    default=None,
    help="Do not open the instructions file when it is ready.",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
def main(
    config,
    repo_url,
    language,
    model,
    api_url,
    api_key_env,
    install_script_file,
    instructions_file,
    request_timeout,
    allow_insecure_http,
    no_open,
    verbose,
    log_file,
):
    """Clone a repository, install it from its README and explain it in your language."""
    logger = logging.getLogger("installhelper")

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except HelperError as exc:
        raise click.ClickException(str(exc)) from exc

    repo_url = _resolve_option(repo_url, config_values, "repo_url")
    language = _resolve_option(language, config_values, "language")
    if repo_url is not None:
        repo_url = str(repo_url)
    if language is not None:
        language = str(language)
    model = str(_resolve_option(model, config_values, "model", default=DEFAULT_MODEL))
    api_url = str(_resolve_option(api_url, config_values, "api_url", default=DEFAULT_API_URL))
    api_key_env = str(
        _resolve_option(api_key_env, config_values, "api_key_env", default=DEFAULT_API_KEY_ENV)
    )
    install_script_file = str(
        _resolve_option(
            install_script_file,
            config_values,
            "install_script_file",
            default=INSTALL_SCRIPT_FILE,
        )
    )
    instructions_file = str(
        _resolve_option(instructions_file, config_values, "instructions_file", default=INSTRUCTIONS_FILE)
    )
    request_timeout = _resolve_option(request_timeout, config_values, "request_timeout")
    if request_timeout is not None:
        request_timeout = float(request_timeout)
    allow_insecure_http = bool(
        _resolve_option(allow_insecure_http, config_values, "allow_insecure_http", default=False)
    )
    no_open = bool(_resolve_option(no_open, config_values, "no_open", default=False))
    verbose = bool(_resolve_option(verbose, config_values, "verbose", default=False))
    log_file = _resolve_option(log_file, config_values, "log_file")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    helper = InstallHelper(
        api_key=os.environ.get(api_key_env),
        api_key_env=api_key_env,
        repo_url=repo_url,
        language=language,
        model=model,
        api_url=api_url,
        install_script_file=install_script_file,
        instructions_file=instructions_file,
        request_timeout=request_timeout,
        allow_insecure_http=allow_insecure_http,
        no_open=no_open,
    )

    raise SystemExit(helper.run())


if __name__ == "__main__":
    main()

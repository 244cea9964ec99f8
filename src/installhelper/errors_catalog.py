"""Actionable error catalog for InstallHelper."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "missing_credential": {
        "what": "No API key found in environment variable {env_var}.",
        "next": "Export your key first, for example: export {env_var}='sk-...'",
    },
    "empty_repository_url": {
        "what": "No repository URL provided.",
        "next": "Run again and enter a URL such as https://github.com/owner/repo.git.",
    },
    "empty_language": {
        "what": "No language entered.",
        "next": "Run again and enter a language such as English, Spanish or French.",
    },
    "repository_not_found": {
        "what": "Repository directory '{name}' not found. Clone may have failed.",
        "next": "Check the URL and the git output above, then retry.",
    },
    "readme_not_found": {
        "what": "No README file found in the repository '{name}'.",
        "next": "Make sure the repository ships a README before retrying.",
    },
    "completion_transport_failed": {
        "what": "Request for {label} failed: {error}",
        "next": "Check your network connection and the API endpoint, then retry.",
    },
    "empty_completion": {
        "what": "No {label} was returned by the model or an error occurred.",
        "next": "Inspect the full response printed above.",
    },
    "insecure_http": {
        "what": "{label} uses insecure HTTP.",
        "next": "Switch to HTTPS or use `--allow-insecure-http` only for trusted endpoints.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"

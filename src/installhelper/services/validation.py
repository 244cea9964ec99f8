"""Input and URL validation helpers for InstallHelper."""

from typing import Optional
from urllib.parse import urlparse

from installhelper.errors import HelperError
from installhelper.errors_catalog import actionable_error


class ValidationService:
    """Normalises user input and enforces the endpoint protocol policy."""

    def __init__(self, allow_insecure_http: bool = False):
        self.allow_insecure_http = allow_insecure_http

    def is_url(self, location: str) -> bool:
        scheme = urlparse(location).scheme.lower()
        return scheme in {"http", "https"}

    def require_text(self, value: Optional[str], error_code: str) -> str:
        clean_value = (value or "").strip()
        if not clean_value:
            raise HelperError(actionable_error(error_code))
        return clean_value

    def require_credential(self, api_key: Optional[str], env_var: str) -> str:
        if not api_key:
            raise HelperError(actionable_error("missing_credential", env_var=env_var))
        return api_key

    def enforce_https_policy(self, location: str, label: str, logger, console):
        if not self.is_url(location):
            raise HelperError(f"{label} must be an HTTP(S) URL: {location}")

        scheme = urlparse(location).scheme.lower()
        if scheme == "http" and not self.allow_insecure_http:
            raise HelperError(actionable_error("insecure_http", label=label))

        if scheme == "http" and self.allow_insecure_http:
            logger.warning("Insecure HTTP enabled for %s: %s", label, location)
            console.print(
                f"[yellow]Warning:[/yellow] Using insecure HTTP for {label}. "
                "Prefer HTTPS whenever possible."
            )

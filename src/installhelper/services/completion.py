"""Chat-completion client for InstallHelper."""

import json
from typing import Any, Optional

import requests

from installhelper.constants import NULL_SENTINEL
from installhelper.errors import EmptyCompletionError, HelperError
from installhelper.errors_catalog import actionable_error
from installhelper.models import ChatCompletionRequest


class CompletionService:
    """Sends chat requests to an OpenAI-compatible endpoint and extracts the reply text."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        logger,
        requests_module=requests,
        timeout: Optional[float] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.logger = logger
        self.requests = requests_module
        self.timeout = timeout

    def build_headers(self):
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def send(self, request: ChatCompletionRequest, label: str) -> str:
        """POST the request and return the raw response body.

        The status code is only logged: error bodies are handed to extraction like any
        other reply, so the raw text ends up in front of the user.
        """
        self.logger.debug("Sending %s request to %s with model %s", label, self.api_url, request.model)
        try:
            response = self.requests.post(
                self.api_url,
                data=request.to_json().encode("utf-8"),
                headers=self.build_headers(),
                timeout=self.timeout,
            )
        except self.requests.RequestException as exc:
            raise HelperError(
                actionable_error("completion_transport_failed", label=label, error=str(exc))
            ) from exc

        self.logger.debug("Received HTTP %s for %s request", response.status_code, label)
        return response.text

    def extract_content(self, raw_response: str) -> Optional[str]:
        try:
            data: Any = json.loads(raw_response)
        except ValueError:
            return None

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None

        if not isinstance(content, str) or not content or content == NULL_SENTINEL:
            return None
        return content

    def complete(self, request: ChatCompletionRequest, label: str) -> str:
        raw_response = self.send(request, label)
        content = self.extract_content(raw_response)
        if content is None:
            raise EmptyCompletionError(
                actionable_error("empty_completion", label=label),
                raw_response=raw_response,
            )
        return content

"""Shared domain models for InstallHelper."""

import json
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RepositoryReference:
    """A repository URL and the directory name git is expected to clone it into."""

    url: str
    local_name: str

    @classmethod
    def from_url(cls, url: str) -> "RepositoryReference":
        return cls(url=url, local_name=derive_local_name(url))


def derive_local_name(url: str) -> str:
    """Mirror ``basename URL .git``."""
    trimmed = url.rstrip("/")
    name = trimmed.rsplit("/", 1)[-1] if trimmed else url
    if name.endswith(".git") and name != ".git":
        name = name[: -len(".git")]
    return name


@dataclass(frozen=True)
class ChatCompletionRequest:
    """A system + user chat request for one model."""

    model: str
    system_prompt: str
    user_prompt: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": self.user_prompt},
            ],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_payload())


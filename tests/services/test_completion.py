import json

import pytest

from installhelper.errors import EmptyCompletionError, HelperError
from installhelper.models import ChatCompletionRequest
from installhelper.services.completion import CompletionService


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code


class FakeRequestsModule:
    class RequestException(Exception):
        pass

    def __init__(self, text: str = "", status_code: int = 200, error=None):
        self.text = text
        self.status_code = status_code
        self.error = error
        self.calls = []

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text, self.status_code)


def _reply(content) -> str:
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})


def _service(requests_module, timeout=None) -> CompletionService:
    return CompletionService(
        api_url="https://api.example.com/v1/chat/completions",
        api_key="sk-test",
        logger=DummyLogger(),
        requests_module=requests_module,
        timeout=timeout,
    )


def test_payload_survives_quotes_backslashes_and_newlines():
    readme = 'Run "make install"\nPaths like C:\\tools\\bin\n\ttabbed \u00e9t\u00e9 \U0001f680 \x07'
    request = ChatCompletionRequest(
        model="gpt-4o",
        system_prompt="system",
        user_prompt=f"README content:\n{readme}\n\nDo it.",
    )
    requests_module = FakeRequestsModule(text=_reply("echo ok"))

    _service(requests_module).complete(request, "install script")

    sent = json.loads(requests_module.calls[0]["data"].decode("utf-8"))
    assert sent == {
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "system"},
            {"role": "user", "content": f"README content:\n{readme}\n\nDo it."},
        ],
    }


def test_request_uses_bearer_auth_and_json_content_type():
    requests_module = FakeRequestsModule(text=_reply("echo ok"))
    request = ChatCompletionRequest(model="gpt-4o", system_prompt="s", user_prompt="u")

    _service(requests_module, timeout=12.5).complete(request, "install script")

    call = requests_module.calls[0]
    assert call["url"] == "https://api.example.com/v1/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer sk-test"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] == 12.5


def test_complete_returns_text_verbatim():
    script = "#!/bin/bash\nset -e\npip install widget\n"
    requests_module = FakeRequestsModule(text=_reply(script))
    request = ChatCompletionRequest(model="gpt-4o", system_prompt="s", user_prompt="u")

    content = _service(requests_module).complete(request, "install script")

    assert content == script


@pytest.mark.parametrize(
    "raw",
    [
        _reply(None),
        _reply(""),
        _reply("null"),
        json.dumps({"choices": []}),
        json.dumps({"error": {"message": "Incorrect API key provided", "type": "invalid_request_error"}}),
        json.dumps([1, 2, 3]),
        "<html>Bad Gateway</html>",
        "",
    ],
)
def test_extract_content_treats_missing_text_as_empty(raw):
    assert _service(FakeRequestsModule()).extract_content(raw) is None


def test_empty_completion_carries_raw_response():
    raw = json.dumps({"error": {"message": "Incorrect API key provided"}})
    requests_module = FakeRequestsModule(text=raw, status_code=401)
    request = ChatCompletionRequest(model="gpt-4o", system_prompt="s", user_prompt="u")

    with pytest.raises(EmptyCompletionError) as exc_info:
        _service(requests_module).complete(request, "install script")

    assert exc_info.value.raw_response == raw
    assert "No install script was returned" in str(exc_info.value)


def test_transport_failure_raises_helper_error():
    requests_module = FakeRequestsModule()
    requests_module.error = requests_module.RequestException("connection refused")
    request = ChatCompletionRequest(model="gpt-4o", system_prompt="s", user_prompt="u")

    with pytest.raises(HelperError, match="connection refused"):
        _service(requests_module).complete(request, "simplified instructions")

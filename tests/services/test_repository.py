import subprocess

import pytest

from installhelper.errors import HelperError
from installhelper.models import RepositoryReference, derive_local_name
from installhelper.services.repository import RepositoryService


class DummyLogger:
    def info(self, *_args, **_kwargs):
        return None

    def debug(self, *_args, **_kwargs):
        return None


class DummyConsole:
    def print(self, *_args, **_kwargs):
        return None


class FakeGitRunner:
    def __init__(self, create_dir=None, returncode=0):
        self.create_dir = create_dir
        self.returncode = returncode
        self.calls = []

    def run(self, cmd, check=True, capture_output=False, timeout=None, cwd=None):
        self.calls.append({"cmd": cmd, "check": check, "cwd": cwd})
        if self.create_dir is not None:
            self.create_dir.mkdir()
        return subprocess.CompletedProcess(cmd, self.returncode)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://github.com/acme/widget.git", "widget"),
        ("https://github.com/acme/widget", "widget"),
        ("https://github.com/acme/widget.git/", "widget"),
        ("git@github.com:acme/widget.git", "widget"),
        ("https://example.com/repos/my.project.git", "my.project"),
        ("https://example.com/.git", ".git"),
    ],
)
def test_derive_local_name_follows_basename_semantics(url, expected):
    assert derive_local_name(url) == expected


def test_clone_runs_git_and_returns_reference(tmp_path):
    runner = FakeGitRunner(create_dir=tmp_path / "widget")
    service = RepositoryService(
        command_runner=runner,
        logger=DummyLogger(),
        console=DummyConsole(),
        workdir=str(tmp_path),
    )

    reference = service.clone("https://github.com/acme/widget.git")

    assert reference == RepositoryReference(url="https://github.com/acme/widget.git", local_name="widget")
    assert runner.calls == [
        {"cmd": ["git", "clone", "https://github.com/acme/widget.git"], "check": False, "cwd": str(tmp_path)}
    ]
    assert service.local_path(reference) == str(tmp_path / "widget")


def test_clone_fails_when_directory_is_missing(tmp_path):
    runner = FakeGitRunner(returncode=128)
    service = RepositoryService(
        command_runner=runner,
        logger=DummyLogger(),
        console=DummyConsole(),
        workdir=str(tmp_path),
    )

    with pytest.raises(HelperError, match="Repository directory 'widget' not found"):
        service.clone("https://github.com/acme/widget.git")


def test_clone_fails_when_git_picks_another_directory(tmp_path):
    runner = FakeGitRunner(create_dir=tmp_path / "other-name")
    service = RepositoryService(
        command_runner=runner,
        logger=DummyLogger(),
        console=DummyConsole(),
        workdir=str(tmp_path),
    )

    with pytest.raises(HelperError, match="not found"):
        service.clone("https://github.com/acme/widget.git")

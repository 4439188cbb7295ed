"""Shared fixtures: a scripted terminal and a Redis store backed by fakeredis."""

from typing import Iterable

import fakeredis
import pytest

from core.settings import reload_settings
from core.storage import RedisStore


class ScriptedTerminal:
    """Terminal double replaying typed lines and confirmation answers in order."""

    def __init__(self, answers: Iterable[str] = (), confirms: Iterable[bool] = ()) -> None:
        self.answers = list(answers)
        self.confirms = list(confirms)
        self.prompts: list[str] = []
        self.output: list[str] = []
        self.bold: list[str] = []
        self.clears = 0

    def print(self, text: str = "") -> None:
        self.output.append(text)

    def print_bold(self, text: str) -> None:
        self.bold.append(text)

    def clear(self) -> None:
        self.clears += 1

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.answers.pop(0)

    def read_confirm(self, prompt, true_tokens, false_tokens) -> bool:
        self.prompts.append(prompt)
        if not self.confirms:
            raise AssertionError(f"Unexpected confirmation: {prompt!r}")
        return self.confirms.pop(0)


@pytest.fixture
def make_terminal():
    return ScriptedTerminal


@pytest.fixture
def redis_client() -> fakeredis.FakeRedis:
    """Isolated in-memory Redis, one server per test."""
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def store(redis_client: fakeredis.FakeRedis) -> RedisStore:
    return RedisStore(redis_client)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Ensure clean settings cache for each test."""
    reload_settings()
    yield
    reload_settings()

"""Tests for onboarding.engine."""

from unittest.mock import MagicMock

from onboarding.engine import Question, ask, prompt_until_valid
from onboarding.messages import ENGLISH
from onboarding.state import SessionContext
from onboarding.validators import is_non_empty_text, is_positive_integer


def _name_question() -> Question:
    return Question(
        key="user_name",
        message="Name: ",
        validator=is_non_empty_text,
        announce=lambda v: f"Your name is: {v}",
    )


class TestPromptUntilValid:
    """prompt_until_valid loops on invalid input with the fixed error message."""

    def test_returns_first_valid_answer(self, make_terminal) -> None:
        terminal = make_terminal(["Alice"])
        assert prompt_until_valid(terminal, "Name: ", is_non_empty_text, "err") == "Alice"
        assert terminal.prompts == ["Name: "]
        assert terminal.output == []

    def test_reprompts_after_each_invalid_answer(self, make_terminal) -> None:
        terminal = make_terminal(["", "42", "  Bob  "])
        answer = prompt_until_valid(terminal, "Name: ", is_non_empty_text, ENGLISH.error)
        assert answer == "Bob"
        assert terminal.prompts == ["Name: "] * 3
        assert terminal.output == [ENGLISH.error, ENGLISH.error]

    def test_no_attempt_limit(self, make_terminal) -> None:
        terminal = make_terminal(["x"] * 50 + ["7"])
        assert prompt_until_valid(terminal, "Count: ", is_positive_integer, "err") == "7"
        assert len(terminal.prompts) == 51


class TestAsk:
    """ask() resumes from storage and persists only validated answers."""

    def test_ephemeral_prompts_and_returns(self, make_terminal) -> None:
        terminal = make_terminal(["Jean"])
        context = SessionContext(terminal=terminal)
        assert ask(context, _name_question()) == "Jean"

    def test_persists_valid_answer_only(self, make_terminal, store) -> None:
        terminal = make_terminal(["", "123", "Jean"])
        context = SessionContext(terminal=terminal, store=store)
        assert ask(context, _name_question()) == "Jean"
        assert store.get_scalar("user_name") == "Jean"

    def test_invalid_answers_are_never_written(self, make_terminal) -> None:
        terminal = make_terminal(["42", "Jean"])
        fake_store = MagicMock()
        fake_store.get_scalar.return_value = ""
        context = SessionContext(terminal=terminal, store=fake_store)
        ask(context, _name_question())
        fake_store.set_scalar.assert_called_once_with("user_name", "Jean")

    def test_reuses_stored_answer_without_prompting(self, make_terminal, store) -> None:
        store.set_scalar("user_name", "Marie")
        terminal = make_terminal([])
        context = SessionContext(terminal=terminal, store=store)
        assert ask(context, _name_question()) == "Marie"
        assert terminal.prompts == []
        assert terminal.output == ["Your name is: Marie"]

    def test_invalid_stored_answer_is_asked_again(self, make_terminal, store) -> None:
        store.set_scalar("user_name", "404")
        terminal = make_terminal(["Marie"])
        context = SessionContext(terminal=terminal, store=store)
        assert ask(context, _name_question()) == "Marie"
        assert store.get_scalar("user_name") == "Marie"

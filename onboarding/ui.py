"""Shared UI styling and the questionary-backed terminal for the onboarding wizard."""

from typing import Iterable

import questionary
from prompt_toolkit.shortcuts import clear as clear_screen
from questionary import Style

STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
    ]
)


def _answer(question: questionary.Question) -> str:
    """Ask and return the answer. questionary returns None on Ctrl+C."""
    value = question.ask()
    if value is None:
        raise KeyboardInterrupt
    return value


class QuestionaryTerminal:
    """Terminal implementation over questionary prompts."""

    def print(self, text: str = "") -> None:
        questionary.print(text)

    def print_bold(self, text: str) -> None:
        questionary.print(text, style="bold")

    def clear(self) -> None:
        clear_screen()

    def read_line(self, prompt: str) -> str:
        return _answer(questionary.text(prompt, qmark="", style=STYLE))

    def read_confirm(
        self,
        prompt: str,
        true_tokens: Iterable[str],
        false_tokens: Iterable[str],
    ) -> bool:
        yes = tuple(t.lower() for t in true_tokens)
        no = tuple(t.lower() for t in false_tokens)
        hint = f"({'/'.join(yes + no)})"

        def _validate(text: str) -> bool | str:
            return text.strip().lower() in yes + no or hint

        answer = _answer(questionary.text(prompt, qmark="", validate=_validate, style=STYLE))
        return answer.strip().lower() in yes

"""Question engine: prompt, validate, re-prompt until valid, persist on success.

In persistent mode a question whose answer is already stored is not asked
again; the stored value is announced and reused. That is how an interrupted
session resumes.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from core.terminal import Terminal
from onboarding.state import SessionContext

logger = logging.getLogger(__name__)

Validator = Callable[[str], bool]


@dataclass(frozen=True)
class Question:
    """One scalar question."""

    key: str
    message: str
    validator: Validator
    # Renders the line shown when a stored answer is reused.
    announce: Callable[[str], str] | None = None


def prompt_until_valid(
    terminal: Terminal,
    message: str,
    validator: Validator,
    error_message: str,
    key: str = "",
) -> str:
    """Read lines until one passes validator. Returns it stripped.

    There is no attempt limit; the operator is asked until a valid answer comes.
    """
    while True:
        answer = terminal.read_line(message).strip()
        if validator(answer):
            return answer
        logger.debug("Rejected answer for %s", key or message.strip())
        terminal.print(error_message)


def stored_answer(context: SessionContext, question: Question) -> str:
    """Return the valid stored answer for question, or "" when it must be asked."""
    if context.store is None:
        return ""
    stored = context.store.get_scalar(question.key)
    if not stored:
        return ""
    if not question.validator(stored):
        logger.warning("Ignoring invalid stored value for %s", question.key)
        return ""
    return stored


def ask(context: SessionContext, question: Question) -> str:
    """Return a validated answer to question, reusing the stored one if any."""
    stored = stored_answer(context, question)
    if stored:
        logger.info("Resuming %s from storage", question.key)
        if question.announce is not None:
            context.terminal.print(question.announce(stored))
        return stored

    answer = prompt_until_valid(
        context.terminal,
        question.message,
        question.validator,
        context.messages.error,
        key=question.key,
    )
    if context.store is not None:
        context.store.set_scalar(question.key, answer)
    return answer

"""Collection driver: ask the same question N times to build an ordered list."""

import logging
from dataclasses import dataclass
from typing import Callable

from onboarding.engine import Validator, prompt_until_valid
from onboarding.messages import Forms
from onboarding.state import SessionContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListQuestion:
    """A question repeated once per list item."""

    key: str
    # (first item, other items) prompt templates, see Messages.for_ordinal
    message: Forms
    validator: Validator
    # Template with {ordinal} and {value}, shown for items reused from storage
    announce: str
    display: Callable[[str], str] = str


def _reusable_items(context: SessionContext, question: ListQuestion, target: int) -> list[str]:
    """Stored items still usable for this target.

    Items past the target, and everything from the first invalid item on,
    are dropped from the store so that later appends line up.
    """
    store = context.store
    if store is None:
        return []
    stored = store.read_list(question.key)
    kept: list[str] = []
    for item in stored[:target]:
        if not question.validator(item):
            logger.warning("Invalid stored item in %s at position %d", question.key, len(kept) + 1)
            break
        kept.append(item)
    if len(kept) < len(stored):
        logger.info(
            "Trimming %s from %d to %d stored items (target %d)",
            question.key, len(stored), len(kept), target,
        )
        if kept:
            store.trim_list(question.key, 0, len(kept) - 1)
        else:
            store.delete(question.key)
    return kept


def collect(context: SessionContext, question: ListQuestion, target: int) -> list[str]:
    """Return exactly target validated answers, in the order they were given."""
    if target < 1:
        raise ValueError(f"target must be a positive count, got {target}")

    messages = context.messages
    items = _reusable_items(context, question, target)
    if items:
        logger.info("Resuming %s with %d/%d stored items", question.key, len(items), target)
        for n, value in enumerate(items, start=1):
            context.terminal.print(
                question.announce.format(ordinal=messages.ordinal(n), value=question.display(value))
            )

    while len(items) < target:
        n = len(items) + 1
        answer = prompt_until_valid(
            context.terminal,
            messages.for_ordinal(question.message, n),
            question.validator,
            messages.error,
            key=f"{question.key}[{n}]",
        )
        if context.store is not None:
            context.store.append_to_list(question.key, answer)
        items.append(answer)

    return items

"""Recap and confirmation step."""

import logging

from onboarding.recap import render_recap
from onboarding.state import OnboardingProfile, SessionContext

logger = logging.getLogger(__name__)


def run_confirm_step(context: SessionContext, profile: OnboardingProfile) -> bool:
    """Show the recap and ask for confirmation. Returns True when accepted.

    In persistent mode the store is flushed as soon as the operator answers,
    whatever the answer: a rejected recap restarts from an empty store.
    Raises ValueError if profile is missing answers or a list length does
    not match its count.
    """
    if not profile.is_complete():
        raise ValueError("Recap requested for an incomplete profile")

    m = context.messages
    terminal = context.terminal

    terminal.clear()
    terminal.print_bold(m.recap_title)
    for line in render_recap(profile, m):
        terminal.print(line)
    terminal.print()

    confirmed = terminal.read_confirm(m.confirm_prompt, m.yes_tokens, m.no_tokens)
    logger.info("Recap %s", "confirmed" if confirmed else "rejected")

    if context.store is not None:
        context.store.flush_all()
        logger.info("Answer store flushed")

    return confirmed

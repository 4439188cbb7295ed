"""Onboarding wizard orchestration."""

import logging
from dataclasses import dataclass

from core.storage import RedisStore
from core.terminal import Terminal
from onboarding.messages import ENGLISH, Messages
from onboarding.state import OnboardingProfile, SessionContext
from onboarding.steps.company_step import run_company_step
from onboarding.steps.confirm_step import run_confirm_step
from onboarding.steps.fleet_step import run_fleet_step

logger = logging.getLogger(__name__)


@dataclass
class WizardResult:
    """Result of running the wizard."""

    success: bool
    profile: OnboardingProfile
    sessions: int  # number of runs, 1 + rejected recaps


def run_session(context: SessionContext) -> tuple[OnboardingProfile, bool]:
    """Run every step once. Returns the profile and whether the recap was accepted."""
    profile = OnboardingProfile()

    context.terminal.clear()
    context.terminal.print_bold(context.messages.welcome)

    run_company_step(context, profile)
    run_fleet_step(context, profile)
    return profile, run_confirm_step(context, profile)


def run_wizard(
    terminal: Terminal,
    store: RedisStore | None = None,
    messages: Messages = ENGLISH,
) -> WizardResult:
    """Run sessions until the operator accepts the recap.

    With a store, answers are persisted as they are validated and reused on
    the next run; without one, each session starts from scratch.
    """
    context = SessionContext(terminal=terminal, store=store, messages=messages)
    mode = "persistent" if context.persistent else "ephemeral"

    sessions = 0
    while True:
        sessions += 1
        logger.info("Starting onboarding session %d (%s mode)", sessions, mode)
        profile, confirmed = run_session(context)
        if confirmed:
            return WizardResult(success=True, profile=profile, sessions=sessions)
        logger.info("Recap rejected, restarting the wizard")

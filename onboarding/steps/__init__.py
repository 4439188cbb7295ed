"""Onboarding wizard steps, run in order by the wizard."""

from onboarding.steps.company_step import run_company_step
from onboarding.steps.confirm_step import run_confirm_step
from onboarding.steps.fleet_step import run_fleet_step

__all__ = ["run_company_step", "run_fleet_step", "run_confirm_step"]

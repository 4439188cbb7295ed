"""Onboarding wizard collecting a Trusk company profile."""

from onboarding.constants import (
    ONBOARDING_CONFIG_ERROR,
    ONBOARDING_QUIT,
    ONBOARDING_STORAGE_ERROR,
    ONBOARDING_SUCCESS,
)

__all__ = [
    "ONBOARDING_SUCCESS",
    "ONBOARDING_QUIT",
    "ONBOARDING_STORAGE_ERROR",
    "ONBOARDING_CONFIG_ERROR",
]

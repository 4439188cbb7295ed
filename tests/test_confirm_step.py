"""Tests for onboarding.steps.confirm_step."""

from unittest.mock import MagicMock

import pytest

from onboarding.state import OnboardingProfile, SessionContext
from onboarding.steps.confirm_step import run_confirm_step


def _profile(**overrides) -> OnboardingProfile:
    values = dict(
        user_name="Jean",
        company_name="Trusk",
        employee_count=1,
        employee_names=["Marie"],
        truck_count=1,
        truck_volumes=["10"],
        truck_type="Van",
    )
    values.update(overrides)
    return OnboardingProfile(**values)


def test_complete_profile_is_shown_and_confirmed(make_terminal) -> None:
    terminal = make_terminal(confirms=[True])
    assert run_confirm_step(SessionContext(terminal=terminal), _profile()) is True
    assert "- Marie" in terminal.output


@pytest.mark.parametrize(
    "overrides",
    [
        {"employee_count": 2},
        {"truck_volumes": ["10", "20"]},
        {"truck_type": ""},
    ],
)
def test_list_length_mismatch_stops_before_recap(make_terminal, overrides) -> None:
    """No recap, no confirmation and no flush for an inconsistent profile."""
    terminal = make_terminal(confirms=[True])
    fake_store = MagicMock()

    with pytest.raises(ValueError, match="incomplete"):
        run_confirm_step(SessionContext(terminal=terminal, store=fake_store), _profile(**overrides))

    assert terminal.output == []
    assert terminal.prompts == []
    fake_store.flush_all.assert_not_called()

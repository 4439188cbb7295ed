"""Fleet step: truck count, one volume per truck, truck type."""

from onboarding.collection import ListQuestion, collect
from onboarding.constants import KEY_TRUCK_COUNT, KEY_TRUCK_TYPE, KEY_TRUCK_VOLUMES
from onboarding.engine import Question, ask
from onboarding.messages import pick
from onboarding.state import OnboardingProfile, SessionContext
from onboarding.validators import (
    format_volume,
    is_non_empty_text,
    is_positive_integer,
    is_positive_volume,
    to_positive_integer,
)


def run_fleet_step(context: SessionContext, profile: OnboardingProfile) -> None:
    """Fill the truck fields of profile."""
    m = context.messages

    profile.truck_count = to_positive_integer(
        ask(
            context,
            Question(
                key=KEY_TRUCK_COUNT,
                message=m.ask_truck_count,
                validator=is_positive_integer,
                announce=lambda v: pick(m.recap_truck_count, to_positive_integer(v)).format(
                    count=to_positive_integer(v)
                ),
            ),
        )
    )
    profile.truck_volumes = collect(
        context,
        ListQuestion(
            key=KEY_TRUCK_VOLUMES,
            message=m.ask_truck_volume,
            validator=is_positive_volume,
            announce=m.resumed_volume,
            display=format_volume,
        ),
        profile.truck_count,
    )
    profile.truck_type = ask(
        context,
        Question(
            key=KEY_TRUCK_TYPE,
            message=m.ask_truck_type,
            validator=is_non_empty_text,
            announce=lambda v: pick(m.recap_truck_type, profile.truck_count).format(value=v),
        ),
    )

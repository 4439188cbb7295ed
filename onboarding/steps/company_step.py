"""Company step: user name, company name, employee count and employee names."""

from onboarding.collection import ListQuestion, collect
from onboarding.constants import (
    KEY_COMPANY_NAME,
    KEY_EMPLOYEE_COUNT,
    KEY_EMPLOYEE_NAMES,
    KEY_USER_NAME,
)
from onboarding.engine import Question, ask
from onboarding.messages import pick
from onboarding.state import OnboardingProfile, SessionContext
from onboarding.validators import is_non_empty_text, is_positive_integer, to_positive_integer


def run_company_step(context: SessionContext, profile: OnboardingProfile) -> None:
    """Fill the user and company fields of profile."""
    m = context.messages

    profile.user_name = ask(
        context,
        Question(
            key=KEY_USER_NAME,
            message=m.ask_user_name,
            validator=is_non_empty_text,
            announce=lambda v: m.recap_user_name.format(value=v),
        ),
    )
    profile.company_name = ask(
        context,
        Question(
            key=KEY_COMPANY_NAME,
            message=m.ask_company_name,
            validator=is_non_empty_text,
            announce=lambda v: m.recap_company_name.format(value=v),
        ),
    )
    profile.employee_count = to_positive_integer(
        ask(
            context,
            Question(
                key=KEY_EMPLOYEE_COUNT,
                message=m.ask_employee_count,
                validator=is_positive_integer,
                announce=lambda v: pick(m.recap_employee_count, to_positive_integer(v)).format(
                    count=to_positive_integer(v)
                ),
            ),
        )
    )
    profile.employee_names = collect(
        context,
        ListQuestion(
            key=KEY_EMPLOYEE_NAMES,
            message=m.ask_employee_name,
            validator=is_non_empty_text,
            announce=m.resumed_employee,
        ),
        profile.employee_count,
    )

"""Recap text shown before the final confirmation."""

from onboarding.messages import Messages, pick
from onboarding.state import OnboardingProfile
from onboarding.validators import format_volume


def render_recap(profile: OnboardingProfile, messages: Messages) -> list[str]:
    """Return the recap lines (without the title) for profile."""
    employees = profile.employee_count
    trucks = profile.truck_count

    lines = [
        messages.recap_user_name.format(value=profile.user_name),
        messages.recap_company_name.format(value=profile.company_name),
        pick(messages.recap_employee_count, employees).format(count=employees),
        pick(messages.recap_employees_header, employees),
    ]
    lines.extend(messages.recap_item.format(value=name) for name in profile.employee_names)
    lines.append(pick(messages.recap_truck_count, trucks).format(count=trucks))
    lines.append(pick(messages.recap_volumes_header, trucks))
    lines.extend(
        messages.recap_volume_item.format(value=format_volume(volume))
        for volume in profile.truck_volumes
    )
    lines.append(pick(messages.recap_truck_type, trucks).format(value=profile.truck_type))
    return lines

"""Session state: the collected profile and the context threaded through the steps."""

from dataclasses import dataclass, field

from core.storage import RedisStore
from core.terminal import Terminal
from onboarding.messages import ENGLISH, Messages


@dataclass
class OnboardingProfile:
    """Answers collected during one wizard session."""

    user_name: str = ""
    company_name: str = ""
    employee_count: int = 0
    employee_names: list[str] = field(default_factory=list)
    truck_count: int = 0
    truck_volumes: list[str] = field(default_factory=list)
    truck_type: str = ""

    def is_complete(self) -> bool:
        """All fields answered and list lengths match their counts."""
        return (
            bool(self.user_name and self.company_name and self.truck_type)
            and self.employee_count > 0
            and len(self.employee_names) == self.employee_count
            and self.truck_count > 0
            and len(self.truck_volumes) == self.truck_count
        )


@dataclass
class SessionContext:
    """Collaborators for one wizard run. store is None in ephemeral mode."""

    terminal: Terminal
    store: RedisStore | None = None
    messages: Messages = ENGLISH

    @property
    def persistent(self) -> bool:
        return self.store is not None

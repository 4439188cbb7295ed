"""Prompt, recap and error texts per locale.

Texts that depend on a count or an ordinal are (singular, plural) or
(first, other) pairs; `pick` and `Messages.for_ordinal` choose between them.
"""

from dataclasses import dataclass
from typing import Callable

Forms = tuple[str, str]


def pick(forms: Forms, count: int) -> str:
    """Singular form for count <= 1, plural otherwise."""
    return forms[1] if count > 1 else forms[0]


def english_ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def french_ordinal(n: int) -> str:
    return f"{n} er" if n == 1 else f"{n} ème"


@dataclass(frozen=True)
class Messages:
    """All user-facing texts of one locale."""

    locale: str
    ordinal: Callable[[int], str]

    welcome: str
    error: str
    cancelled: str
    storage_unavailable: str

    ask_user_name: str
    ask_company_name: str
    ask_employee_count: str
    ask_employee_name: Forms
    ask_truck_count: str
    ask_truck_volume: Forms
    ask_truck_type: str

    recap_title: str
    recap_user_name: str
    recap_company_name: str
    recap_employee_count: Forms
    recap_employees_header: Forms
    recap_truck_count: Forms
    recap_volumes_header: Forms
    recap_truck_type: Forms
    recap_item: str
    recap_volume_item: str

    resumed_employee: str
    resumed_volume: str

    confirm_prompt: str
    yes_tokens: tuple[str, ...]
    no_tokens: tuple[str, ...]

    def for_ordinal(self, forms: Forms, n: int) -> str:
        """Format a (first, other) pair for the n-th item (1-based)."""
        template = forms[0] if n == 1 else forms[1]
        return template.format(n=n, ordinal=self.ordinal(n))


ENGLISH = Messages(
    locale="en",
    ordinal=english_ordinal,
    welcome="Hello,\nwelcome to the Trusk account setup utility\n",
    error="\nI didn't understand your answer, please try again\n",
    cancelled="Setup cancelled.",
    storage_unavailable="Cannot reach the answer store: {error}",
    ask_user_name="Please enter your name on the Trusk platform: ",
    ask_company_name="Please enter your company name: ",
    ask_employee_count="Please enter the number of employees in your company: ",
    ask_employee_name=(
        "Please enter the name of your {ordinal} employee: ",
        "Please enter the name of your {ordinal} employee: ",
    ),
    ask_truck_count="Please enter the number of trucks in your company: ",
    ask_truck_volume=(
        "Please enter the volume in m3 of your {ordinal} truck: ",
        "Please enter the volume in m3 of your {ordinal} truck: ",
    ),
    ask_truck_type="Please enter the type of truck of your company: ",
    recap_title="Let's recap\n",
    recap_user_name="Your name is: {value}",
    recap_company_name="Your company name is {value}",
    recap_employee_count=(
        "Your company has {count} employee",
        "Your company has {count} employees",
    ),
    recap_employees_header=("Your employee is:", "Your employees are:"),
    recap_truck_count=(
        "Your company has {count} truck",
        "Your company has {count} trucks",
    ),
    recap_volumes_header=(
        "The volume of your truck is:",
        "The volumes of your trucks are:",
    ),
    recap_truck_type=(
        "The type of your truck is {value}",
        "The type of your trucks is {value}",
    ),
    recap_item="- {value}",
    recap_volume_item="- {value} m3",
    resumed_employee="{ordinal} employee: {value}",
    resumed_volume="{ordinal} truck: {value} m3",
    confirm_prompt="Is this information correct? (yes/no) ",
    yes_tokens=("yes", "y"),
    no_tokens=("no", "n"),
)

FRENCH = Messages(
    locale="fr",
    ordinal=french_ordinal,
    welcome="Bonjour,\nbienvenu(e) dans l'utilitaire de configuration de votre compte trusk\n",
    error="\nJe n'ai pas compris votre réponse, veuillez recommencer\n",
    cancelled="Configuration annulée.",
    storage_unavailable="Impossible de joindre le stockage des réponses : {error}",
    ask_user_name="Veuillez saisir votre nom sur la platforme Trusk: ",
    ask_company_name="Veuillez saisir le nom de votre société: ",
    ask_employee_count="Veuillez saisir le nombre d'employés de votre société: ",
    ask_employee_name=(
        "Veuillez saisir le nom de votre {n} er/ère employé(e): ",
        "Veuillez saisir le nom de votre {n} ème employé(e): ",
    ),
    ask_truck_count="Veuillez saisir le nombre de camions de votre société: ",
    ask_truck_volume=(
        "Veuillez saisir le volume en m3 de votre {n} er camion: ",
        "Veuillez saisir le volume en m3 de votre {n} ème camion: ",
    ),
    ask_truck_type="Veuillez saisir le type de camion de votre société: ",
    recap_title="Récapitulons\n",
    recap_user_name="Votre nom est: {value}",
    recap_company_name="Le nom de votre société est {value}",
    recap_employee_count=(
        "Votre société comporte {count} employé(e)",
        "Votre société comporte {count} employé(e)s",
    ),
    recap_employees_header=("Votre employé(e) est:", "Vos employé(e)s sont:"),
    recap_truck_count=(
        "Votre entreprise dispose de {count} camion",
        "Votre entreprise dispose de {count} camions",
    ),
    recap_volumes_header=(
        "Le volume de votre camion est:",
        "Le volume de vos camions est:",
    ),
    recap_truck_type=(
        "Le type de votre camion est {value}",
        "Le type de vos camions est {value}",
    ),
    recap_item="- {value}",
    recap_volume_item="- {value} m3",
    resumed_employee="{ordinal} employé(e) : {value}",
    resumed_volume="{ordinal} camion : {value} m3",
    confirm_prompt="Les informations sont elles valides? (oui/non) ",
    yes_tokens=("oui", "o"),
    no_tokens=("non", "n"),
)

_CATALOGS: dict[str, Messages] = {m.locale: m for m in (ENGLISH, FRENCH)}


def get_messages(locale: str) -> Messages:
    """Return the catalog for locale. Raises ValueError for unknown locales."""
    try:
        return _CATALOGS[locale.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown locale {locale!r}, expected one of: {', '.join(sorted(_CATALOGS))}"
        ) from None

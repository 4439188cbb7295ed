"""Entry point: python -m onboarding. Exit codes in onboarding.constants."""

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from core.logging_config import setup_logging
from core.settings import get_setting, load_settings
from core.storage import StorageError, connect_store
from core.terminal import reset_terminal_for_input
from onboarding.constants import (
    MODE_PERSISTENT,
    MODES,
    ONBOARDING_CONFIG_ERROR,
    ONBOARDING_QUIT,
    ONBOARDING_STORAGE_ERROR,
    ONBOARDING_SUCCESS,
)
from onboarding.messages import get_messages
from onboarding.ui import QuestionaryTerminal
from onboarding.wizard import run_wizard

logger = logging.getLogger(__name__)


def main(project_root: Path | None = None) -> int:
    """Run the onboarding wizard. Returns the process exit code."""
    root = project_root or Path(__file__).resolve().parent.parent
    load_dotenv(root / ".env")

    try:
        settings = load_settings(root / "config")
        mode = str(get_setting(settings, "onboarding.mode", "ephemeral")).strip().lower()
        if mode not in MODES:
            raise ValueError(f"Unknown onboarding mode {mode!r}, expected one of: {', '.join(MODES)}")
        messages = get_messages(str(get_setting(settings, "onboarding.locale", "en")))
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return ONBOARDING_CONFIG_ERROR

    setup_logging(root, settings)
    store = None
    try:
        if mode == MODE_PERSISTENT:
            store = connect_store(settings)

        result = run_wizard(QuestionaryTerminal(), store=store, messages=messages)
        logger.info("Onboarding complete after %d session(s)", result.sessions)
        return ONBOARDING_SUCCESS

    except StorageError as e:
        logger.error("Storage failure: %s", e)
        print(messages.storage_unavailable.format(error=e), file=sys.stderr)
        return ONBOARDING_STORAGE_ERROR

    except KeyboardInterrupt:
        print(f"\n\n{messages.cancelled}")
        return ONBOARDING_QUIT

    finally:
        if store is not None:
            store.close()
        reset_terminal_for_input()


if __name__ == "__main__":
    sys.exit(main())

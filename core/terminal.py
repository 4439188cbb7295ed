"""Terminal contract used by the wizard, plus tty recovery after questionary exits."""

import subprocess
import sys
from typing import Iterable, Protocol


class Terminal(Protocol):
    """Blocking line-oriented terminal. One outstanding prompt at a time."""

    def print(self, text: str = "") -> None: ...

    def print_bold(self, text: str) -> None: ...

    def clear(self) -> None: ...

    def read_line(self, prompt: str) -> str:
        """Block until one line is entered. Returned without the trailing newline."""
        ...

    def read_confirm(
        self,
        prompt: str,
        true_tokens: Iterable[str],
        false_tokens: Iterable[str],
    ) -> bool:
        """Block until an answer matching one of the token sets (case-insensitive)."""
        ...


def reset_terminal_for_input() -> None:
    """Put the tty back in line + echo mode.

    prompt_toolkit can leave the console raw when the process is interrupted
    mid-prompt. Windows consoles recover on their own once the process exits.
    """
    if not sys.stdin.isatty() or sys.platform == "win32":
        return
    try:
        subprocess.run(
            ["stty", "sane"],
            stdin=sys.stdin,
            capture_output=True,
            timeout=2,
        )
    except (OSError, subprocess.SubprocessError):
        pass

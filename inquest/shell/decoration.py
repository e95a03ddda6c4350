"""
Terminal decoration for text handed to the line reader.

Control sequences in a readline prompt must be wrapped in ``\\001`` and
``\\002`` so readline does not count them towards the prompt width.
"""

BOLD = "\033[1m"
GREEN = "\033[0;32m"
RESET = "\033[0m"

IGNORE_START = "\001"
IGNORE_END = "\002"


def escape_for_linereader(code: str) -> str:
    """Wrap a control sequence so the line reader treats it as zero width."""
    return f"{IGNORE_START}{code}{IGNORE_END}"


def colorize(text: str, code: str) -> str:
    return f"{escape_for_linereader(code)}{text}{escape_for_linereader(RESET)}"


def bold(text: str) -> str:
    return colorize(text, BOLD)

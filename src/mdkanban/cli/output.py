"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _supports_color() -> bool:
    """Check if stdout is a terminal."""
    # Piped or captured output gets plain text
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    print(f"{_colorize(CHECK, GREEN)} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    print(f"{_colorize(BULLET, YELLOW)} {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def muted(message: str) -> None:
    """Print secondary detail, dimmed."""
    print(_colorize(message, DIM))


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    # Always stderr, even under --check
    print(f"{_colorize(CROSS, RED)} {message}", file=sys.stderr)


def progress(done: int, total: int) -> str:
    """Format checklist progress, e.g. "2/5"."""
    # Uncoloured
    return f"{done}/{total}"

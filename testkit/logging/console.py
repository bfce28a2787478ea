"""Console logging helpers for testkit.

Colored single-line output used by TestSuite.report() and the CLI.
"""

from datetime import datetime

from testkit.formatting import truncate

# Global verbose setting (can be modified at runtime)
_verbose_enabled: bool = False

# Global color setting; disabled output drops every ANSI code
_color_enabled: bool = True


def set_verbose(enabled: bool) -> None:
    """Enable or disable verbose output globally."""
    global _verbose_enabled
    _verbose_enabled = enabled


def is_verbose_enabled() -> bool:
    """Check if verbose output is currently enabled."""
    return _verbose_enabled


def set_color_enabled(enabled: bool) -> None:
    """Enable or disable ANSI colors globally."""
    global _color_enabled
    _color_enabled = enabled


def is_color_enabled() -> bool:
    return _color_enabled


def truncate_text(text: str, max_length: int) -> str:
    """Console variant of testkit.formatting.truncate.

    Same rules (ellipsis, 0 means unlimited), except that the global verbose
    setting disables truncation entirely.
    """
    if _verbose_enabled:
        return text
    return truncate(text, max_length)


class Colors:
    """ANSI color codes for terminal output (bright variants)."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    RED = "\033[91m"
    GRAY = "\033[90m"
    WHITE = "\033[97m"
    # Subdued style for secondary info
    MUTED = "\033[90m"


def paint(text: str, color: str) -> str:
    """Wrap text in color, or return it bare when colors are disabled."""
    if not _color_enabled or not color:
        return text
    return f"{color}{text}{Colors.RESET}"


def log(
    icon: str,
    message: str,
    color: str = "",
    dim: bool = False,
) -> None:
    """Print a timestamped line: HH:MM:SS <icon> <message>."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    body = paint(f"{icon} {message}", Colors.MUTED if dim else color)
    print(f"{paint(timestamp, Colors.GRAY)} {body}")


def log_detail(text: str, max_length: int = 200) -> None:
    """Print an indented, muted continuation line under the previous log()."""
    for line in truncate_text(text, max_length).splitlines():
        print(f"    {paint(line, Colors.MUTED)}")

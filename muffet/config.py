"""Program-wide constants and color settings."""

from enum import Enum

VERSION = "2.4.6"
AGENT_NAME = "muffet"
CONCURRENCY = 1024
TCP_TIMEOUT = 5.0


class Color(str, Enum):
    """When to color the output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def is_color_enabled(color: Color, terminal: bool) -> bool:
    """Decide whether output is colored for the given setting and terminal state."""
    return color == Color.ALWAYS or (terminal and color == Color.AUTO)
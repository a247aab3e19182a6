"""Custom structlog processors and the console renderer."""

import os
import threading

from colorama import Fore, Style
from structlog.typing import EventDict, WrappedLogger

LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

# Already shown in the console prefix or too noisy for a terminal
CONSOLE_HIDDEN_FIELDS = frozenset(
    {
        "level",
        "timestamp",
        "request_id",
        "logger",
        "event",
        "process_id",
        "thread_id",
        "service_name",
        "environment",
    }
)


def add_user_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the authenticated identity, unless the event already names one."""
    from core.auth.context import get_current_user  # noqa: PLC0415

    user = get_current_user()
    if user is not None:
        event_dict.setdefault("auth_user_id", user.user_id)
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service name and deployment environment."""
    event_dict["service_name"] = os.getenv("SERVICE_NAME", "blog-service")
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add process and thread identifiers."""
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render an event as ``[LEVEL] timestamp | request_id | logger | message``.

    Remaining context is appended as ``key=value`` pairs in yellow.
    """
    level = str(event_dict.get("level", "INFO")).upper()
    color = LEVEL_COLORS.get(level, Fore.WHITE)

    line = (
        f"{color}[{level:<8}]{Style.RESET_ALL} "
        f"{event_dict.get('timestamp', '')} | "
        f"{Fore.MAGENTA}{event_dict.get('request_id', 'no-request-id')}"
        f"{Style.RESET_ALL} | "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL} | "
        f"{event_dict.get('event', '')}"
    )

    extra = " ".join(
        f"{key}={value}"
        for key, value in event_dict.items()
        if key not in CONSOLE_HIDDEN_FIELDS
    )
    if extra:
        line += f" {Fore.YELLOW}{extra}{Style.RESET_ALL}"
    return line

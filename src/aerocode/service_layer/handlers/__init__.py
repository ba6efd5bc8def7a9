"""Service layer handlers."""

from collections.abc import Callable

from .aircraft_handlers import COMMAND_HANDLERS as AIRCRAFT_COMMAND_HANDLERS
from .employee_handlers import COMMAND_HANDLERS as EMPLOYEE_COMMAND_HANDLERS
from .report_handlers import COMMAND_HANDLERS as REPORT_COMMAND_HANDLERS
from .session_handlers import COMMAND_HANDLERS as SESSION_COMMAND_HANDLERS
from .stage_handlers import COMMAND_HANDLERS as STAGE_COMMAND_HANDLERS
from .testing_handlers import COMMAND_HANDLERS as TESTING_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **SESSION_COMMAND_HANDLERS,
    **EMPLOYEE_COMMAND_HANDLERS,
    **AIRCRAFT_COMMAND_HANDLERS,
    **STAGE_COMMAND_HANDLERS,
    **TESTING_COMMAND_HANDLERS,
    **REPORT_COMMAND_HANDLERS,
}

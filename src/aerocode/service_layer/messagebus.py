"""Routes shell commands to their handlers."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from aerocode.domain.errors import DomainError
from aerocode.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .errors import AccessError
from .session import Session

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Handler = Callable[..., Any]


class NoHandlerForCommand(LookupError):
    """Raised for a command type nobody registered a handler for."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Dispatches each command, with the caller's session, to one handler.

    Handlers are called as ``handler(cmd, session)``; the unit of work, id
    generator, report store and clock are bound in beforehand by
    ``aerocode.bootstrap``. The bus keeps its own reference to the unit of work
    so read-only views can reach the repository without a command.

    A handler refusing a command (a domain rule or a permission check) is an
    ordinary outcome and is logged at INFO. Anything else is logged with its
    traceback. Either way the exception reaches the caller.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: Mapping[type[Command], Handler],
    ) -> None:
        self.uow = uow
        self._command_handlers = dict(command_handlers)

    def handle(self, cmd: Command, session: Session) -> Any:
        """Run the handler registered for ``type(cmd)`` and return its result.

        Raises:
            NoHandlerForCommand: When the command type has no handler.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        handler_name = _handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            return handler(cmd, session)
        except (DomainError, AccessError) as e:
            logger.info("Command %s rejected: %s", type(cmd).__name__, e)
            raise
        except Exception:
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            raise


def _handler_name(handler: Handler) -> str:
    # partials carry the wrapped function in .func
    target = getattr(handler, "func", handler)
    return getattr(target, "__name__", None) or repr(handler)

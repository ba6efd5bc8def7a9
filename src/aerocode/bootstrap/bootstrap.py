"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aerocode import config
from aerocode.adapters.id_generators import (
    ShortIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from aerocode.adapters.report_store import LocalReportStore
from aerocode.adapters.repository import JsonFileRepository
from aerocode.adapters.unit_of_work import RepositoryUnitOfWork
from aerocode.service_layer.handlers import COMMAND_HANDLERS
from aerocode.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from aerocode.interfaces.id_generator import IdGenerator
    from aerocode.interfaces.report_store import ReportStore
    from aerocode.interfaces.unit_of_work import AbstractUnitOfWork
    from aerocode.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    data_dir: Path


def utc_now() -> datetime:
    """Wall-clock time in UTC, used to stamp generated reports."""
    return datetime.now(timezone.utc)


def build_id_generator(strategy: config.IdStrategy) -> IdGenerator:
    """Build the id generator for a configured strategy."""
    match strategy:
        case config.IdStrategy.ULID:
            return ULIDGenerator()
        case config.IdStrategy.UUID:
            return UUIDv4Generator()
        case _:
            return ShortIdGenerator()


def build_uow(data_dir: Path) -> AbstractUnitOfWork:
    """Build a unit of work over the JSON documents in ``data_dir``."""
    repository = JsonFileRepository(data_dir)
    repository.load()
    return RepositoryUnitOfWork(repository)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    *,
    id_generator: IdGenerator,
    report_store: ReportStore,
    clock: Callable[[], datetime] = utc_now,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {
        "uow": uow,
        "id_generator": id_generator,
        "report_store": report_store,
        "clock": clock,
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    data_dir: Path | None = None, id_strategy: config.IdStrategy | None = None
) -> AppContainer:
    """Bootstrap the message bus over the configured data directory.

    Args:
        data_dir: Overrides `config.get_data_dir()`.
        id_strategy: Overrides `config.get_id_strategy()`.
    """
    data_dir = data_dir if data_dir is not None else config.get_data_dir()
    strategy = id_strategy if id_strategy is not None else config.get_id_strategy()
    logger.debug("Data directory: %s, id strategy: %s", data_dir, strategy.value)

    message_bus = build_message_bus(
        build_uow(data_dir),
        COMMAND_HANDLERS,
        id_generator=build_id_generator(strategy),
        report_store=LocalReportStore(data_dir),
    )

    return AppContainer(message_bus=message_bus, data_dir=data_dir)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)

"""Port for grouping repository changes into one persisted step."""

from __future__ import annotations

import abc

from .repository import Repository


class AbstractUnitOfWork(abc.ABC):
    """One shell command's worth of changes to the manufacturing records.

    Handlers run inside ``with uow:``. A handler that succeeds calls
    ``commit`` to write both documents; leaving the block without committing,
    normally or through an exception, calls ``rollback``.
    """

    repository: Repository

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None:
        """Persist the repository's current state."""

    @abc.abstractmethod
    def rollback(self) -> None:
        """Drop changes that were not committed in this block."""

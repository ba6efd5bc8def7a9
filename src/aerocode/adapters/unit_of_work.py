"""Repository-backed Unit of Work for AEROCODE.

Commit persists the whole repository; leaving the context without a commit
discards in-memory changes back to the last persisted state.
"""

from __future__ import annotations

import logging

from aerocode.interfaces.repository import Repository
from aerocode.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class RepositoryUnitOfWork(AbstractUnitOfWork):
    """Unit of Work wrapping an already loaded Repository."""

    def __init__(self, repository: Repository) -> None:
        self.repository = repository
        self._committed = False

    def __enter__(self):
        self._committed = False
        return super().__enter__()

    def commit(self):
        self.repository.persist()
        self._committed = True

    def rollback(self):
        if not self._committed:
            logger.debug("Discarding uncommitted repository changes")
            self.repository.discard_changes()

"""Port for the variable part of record ids."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Produces the part of an employee, part, stage or test id after its prefix.

    Handlers prepend the ``F-``/``P-``/``E-``/``T-`` prefix and draw again when
    the result is already taken, so implementations need not guarantee
    uniqueness on their own.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return the next id body, e.g. ``"k3f9x2a"`` or ``"001"``."""

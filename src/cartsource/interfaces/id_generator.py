"""Port for generating event identifiers."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Source of unique, string event ids."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an id never returned before by this generator."""

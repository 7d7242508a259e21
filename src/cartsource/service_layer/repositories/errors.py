"""Errors raised by repositories."""


class RepositoryError(Exception):
    """Base class for repository errors."""


class AggregateNotFoundError(RepositoryError):
    """The requested stream holds no events."""

    def __init__(self, aggregate_type_name: str, aggregate_id: str) -> None:
        self.aggregate_type_name = aggregate_type_name
        self.aggregate_id = aggregate_id
        super().__init__(f"{aggregate_type_name} with ID {aggregate_id} not found.")

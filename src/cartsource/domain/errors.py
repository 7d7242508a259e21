"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class UnknownEventTypeError(DomainError):
    """Raised when an aggregate receives an event type it does not handle."""

    def __init__(self, aggregate_type_name: str, event_type_name: str) -> None:
        super().__init__(
            f"{aggregate_type_name} cannot apply event of type {event_type_name}."
        )
        self.aggregate_type_name = aggregate_type_name
        self.event_type_name = event_type_name


class UnknownCommandTypeError(DomainError):
    """Raised when an aggregate receives a command type it does not handle."""

    def __init__(self, aggregate_type_name: str, command_type_name: str) -> None:
        super().__init__(
            f"{aggregate_type_name} cannot handle command of type {command_type_name}."
        )
        self.aggregate_type_name = aggregate_type_name
        self.command_type_name = command_type_name


# ============================================================================
#                         Cart related errors
# ============================================================================


class AmountMustBePositiveError(DomainError):
    """Raised when a price or quantity is not strictly positive."""

    def __init__(self, value: int, message: str = "Amount must be greater than 0!!"):
        super().__init__(message)
        self.value = value
        self.message = message


class ProductNotInCartError(DomainError):
    """Raised when a product is looked up but the cart does not hold it."""

    def __init__(self, product_id: str, message: str = "Product is not in cart!!"):
        super().__init__(f"{message} (product {product_id})")
        self.product_id = product_id
        self.message = message

"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application and CLI layers can catch them uniformly and turn them into
operator-facing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutRejectedError(ValidationError):
    """Checkout cannot start; the register stays idle.

    Carries a short ``title`` for the operator notice in addition to the
    longer message.
    """

    title = "Checkout rejected"


class EmptyCartError(CheckoutRejectedError):
    title = "Cart is empty"


class PermissionDeniedError(CheckoutRejectedError):
    title = "Permission denied"


class GiftCardError(ValidationError):
    """A gift card cannot be used for the requested payment."""


class InsufficientStockError(ValidationError):
    """An inventory decrement would take stock below zero."""


class CheckoutInProgressError(CheckoutRejectedError):
    title = "Checkout in progress"


class NoCheckoutError(ValidationError):
    """A payment-step action was requested while the register is idle."""

    title = "No checkout in progress"

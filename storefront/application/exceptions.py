class StorefrontError(RuntimeError):
    """Base class for storefront errors."""
    pass


class BookingRulesError(StorefrontError, ValueError):
    """Raised when the booking rule table is malformed (bad time, unknown weekday)."""
    pass


class BookingFlowBusyError(StorefrontError):
    """Raised when a flow is edited or re-submitted while a submission is in progress."""
    pass


class NoServiceSelectedError(StorefrontError):
    """Raised when a booking is attempted without an offering context."""
    pass


class CartItemNotFoundError(StorefrontError, KeyError):
    """Raised when a cart operation targets an id that has no line."""
    pass

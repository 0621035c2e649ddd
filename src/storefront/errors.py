"""Exceptions raised by the storefront client and checkout flow."""


class StorefrontError(Exception):
    """Base class for storefront failures."""


class ServiceUnavailableError(StorefrontError):
    """The lesson shop API could not be reached or answered with an error status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class CheckoutFailedError(StorefrontError):
    """Checkout did not complete. Cart and form are left as they were."""

    user_message = "There was an error submitting your order. Please try again."

# app/core/errors.py


class CustomerNotFoundError(Exception):
    """Raised when a customer id has no matching row.

    Rendered as a plain-text 400 by the handler registered in app.main.
    """

    def __init__(self, message: str = "Customer not found."):
        super().__init__(message)
        self.message = message

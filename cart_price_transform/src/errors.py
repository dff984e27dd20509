"""Exceptions raised at the document boundary. The core scan raises none."""


class CartTransformError(Exception):
    """Base class for cart-price-transform errors."""


class InputDocumentError(CartTransformError):
    """The input document is not valid JSON or does not match the expected shape."""

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = details or []

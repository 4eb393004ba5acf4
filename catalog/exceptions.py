"""Conditions reported by the catalog services.

Services raise these instead of formatting HTTP responses; the API layer maps
them to status codes in ``catalog.utils.error_handlers``.
"""


class CatalogError(Exception):
    """Base class for catalog conditions.

    ``field`` names the payload field the condition relates to, when there is
    one, so clients can attach the message to a form input.
    """

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotFoundError(CatalogError):
    """A referenced entity does not exist."""


class ConflictError(CatalogError):
    """A unique field (category name/slug, product sku) is already taken."""

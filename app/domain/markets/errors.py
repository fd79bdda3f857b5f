"""
Domain-specific errors for the markets bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.shared.errors import NotFoundError


class OrderNotFoundError(NotFoundError):
    """Raised when an order does not exist or belongs to another user."""

    def __init__(self, order_id: str) -> None:
        super().__init__("Order not found")
        self.order_id = order_id

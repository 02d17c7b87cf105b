"""Custom domain exceptions for the application."""


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class BusinessRuleError(DomainError):
    """Raised when a business rule is violated (e.g. referencing a kitchen that does not exist)."""

    pass


class EntityNotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class EntityInUseError(DomainError):
    """Raised when a resource cannot be removed or modified because other resources reference it."""

    pass


class KitchenNotFoundError(EntityNotFoundError):
    def __init__(self, kitchen_id: int):
        super().__init__(f"kitchen {kitchen_id} not found")
        self.kitchen_id = kitchen_id


class RestaurantNotFoundError(EntityNotFoundError):
    def __init__(self, restaurant_id: int):
        super().__init__(f"restaurant {restaurant_id} not found")
        self.restaurant_id = restaurant_id

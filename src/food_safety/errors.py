"""Domain exceptions raised by the service layer."""


class FoodSafetyError(Exception):
    """Base error for the food safety service."""


class ProductNotFoundError(FoodSafetyError):
    """Raised when the product catalog has no entry for a barcode."""

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Product {barcode} not found")
        self.barcode = barcode


class ProfileNotFoundError(FoodSafetyError):
    """Raised when no profile is stored for an email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Profile for {email} not found")
        self.email = email


class ProfileValidationError(FoodSafetyError):
    """Raised when a profile is missing required fields."""


class UpstreamError(FoodSafetyError):
    """Raised when an external collaborator fails after retries."""

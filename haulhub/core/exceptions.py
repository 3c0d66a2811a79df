"""Pricing engine error types"""
from typing import Optional


class PricingError(Exception):
    """Base class for everything the pricing engine raises"""


class InvalidInputError(PricingError, ValueError):
    """A trip attribute is missing, non-numeric, non-finite or not positive.

    ``field`` names the offending attribute (``"distance"`` or ``"weight"``)
    so a form can attach the message to the right input.
    """

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message or f"{field.capitalize()} must be a positive number"
        super().__init__(self.message)


class ConfigurationError(PricingError):
    """The tariff table violates an invariant. Raised at load time."""

    def __init__(self, region: Optional[str], message: str):
        self.region = region
        self.message = message
        prefix = f"Tariff '{region}': " if region else "Tariff table: "
        super().__init__(prefix + message)

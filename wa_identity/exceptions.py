"""
Custom exceptions for WhatsApp identity resolution.
"""


class WhatsAppIdentityError(Exception):
    """Base class for identity resolution errors."""


class InvalidPhoneNumberError(WhatsAppIdentityError, ValueError):
    """Raised when a value cannot be interpreted as a phone number."""

    def __init__(self, value: str, message: str = None):
        self.value = value
        self.message = message or f"Invalid phone number: {value!r}"
        super().__init__(self.message)

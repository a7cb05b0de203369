"""
RegisterUserCommand.
"""

from dataclasses import dataclass


@dataclass
class RegisterUserCommand:
    """Command to register a shopper account and sign it in."""

    first_name: str
    last_name: str
    email: str
    password: str

"""
LoginUserCommand.
"""

from dataclasses import dataclass


@dataclass
class LoginUserCommand:
    """Command to sign in with email and password."""

    email: str
    password: str

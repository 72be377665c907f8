"""
Accounts app services layer: sign-up and sign-in.
"""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    RegistrationClosedError,
    InvalidCredentialsError,
    InactiveAccountError,
)

from .user_registration import register_user
from .user_authentication import authenticate_user


__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'RegistrationClosedError',
    'InvalidCredentialsError',
    'InactiveAccountError',

    # Registration / authentication
    'register_user',
    'authenticate_user',
]

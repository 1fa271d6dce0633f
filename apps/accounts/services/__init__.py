"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidAccessCodeError,
    ChefRequiredError,
    UnknownChefError,
)
from .access_codes import (
    resolve_access_code,
    issue_access_token,
    get_chef_roster,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidAccessCodeError',
    'ChefRequiredError',
    'UnknownChefError',
    # Services
    'resolve_access_code',
    'issue_access_token',
    'get_chef_roster',
]

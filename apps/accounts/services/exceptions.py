"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidAccessCodeError(AccountsServiceError):
    """Raised when an access code maps to no role."""
    pass


class ChefRequiredError(AccountsServiceError):
    """Raised when a restaurant login does not name a chef."""
    pass


class UnknownChefError(AccountsServiceError):
    """Raised when the chef is not on the restaurant's roster."""
    pass

"""
Access code service.

Login is a two-step exchange: a code resolves to the administrator role or
to a restaurant, and restaurant codes then require one chef from that
restaurant's fixed roster. The result is a stateless access token.
"""

import logging

from django.conf import settings
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.identity import ADMIN_ROLE

from .exceptions import (
    InvalidAccessCodeError,
    ChefRequiredError,
    UnknownChefError,
)

logger = logging.getLogger(__name__)

INVALID_CODE_MESSAGE = 'არასწორი კოდი. გთხოვთ სცადოთ თავიდან.'


def get_chef_roster(restaurant: str) -> list:
    """Return the configured chefs of a restaurant, in display order."""
    return [name for name in settings.KITCHEN_CHEFS.get(restaurant, []) if name]


def resolve_access_code(*, code: str) -> dict:
    """
    Map an access code to its role.

    Returns:
        dict with ``role``, ``restaurant`` (None for administrators) and
        ``chefs`` (empty for administrators)

    Raises:
        InvalidAccessCodeError: If the code is unknown
    """
    role = settings.KITCHEN_ACCESS_CODES.get((code or '').strip())
    if role is None:
        logger.warning("Rejected unknown access code")
        raise InvalidAccessCodeError(INVALID_CODE_MESSAGE)

    if role == ADMIN_ROLE:
        return {'role': ADMIN_ROLE, 'restaurant': None, 'chefs': []}

    return {
        'role': role,
        'restaurant': role,
        'chefs': get_chef_roster(role),
    }


def issue_access_token(*, code: str, chef: str = '') -> tuple:
    """
    Log in with an access code and, for restaurants, a chef name.

    Returns:
        (token string, identity dict with role/restaurant/chef)

    Raises:
        InvalidAccessCodeError: If the code is unknown
        ChefRequiredError: If a restaurant code is used without a chef
        UnknownChefError: If the chef is not on the restaurant's roster
    """
    resolution = resolve_access_code(code=code)
    restaurant = resolution['restaurant']
    chef = (chef or '').strip()

    if restaurant is None:
        user_id = 'admin'
        chef = ''
    else:
        if not chef:
            raise ChefRequiredError('Choose a chef to continue.')
        if chef not in resolution['chefs']:
            raise UnknownChefError(f"{chef} is not a chef of this restaurant.")
        user_id = f"{restaurant}:{chef}"

    token = AccessToken()
    token['user_id'] = user_id
    token['role'] = resolution['role']
    token['restaurant'] = restaurant
    token['chef'] = chef

    logger.info("Issued access token for %s", user_id)
    return str(token), {
        'role': resolution['role'],
        'restaurant': restaurant,
        'chef': chef,
    }

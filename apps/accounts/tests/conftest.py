import pytest


@pytest.fixture
def access_codes(settings):
    """Known access codes and chef rosters for login tests."""
    settings.KITCHEN_ACCESS_CODES = {
        '9001': 'ADMIN',
        '9002': 'midiebi',
        '9003': 'sakhinkle',
    }
    settings.KITCHEN_CHEFS = {
        'midiebi': ['გიორგი', 'ნინო'],
        'sakhinkle': ['დავითი'],
    }
    return settings.KITCHEN_ACCESS_CODES

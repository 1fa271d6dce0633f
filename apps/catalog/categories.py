"""
Category ordering for catalog and shopping-list display.

Georgian categories follow a curated priority list; categories missing from
it go last in alphabetical order. Mkhedruli code points are laid out in
alphabet order, so a plain string sort is alphabetical. English and Russian
categories are sorted alphabetically.
"""

from .models import Language

CATEGORY_ORDER_KA = [
    'ალკოჰოლური სასმელები და ღვინო',
    'ხორცი და ხორცპროდუქტები',
    'ზღვის პროდუქტები',
    'რძის პროდუქტები და ყველი',
    'ბოსტნეული, ხილი, თხილი და მწვანილი',
    'ბურღულეული, ფქვილი და სხვა მშრალი პროდუქტები',
    'სოუსები და პიურეები',
    'სუნელები და სანელებლები',
    'ზეთები და ცხიმები',
    'სასმელები (უალკოჰოლო)',
    'სხვა პროდუქტები',
    'ლუდი',
    'სასმელები',
    'ზეთები',
    'რძის პროდუქტები',
    'ბოსტნეული',
    'მწვანილი',
    'თხილეული',
    'პურ-ფუნთუშეული',
    'ღვინო',
    'ხორცი',
    'სოუსები',
    'ბურღულეული',
    'სხვა',
]

_PRIORITY_KA = {name: index for index, name in enumerate(CATEGORY_ORDER_KA)}


def category_sort_key(category, language=Language.GEORGIAN):
    if language == Language.GEORGIAN:
        if category in _PRIORITY_KA:
            return (0, _PRIORITY_KA[category], '')
        return (1, 0, category)
    return (0, 0, category.casefold())


def sort_categories(categories, language=Language.GEORGIAN):
    """Return distinct category names in display order."""
    return sorted(set(categories), key=lambda c: category_sort_key(c, language))


def sorted_categories(products, language=Language.GEORGIAN):
    """Distinct categories of ``products`` in the given language, in display order."""
    return sort_categories((p.category(language) for p in products), language)


def group_by_category(products, language=Language.GEORGIAN):
    """
    Group products under their localized category.

    Returns:
        list of (category, [products sorted by localized name]) tuples in
        category display order
    """
    groups = {}
    for product in products:
        groups.setdefault(product.category(language), []).append(product)

    return [
        (category, sorted(groups[category], key=lambda p: p.name(language).casefold()))
        for category in sort_categories(groups, language)
    ]

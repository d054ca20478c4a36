# validation.py - checks for the product form and the login/sign-up form
# returns readable messages, the views flash them back to the user

import math
import re

from catalog import PRODUCT_CATEGORIES, PRODUCT_TYPES

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_PASSWORD_LENGTH = 6

VARIANT_PREFIX = 'variant_'


def _number(value, label, errors, cast=float):
    if value is None or str(value).strip() == '':
        return 0
    try:
        number = cast(str(value).strip())
    except ValueError:
        errors.append(f'{label} must be a number.')
        return 0
    if not math.isfinite(number):  # 'inf' and 'nan' parse as floats
        errors.append(f'{label} must be a number.')
        return 0
    return number


def parse_product_form(form):
    """
    Turn posted form fields into product data.

    Stock per size arrives as `variant_<label>` fields. Returns (data, errors);
    a bad number becomes an error message instead of an exception.
    """
    errors = []
    data = {
        'product_type': (form.get('product_type') or '').strip(),
        'name': (form.get('name') or '').strip(),
        'article_number': (form.get('article_number') or '').strip(),
        'category': (form.get('category') or '').strip(),
        'color': (form.get('color') or '').strip(),
        'brand': (form.get('brand') or '').strip(),
        'buying_price': _number(form.get('buying_price'), 'Buying price', errors),
        'selling_price': _number(form.get('selling_price'), 'Selling price', errors),
    }
    variants = {}
    for key in form:
        if key.startswith(VARIANT_PREFIX):
            label = key[len(VARIANT_PREFIX):]
            variants[label] = _number(form.get(key), f'Quantity for size {label}', errors, cast=int)
    data['variants'] = variants
    return data, errors


def validate_product(data):
    """Every problem with a product's data, empty when it can be saved."""
    errors = []
    product_type = data.get('product_type')
    if product_type not in PRODUCT_TYPES:
        errors.append('Choose a product type.')
    elif data.get('category') not in PRODUCT_CATEGORIES[product_type]:
        errors.append(f'Choose a category for {product_type}.')

    for field, label in (('name', 'Product name'), ('color', 'Colour'), ('brand', 'Brand')):
        if not data.get(field):
            errors.append(f'{label} is required.')
    if product_type == 'shoes' and not data.get('article_number'):
        errors.append('Article number is required for shoes.')

    variants = data.get('variants') or {}
    if any(not isinstance(q, int) or q < 0 for q in variants.values()):
        errors.append('Stock quantities cannot be negative.')
    elif sum(variants.values()) <= 0:
        errors.append('Add stock for at least one size.')

    for field, label in (('buying_price', 'Buying price'), ('selling_price', 'Selling price')):
        price = data.get(field)
        if price is not None and not math.isfinite(price):
            errors.append(f'{label} must be a number.')
        elif not price or price <= 0:
            errors.append(f'{label} must be greater than zero.')
    return errors


def validate_credentials(email, password, confirm=None):
    """First problem with the login or sign-up fields, or None."""
    if not EMAIL_RE.match(email or ''):
        return 'Please enter a valid email address'
    if len(password or '') < MIN_PASSWORD_LENGTH:
        return f'Password must be at least {MIN_PASSWORD_LENGTH} characters long'
    if confirm is not None and password != confirm:
        return 'Passwords do not match'
    return None

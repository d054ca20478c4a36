from werkzeug.datastructures import ImmutableMultiDict

from conftest import shoe, socks
from validation import parse_product_form, validate_credentials, validate_product


def test_valid_products_pass():
    assert validate_product(shoe()) == []
    assert validate_product(socks(article_number='')) == []


def test_article_number_required_only_for_shoes():
    assert 'Article number is required for shoes.' in validate_product(shoe(article_number=''))


def test_required_fields():
    errors = validate_product(shoe(name='', color='', brand=''))
    assert 'Product name is required.' in errors
    assert 'Colour is required.' in errors
    assert 'Brand is required.' in errors


def test_category_must_match_type():
    assert validate_product(shoe(category='Handbags')) == ['Choose a category for shoes.']
    assert validate_product(shoe(product_type='hats')) == ['Choose a product type.']


def test_stock_and_prices():
    assert validate_product(shoe(variants={'7': 0})) == ['Add stock for at least one size.']
    assert validate_product(shoe(variants={'7': -1, '8': 3})) == ['Stock quantities cannot be negative.']
    errors = validate_product(shoe(buying_price=0, selling_price=-1))
    assert errors == ['Buying price must be greater than zero.', 'Selling price must be greater than zero.']
    errors = validate_product(shoe(buying_price=float('inf'), selling_price=float('nan')))
    assert errors == ['Buying price must be a number.', 'Selling price must be a number.']


def test_selling_below_buying_is_allowed():
    assert validate_product(shoe(buying_price=1500, selling_price=1200)) == []


def test_parse_product_form():
    form = ImmutableMultiDict([
        ('product_type', 'shoes'), ('name', ' Paragon Sport Shoes '), ('article_number', 'PGN-9230'),
        ('category', 'Gents Shoes'), ('color', 'Black'), ('brand', 'Paragon'),
        ('variant_7', '1'), ('variant_8', ''), ('buying_price', '800'), ('selling_price', '1200.50'),
    ])
    data, errors = parse_product_form(form)
    assert errors == []
    assert data['name'] == 'Paragon Sport Shoes'
    assert data['variants'] == {'7': 1, '8': 0}
    assert data['buying_price'] == 800
    assert data['selling_price'] == 1200.5


def test_parse_product_form_bad_numbers():
    form = ImmutableMultiDict([('product_type', 'socks'), ('variant_Large', 'two'), ('buying_price', 'abc')])
    data, errors = parse_product_form(form)
    assert 'Buying price must be a number.' in errors
    assert 'Quantity for size Large must be a number.' in errors
    assert data['variants'] == {'Large': 0}


def test_parse_product_form_rejects_inf_and_nan():
    form = ImmutableMultiDict([('buying_price', 'inf'), ('selling_price', 'NaN')])
    data, errors = parse_product_form(form)
    assert errors == ['Buying price must be a number.', 'Selling price must be a number.']
    assert data['buying_price'] == 0
    assert data['selling_price'] == 0


def test_validate_credentials():
    assert validate_credentials('not-an-email', 'secret123') == 'Please enter a valid email address'
    assert validate_credentials('a@b.co', '12345') == 'Password must be at least 6 characters long'
    assert validate_credentials('a@b.co', 'secret123', 'secret124') == 'Passwords do not match'
    assert validate_credentials('a@b.co', 'secret123', 'secret123') is None
    assert validate_credentials('a@b.co', 'secret123') is None

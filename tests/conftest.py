"""
Pytest configuration and fixtures for the boutique app
"""
from datetime import datetime

import pytest

from app import create_app
from config import TestingConfig
from models import db as _db, Product, Sale, User

OWNER_EMAIL = 'owner@shop.test'
OWNER_PASSWORD = 'secret123'


@pytest.fixture
def app():
    """Flask application on a fresh in-memory database"""
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        _db.drop_all()


@pytest.fixture
def db_session(app):
    """Database session inside an application context"""
    with app.app_context():
        yield _db.session


def make_user(session, email=OWNER_EMAIL, password=OWNER_PASSWORD):
    user = User(email=email)
    user.set_password(password)
    session.add(user)
    session.commit()
    return user


@pytest.fixture
def owner(db_session):
    return make_user(db_session)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(app, client):
    """Test client signed in as the shop owner"""
    with app.app_context():
        make_user(_db.session)
    client.post('/login', data={'email': OWNER_EMAIL, 'password': OWNER_PASSWORD})
    return client


def shoe(**overrides):
    """The Paragon sample shoe, sizes 7 and 8 in stock"""
    values = dict(product_type='shoes', name='Paragon Sport Shoes', article_number='PGN-9230',
                  category='Gents Shoes', color='Black', brand='Paragon',
                  variants={'7': 1, '8': 1}, buying_price=800, selling_price=1200)
    values.update(overrides)
    return values


def socks(**overrides):
    values = dict(product_type='socks', name='Cotton Gents Socks', article_number='',
                  category='Gents Socks', color='Black', brand='Cotton Plus',
                  variants={'Medium': 15, 'Large': 5}, buying_price=50, selling_price=120)
    values.update(overrides)
    return values


def local_time(day, hour=12):
    """Timezone-aware local datetime on the given date"""
    return datetime(day.year, day.month, day.day, hour).astimezone()


def make_sale(timestamp, sale_price=1200, quantity=1, profit=400, **overrides):
    values = dict(product_id='p-1', user_id=1, product_name='Paragon Sport Shoes',
                  product_type='shoes', article_number='PGN-9230', variant='7',
                  quantity=quantity, unit_price=sale_price / quantity, buying_price=800,
                  sale_price=sale_price, profit=profit, customer_name='', timestamp=timestamp)
    values.update(overrides)
    return Sale(**values)


def make_product(**values):
    return Product(**values)

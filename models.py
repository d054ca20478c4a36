# this file defines the database structure for the boutique system
# it uses 3 tables: users (store owners), products and sales

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin
from sqlalchemy.orm import validates
from werkzeug.security import generate_password_hash, check_password_hash

from catalog import LOW_STOCK_THRESHOLD

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


def new_id():
    return str(uuid.uuid4())


# table 1: users - each user owns their own products and sales
class User(UserMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)  # stored as a secure hash
    created_at = db.Column(db.DateTime, default=utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.email}>'


# table 2: products - item details, stock per size/style and sales performance
class Product(db.Model):
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)

    product_type = db.Column(db.String(20), nullable=False)  # shoes, socks, bags, belts
    category = db.Column(db.String(100), nullable=False)
    name = db.Column(db.String(200), nullable=False)
    article_number = db.Column(db.String(100))  # only required for shoes
    brand = db.Column(db.String(100), nullable=False)
    color = db.Column(db.String(50), nullable=False)

    variants = db.Column(db.JSON, nullable=False, default=dict)  # label -> quantity
    total_stock = db.Column(db.Integer, nullable=False, default=0)  # always sum of variants

    buying_price = db.Column(db.Float, nullable=False)   # price paid to the supplier
    selling_price = db.Column(db.Float, nullable=False)  # listed price for customers

    times_sold = db.Column(db.Integer, nullable=False, default=0)
    revenue_generated = db.Column(db.Float, nullable=False, default=0)
    last_sale = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=utcnow)

    def __init__(self, **kwargs):
        kwargs.setdefault('variants', {})
        kwargs.setdefault('times_sold', 0)
        kwargs.setdefault('revenue_generated', 0)
        super().__init__(**kwargs)

    @validates('variants')
    def _set_variants(self, key, variants):
        # a fresh dict every time so the JSON column notices the change
        cleaned = {}
        for label, quantity in (variants or {}).items():
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise ValueError(f'Quantity for {label!r} must be a whole number')
            if quantity < 0:
                raise ValueError(f'Quantity for {label!r} cannot be negative')
            cleaned[str(label)] = quantity
        self.total_stock = sum(cleaned.values())
        return cleaned

    @property
    def is_low_stock(self):
        return self.total_stock <= LOW_STOCK_THRESHOLD

    @property
    def stock_status(self):
        if self.total_stock == 0:
            return 'Out of Stock'
        if self.is_low_stock:
            return 'Low Stock'
        return 'In Stock'

    @property
    def profit_per_unit(self):
        return self.selling_price - self.buying_price

    def __repr__(self):
        return f'<Product {self.name}>'


# table 3: sales - one row per sale line, a snapshot of the product at sale time
# product_id is a plain reference so history survives product deletion
class Sale(db.Model):
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    product_id = db.Column(db.String(36), nullable=False, index=True)

    product_name = db.Column(db.String(200), nullable=False)
    product_type = db.Column(db.String(20), nullable=False)
    article_number = db.Column(db.String(100))
    variant = db.Column(db.String(50), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    unit_price = db.Column(db.Float, nullable=False)
    buying_price = db.Column(db.Float, nullable=False)
    sale_price = db.Column(db.Float, nullable=False)  # unit_price * quantity
    profit = db.Column(db.Float, nullable=False)      # (unit_price - buying_price) * quantity
    customer_name = db.Column(db.String(120), nullable=False, default='')
    timestamp = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f'<Sale {self.quantity} x {self.product_name} ({self.variant})>'


@dataclass
class DashboardMetrics:
    """Figures shown on the dashboard, recomputed from the latest product and sale lists."""
    total_inventory_value: float = 0
    todays_sales: float = 0
    todays_items_sold: int = 0
    todays_profit: float = 0
    low_stock_items: int = 0
    total_products: int = 0
    category_breakdown: dict = field(default_factory=dict)
    profit_margin: float = 0

# inventory.py - stock rules for recording a sale
# checks everything first, then changes the product and builds the sale record

import enum
import math
from dataclasses import dataclass

from models import Sale, utcnow


class ErrorKind(enum.Enum):
    INSUFFICIENT_STOCK = 'insufficient_stock'
    UNKNOWN_VARIANT = 'unknown_variant'
    INVALID_REQUEST = 'invalid_request'
    NOT_FOUND = 'not_found'
    PERSISTENCE = 'persistence'
    UNAUTHORIZED = 'unauthorized'


class InventoryError(Exception):
    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InsufficientStock(InventoryError):
    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, variant, available, requested):
        super().__init__(f'Insufficient stock for {variant}. Only {available} available.')
        self.variant = variant
        self.available = available
        self.requested = requested


class UnknownVariant(InventoryError):
    kind = ErrorKind.UNKNOWN_VARIANT

    def __init__(self, variant):
        super().__init__(f'Size/variant {variant!r} does not exist for this product.')
        self.variant = variant


class InvalidRequest(InventoryError):
    kind = ErrorKind.INVALID_REQUEST


class ProductNotFound(InventoryError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, product_id):
        super().__init__('Product not found.')
        self.product_id = product_id


class PersistenceError(InventoryError):
    kind = ErrorKind.PERSISTENCE


class Unauthorized(InventoryError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message='Please sign in to continue.'):
        super().__init__(message)


@dataclass
class SaleOutcome:
    """Result of recording a sale. Truthy only when the sale went through."""
    ok: bool
    error: ErrorKind = None
    message: str = ''
    product: object = None
    sale: Sale = None

    def __bool__(self):
        return self.ok

    @classmethod
    def failed(cls, exc, product=None):
        return cls(ok=False, error=exc.kind, message=exc.message, product=product)


def effective_unit_price(product, override_price=None):
    """Listed selling price unless a different, non-zero price was agreed."""
    if override_price and override_price != product.selling_price:
        return override_price
    return product.selling_price


def check_sale(product, variant, quantity, override_price=None):
    """Raise the matching InventoryError if the sale cannot go through."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidRequest('Invalid quantity entered.')
    if override_price is not None and not math.isfinite(override_price):
        raise InvalidRequest('Sale price must be a number.')
    if override_price is not None and override_price < 0:
        raise InvalidRequest('Sale price cannot be negative.')
    if variant not in product.variants:
        raise UnknownVariant(variant)
    available = product.variants.get(variant, 0)
    if available < quantity:
        raise InsufficientStock(variant, available, quantity)


def process_sale(product, variant, quantity, customer_name='', override_price=None, now=None):
    """
    Apply a sale to a product and return the new, not yet saved, Sale.

    Nothing is changed when a check fails. Profit is worked out against the
    buying price the product has right now.
    """
    check_sale(product, variant, quantity, override_price)

    if now is None:
        now = utcnow()
    unit_price = effective_unit_price(product, override_price)
    total = unit_price * quantity
    profit = (unit_price - product.buying_price) * quantity

    variants = dict(product.variants)
    variants[variant] -= quantity
    product.variants = variants  # recomputes total_stock
    product.times_sold = (product.times_sold or 0) + quantity
    product.revenue_generated = (product.revenue_generated or 0) + total
    product.last_sale = now

    return Sale(
        user_id=product.user_id,
        product_id=product.id,
        product_name=product.name,
        product_type=product.product_type,
        article_number=product.article_number or '',
        variant=variant,
        quantity=quantity,
        unit_price=unit_price,
        buying_price=product.buying_price,
        sale_price=total,
        profit=profit,
        customer_name=(customer_name or '').strip(),
        timestamp=now,
    )

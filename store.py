# store.py - all database reads and writes, always scoped to one owner
# the owner is passed in on every call, nothing here reads the logged-in user

from sqlalchemy.exc import SQLAlchemyError

from catalog import SAMPLE_PRODUCTS
from inventory import (InventoryError, PersistenceError, ProductNotFound, SaleOutcome,
                       Unauthorized, process_sale)
from logger import get_logger
from models import Product, Sale

logger = get_logger("store")

# fields a new product may be created with
PRODUCT_FIELDS = ('product_type', 'name', 'article_number', 'category', 'color', 'brand',
                  'variants', 'buying_price', 'selling_price')

# fields an edit may change; product type is fixed once created
UPDATABLE_FIELDS = ('name', 'article_number', 'category', 'color', 'brand',
                    'variants', 'buying_price', 'selling_price')


def owner_id(owner):
    if owner is None or not getattr(owner, 'is_authenticated', False) or owner.id is None:
        raise Unauthorized()
    return owner.id


class InventoryStore:
    def __init__(self, session):
        self.session = session

    # reads

    def list_products(self, owner, product_type=None):
        query = self.session.query(Product).filter_by(user_id=owner_id(owner))
        if product_type:
            query = query.filter_by(product_type=product_type)
        return query.order_by(Product.created_at.desc()).all()

    def list_sales(self, owner):
        return (self.session.query(Sale).filter_by(user_id=owner_id(owner))
                .order_by(Sale.timestamp.desc())
                .all())

    def get_product(self, owner, product_id):
        return self.session.query(Product).filter_by(user_id=owner_id(owner), id=product_id).first()

    # writes

    def add_product(self, owner, data):
        """Create a product; stock counters start at zero. Returns None if the save failed."""
        uid = owner_id(owner)
        values = {k: data[k] for k in PRODUCT_FIELDS if k in data}
        values['article_number'] = values.get('article_number') or None
        product = Product(user_id=uid, **values)
        try:
            self.session.add(product)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Failed to add product %r for user %s", values.get('name'), uid)
            return None
        logger.info("Product %s added for user %s (stock %s)", product.id, uid, product.total_stock)
        return product

    def update_product(self, owner, product_id, changes):
        """
        Apply only the supplied fields. A new variants mapping replaces the old one.

        Returns the product, or None when it does not exist or the save failed.
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        product = self.get_product(owner, product_id)
        if product is None:
            logger.warning("Update of missing product %s", product_id)
            return None

        try:
            for key, value in changes.items():
                if key == 'article_number':
                    value = value or None
                setattr(product, key, value)
        except ValueError:
            self.session.rollback()
            raise
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Failed to update product %s", product_id)
            return None
        logger.info("Product %s updated: %s", product_id, ', '.join(sorted(changes)))
        return product

    def delete_product(self, owner, product_id):
        """Remove a product for good. Its sales keep their own copy of the details."""
        product = self.get_product(owner, product_id)
        if product is None:
            logger.warning("Delete of missing product %s", product_id)
            return False
        try:
            self.session.delete(product)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Failed to delete product %s", product_id)
            return False
        logger.info("Product %s deleted", product_id)
        return True

    def record_sale(self, owner, product_id, variant, quantity, customer_name='', override_price=None):
        """
        Record a sale and update the product's stock in one transaction.

        Never raises for a failed sale: the outcome carries the error kind.
        """
        product = None
        try:
            product = self.get_product(owner, product_id)
            if product is None:
                raise ProductNotFound(product_id)
            sale = process_sale(product, variant, quantity, customer_name, override_price)
            self.session.add(sale)
            self.session.commit()
        except InventoryError as exc:
            self.session.rollback()
            logger.info("Sale rejected for product %s: %s", product_id, exc.message)
            return SaleOutcome.failed(exc, product)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Failed to record sale for product %s", product_id)
            return SaleOutcome.failed(PersistenceError('The sale could not be saved. Please try again.'), product)

        logger.info("Sale %s: %s x %s (%s) for %.2f", sale.id, quantity, product.name, variant, sale.sale_price)
        return SaleOutcome(ok=True, product=product, sale=sale)

    def seed_samples(self, owner):
        """Load the sample catalogue into an account that has no products yet."""
        if self.list_products(owner):
            return []
        added = [self.add_product(owner, sample) for sample in SAMPLE_PRODUCTS]
        return [p for p in added if p is not None]

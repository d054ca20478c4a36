# app.py - handles system logic and routing
# run this file starting the server: python app.py  (add --demo for a sample account)

import argparse

from flask import Flask, Blueprint, render_template, request, redirect, url_for, flash, abort
from flask_login import LoginManager, login_user, logout_user, login_required, current_user

from catalog import PRODUCT_TYPES, PRODUCT_CATEGORIES, VARIANT_OPTIONS, all_categories, variant_options
from config import Config
from filters import SALE_PERIODS, count_by_type, filter_products, filter_sales, sort_sales
from helpers import register_filters
from logger import get_logger, setup_logging
from metrics import compute_metrics, daily_breakdown, summarize_sales
from models import db, User
from store import InventoryStore
from validation import parse_product_form, validate_credentials, validate_product

logger = get_logger("app")

main = Blueprint('main', __name__)

login_manager = LoginManager()
login_manager.login_view = 'main.login'
login_manager.login_message_category = 'info'


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


def get_store():
    return InventoryStore(db.session)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app.config['LOG_LEVEL'], app.config.get('LOG_FILE'))

    db.init_app(app)
    login_manager.init_app(app)
    register_filters(app)
    app.register_blueprint(main)

    # setup database tables
    with app.app_context():
        db.create_all()

    logger.info("Boutique app ready (database %s)", app.config['SQLALCHEMY_DATABASE_URI'])
    return app


def create_demo_account(app):
    """Make sure the demo owner exists and has the sample stock."""
    with app.app_context():
        email = app.config['DEMO_EMAIL']
        user = User.query.filter_by(email=email).first()
        if not user:
            user = User(email=email)
            user.set_password(app.config['DEMO_PASSWORD'])
            db.session.add(user)
            db.session.commit()
            logger.info("Demo account %s created", email)
        added = get_store().seed_samples(user)
        if added:
            logger.info("Loaded %d sample products for %s", len(added), email)


# login, sign up and logout
@main.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('main.index'))
    if request.method == 'POST':
        email = (request.form.get('email') or '').strip().lower()
        password = request.form.get('password') or ''
        error = validate_credentials(email, password)
        if not error:
            user = User.query.filter_by(email=email).first()
            if user and user.check_password(password):
                login_user(user)
                logger.info("User %s signed in", user.id)
                return redirect(url_for('main.index'))
            error = 'Invalid email or password'
        logger.warning("Failed sign-in for %s", email)
        flash(error, 'danger')
    return render_template('login.html')


@main.route('/signup', methods=['GET', 'POST'])
def signup():
    if current_user.is_authenticated:
        return redirect(url_for('main.index'))
    if request.method == 'POST':
        email = (request.form.get('email') or '').strip().lower()
        password = request.form.get('password') or ''
        error = validate_credentials(email, password, request.form.get('confirm_password') or '')
        if not error and User.query.filter_by(email=email).first():
            error = 'An account with this email already exists'
        if error:
            flash(error, 'danger')
            return render_template('signup.html', email=email)
        user = User(email=email)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        login_user(user)
        logger.info("Account %s created", user.id)
        flash('Account created successfully!', 'success')
        return redirect(url_for('main.index'))
    return render_template('signup.html')


@main.route('/logout')
@login_required
def logout():
    logout_user()
    return redirect(url_for('main.login'))


# main dashboard - today's figures and stock overview
@main.route('/')
@login_required
def index():
    store = get_store()
    products = store.list_products(current_user)
    sales = store.list_sales(current_user)
    metrics = compute_metrics(products, sales)
    low_stock = [p for p in products if p.is_low_stock]
    return render_template('index.html', metrics=metrics, recent_sales=sales[:5],
                           low_stock=low_stock, product_types=PRODUCT_TYPES)


# product list, optionally for one product type, with search and filters
@main.route('/inventory')
@main.route('/inventory/<product_type>')
@login_required
def inventory(product_type=None):
    if product_type is not None and product_type not in PRODUCT_TYPES:
        abort(404)
    products = get_store().list_products(current_user)
    search = request.args.get('q', '')
    category = request.args.get('category', 'all')
    low_stock_only = request.args.get('low_stock') == '1'
    items = filter_products(products, product_type, search, category, low_stock_only)
    categories = PRODUCT_CATEGORIES[product_type] if product_type else all_categories()
    return render_template('inventory.html', items=items, total=len(products),
                           counts=count_by_type(products), product_type=product_type,
                           product_types=PRODUCT_TYPES, categories=categories,
                           search=search, category=category, low_stock_only=low_stock_only)


@main.route('/product/<product_id>')
@login_required
def product_details(product_id):
    product = get_store().get_product(current_user, product_id)
    if product is None:
        abort(404)
    return render_template('product_details.html', item=product)


def sized_categories(product_type):
    # categories with their own size grid, e.g. gents, ladies and kids shoes
    options = VARIANT_OPTIONS.get(product_type)
    return list(options) if isinstance(options, dict) else []


def chosen_category(product_type, default):
    category = request.args.get('category')
    if category in PRODUCT_CATEGORIES.get(product_type, []):
        return category
    return default


def _render_product_form(item, data, product_type, category):
    sizes = variant_options(product_type, category)
    sizes += [label for label in data.get('variants', {}) if label not in sizes]
    return render_template('product_form.html', item=item, data=data,
                           product_types=PRODUCT_TYPES, categories=PRODUCT_CATEGORIES,
                           sizes=sizes, product_type=product_type,
                           sized_categories=sized_categories(product_type))


# add new product
@main.route('/add_product', methods=['GET', 'POST'])
@login_required
def add_product():
    if request.method == 'POST':
        data, errors = parse_product_form(request.form)
        errors = errors or validate_product(data)
        if errors:
            for message in errors:
                flash(message, 'danger')
            return _render_product_form(None, data, data['product_type'], data['category'])
        product = get_store().add_product(current_user, data)
        if product is None:
            flash('The product could not be saved. Please try again.', 'danger')
            return _render_product_form(None, data, data['product_type'], data['category'])
        flash(f'{product.name} added to stock!', 'success')
        return redirect(url_for('main.inventory', product_type=product.product_type))

    product_type = request.args.get('type', 'shoes')
    if product_type not in PRODUCT_TYPES:
        product_type = 'shoes'
    category = chosen_category(product_type, PRODUCT_CATEGORIES[product_type][0])
    data = {'product_type': product_type, 'category': category, 'variants': {}}
    return _render_product_form(None, data, product_type, category)


# edit item details, the product type cannot change
@main.route('/edit_product/<product_id>', methods=['GET', 'POST'])
@login_required
def edit_product(product_id):
    store = get_store()
    product = store.get_product(current_user, product_id)
    if product is None:
        abort(404)
    if request.method == 'POST':
        data, errors = parse_product_form(request.form)
        data['product_type'] = product.product_type
        # sizes left off the form keep no stock
        errors = errors or validate_product(data)
        if errors:
            for message in errors:
                flash(message, 'danger')
            return _render_product_form(product, data, product.product_type, data['category'])
        changes = {k: v for k, v in data.items() if k != 'product_type'}
        if store.update_product(current_user, product_id, changes) is None:
            flash('Changes could not be saved. Please try again.', 'danger')
            return _render_product_form(product, data, product.product_type, data['category'])
        flash(f'Changes saved for {product.name}', 'success')
        return redirect(url_for('main.product_details', product_id=product_id))

    data = {
        'product_type': product.product_type, 'name': product.name,
        'article_number': product.article_number or '',
        'category': chosen_category(product.product_type, product.category),
        'color': product.color, 'brand': product.brand, 'variants': dict(product.variants),
        'buying_price': product.buying_price, 'selling_price': product.selling_price,
    }
    return _render_product_form(product, data, product.product_type, data['category'])


# remove product from system, its past sales stay in the history
@main.route('/delete_product/<product_id>', methods=['POST'])
@login_required
def delete_product(product_id):
    store = get_store()
    product = store.get_product(current_user, product_id)
    if product is None:
        abort(404)
    name = product.name
    if store.delete_product(current_user, product_id):
        flash(f'{name} deleted from the list.', 'warning')
    else:
        flash(f'{name} could not be deleted. Please try again.', 'danger')
    return redirect(url_for('main.inventory'))


# sales entry - pick a product and size, confirm quantity and price
@main.route('/sell', methods=['GET', 'POST'])
@login_required
def sell():
    store = get_store()
    if request.method == 'POST':
        product_id = request.form.get('product_id', '')
        try:
            qty = int(request.form.get('quantity', 0))
        except ValueError:
            qty = 0
        price = request.form.get('sale_price', '').strip()
        try:
            override_price = float(price) if price else None
        except ValueError:
            flash('Sale price must be a number.', 'danger')
            return redirect(url_for('main.sell', product=product_id))

        outcome = store.record_sale(current_user, product_id, request.form.get('variant', ''), qty,
                                    request.form.get('customer_name', ''), override_price)
        if outcome:
            sale = outcome.sale
            flash(f'Sale recorded: {sale.quantity} x {sale.product_name} ({sale.variant})', 'success')
            return redirect(url_for('main.sell'))
        flash(outcome.message, 'danger')
        return redirect(url_for('main.sell', product=product_id))

    products = store.list_products(current_user)
    search = request.args.get('q', '')
    matches = filter_products(products, search=search) if search else []
    selected = None
    if request.args.get('product'):
        selected = store.get_product(current_user, request.args['product'])
    return render_template('sell.html', matches=matches, search=search, selected=selected)


# sales history with filters, sorting and a daily breakdown
@main.route('/sales')
@login_required
def sales():
    all_sales = get_store().list_sales(current_user)
    search = request.args.get('q', '')
    product_type = request.args.get('type', 'all')
    period = request.args.get('period', 'all')
    if period not in SALE_PERIODS:
        period = 'all'
    sort_by = request.args.get('sort', 'date')
    if sort_by not in ('date', 'amount', 'profit'):
        sort_by = 'date'
    order = 'asc' if request.args.get('order') == 'asc' else 'desc'

    shown = filter_sales(all_sales, search, product_type, period)
    return render_template('sales.html', sales=sort_sales(shown, sort_by, order), total=len(all_sales),
                           summary=summarize_sales(shown), daily=daily_breakdown(shown),
                           search=search, product_type=product_type, period=period,
                           sort_by=sort_by, order=order, product_types=PRODUCT_TYPES,
                           periods=SALE_PERIODS)


def parse_arguments():
    parser = argparse.ArgumentParser(description='Boutique inventory and sales')
    parser.add_argument('--demo', action='store_true',
                        help='Create the demo account (DEMO_EMAIL/DEMO_PASSWORD) with sample stock')
    parser.add_argument('--port', type=int, default=5001)
    parser.add_argument('--debug', action='store_true')
    return parser.parse_args()


if __name__ == '__main__':
    args = parse_arguments()
    app = create_app()
    if args.demo:
        create_demo_account(app)
    app.run(debug=args.debug, port=args.port)

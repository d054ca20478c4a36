# helpers.py - display formatting used by the templates

from datetime import datetime, timezone

from catalog import LOW_STOCK_THRESHOLD


def calculate_total_stock(variants):
    return sum((variants or {}).values())


def format_currency(amount):
    """Whole rupees with thousands separators, e.g. 1200 -> '₹1,200'."""
    amount = amount or 0
    sign = '-' if amount < 0 else ''
    return f'{sign}₹{abs(amount):,.0f}'


def format_variants(variants, product_type):
    in_stock = [(label, count) for label, count in (variants or {}).items() if count > 0]
    if not in_stock:
        return 'Out of Stock'
    if product_type == 'shoes':
        return ' '.join(f'{size}({count})' for size, count in in_stock)
    return ', '.join(f'{label}: {count}' for label, count in in_stock)


def stock_status(stock):
    if stock == 0:
        return 'Out of Stock'
    if stock <= LOW_STOCK_THRESHOLD:
        return 'Low Stock'
    return 'In Stock'


def format_time(timestamp, now=None):
    """Relative wording for recent timestamps, a plain date for older ones."""
    if timestamp is None:
        return 'Never'
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    seconds = (now - timestamp).total_seconds()
    hours = seconds / 3600
    local = timestamp.astimezone()
    if hours < 1:
        return f'{int(seconds // 60)} minutes ago'
    if hours < 24:
        return local.strftime('%I:%M %p').lstrip('0')
    if hours < 48:
        return 'Yesterday'
    return local.strftime('%d/%m/%Y')


def register_filters(app):
    app.jinja_env.filters['currency'] = format_currency
    app.jinja_env.filters['variants'] = format_variants
    app.jinja_env.filters['stock_status'] = stock_status
    app.jinja_env.filters['timeago'] = format_time

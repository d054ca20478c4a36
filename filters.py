# filters.py - search, filter and sort for the product and sales lists
# works on lists already loaded for one owner

from datetime import date, timedelta

from catalog import LOW_STOCK_THRESHOLD
from metrics import local_date

SALE_PERIODS = ('all', 'today', 'yesterday', 'week', 'month')
SALE_SORT_KEYS = {
    'date': lambda s: s.timestamp,
    'amount': lambda s: s.sale_price,
    'profit': lambda s: s.profit,
}


def _active(value):
    return value not in (None, '', 'all')


def _matches(term, *fields):
    term = term.lower()
    return any(term in (f or '').lower() for f in fields)


def filter_products(products, product_type=None, search='', category=None, low_stock_only=False):
    search = (search or '').strip()
    result = []
    for p in products:
        if _active(product_type) and p.product_type != product_type:
            continue
        if search and not _matches(search, p.name, p.article_number, p.brand, p.color):
            continue
        if _active(category) and p.category != category:
            continue
        if low_stock_only and p.total_stock > LOW_STOCK_THRESHOLD:
            continue
        result.append(p)
    return result


def count_by_type(products):
    counts = {'all': len(products)}
    for p in products:
        counts[p.product_type] = counts.get(p.product_type, 0) + 1
    return counts


def _month_ago(today):
    # same day last month, clamped to the month's length
    year, month = (today.year, today.month - 1) if today.month > 1 else (today.year - 1, 12)
    day = today.day
    while True:
        try:
            return date(year, month, day)
        except ValueError:
            day -= 1


def in_period(sale, period, today=None):
    if period is None or period == 'all':
        return True
    if period not in SALE_PERIODS:
        raise ValueError(f'Unknown period: {period}')
    if today is None:
        today = date.today()
    sold_on = local_date(sale.timestamp)
    if period == 'today':
        return sold_on == today
    if period == 'yesterday':
        return sold_on == today - timedelta(days=1)
    if period == 'week':
        return sold_on >= today - timedelta(days=7)
    return sold_on >= _month_ago(today)


def filter_sales(sales, search='', product_type=None, period='all', today=None):
    search = (search or '').strip()
    result = []
    for s in sales:
        if search and not _matches(search, s.product_name, s.article_number, s.customer_name, s.variant):
            continue
        if _active(product_type) and s.product_type != product_type:
            continue
        if not in_period(s, period, today):
            continue
        result.append(s)
    return result


def sort_sales(sales, sort_by='date', order='desc'):
    if sort_by not in SALE_SORT_KEYS:
        raise ValueError(f'Cannot sort sales by {sort_by!r}')
    return sorted(sales, key=SALE_SORT_KEYS[sort_by], reverse=(order != 'asc'))

# metrics.py - dashboard and sales-history figures
# plain functions over lists of products and sales, nothing is cached

from dataclasses import dataclass
from datetime import date, timezone

from catalog import LOW_STOCK_THRESHOLD
from models import DashboardMetrics


def local_date(timestamp):
    """Calendar date of a stored timestamp in the local time zone (naive values are UTC)."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone().date()


def inventory_value(products):
    return sum(p.total_stock * p.buying_price for p in products)


def category_breakdown(products):
    """Item count and stock value per product type."""
    breakdown = {}
    for product in products:
        entry = breakdown.setdefault(product.product_type, {'items': 0, 'value': 0})
        entry['items'] += 1
        entry['value'] += product.total_stock * product.buying_price
    return breakdown


def margin(profit, revenue):
    # percentage of revenue, 0 instead of a division by zero
    if revenue > 0:
        return profit / revenue * 100
    return 0


def compute_metrics(products, sales, today=None):
    """
    Dashboard figures for one owner's products and sales.

    `today` defaults to the local date; the result is a snapshot and does not
    follow later changes.
    """
    if today is None:
        today = date.today()

    todays = [s for s in sales if local_date(s.timestamp) == today]
    todays_sales = sum(s.sale_price for s in todays)
    todays_profit = sum(s.profit for s in todays)

    return DashboardMetrics(
        total_inventory_value=inventory_value(products),
        todays_sales=todays_sales,
        todays_items_sold=sum(s.quantity for s in todays),
        todays_profit=todays_profit,
        low_stock_items=sum(1 for p in products if p.total_stock <= LOW_STOCK_THRESHOLD),
        total_products=len(products),
        category_breakdown=category_breakdown(products),
        profit_margin=margin(todays_profit, todays_sales),
    )


@dataclass
class SalesSummary:
    count: int = 0
    total_revenue: float = 0
    total_profit: float = 0
    total_quantity: int = 0
    average_sale_value: float = 0
    profit_margin: float = 0


def summarize_sales(sales):
    """Totals for the sales history page over whatever subset is being shown."""
    sales = list(sales)
    revenue = sum(s.sale_price for s in sales)
    profit = sum(s.profit for s in sales)
    return SalesSummary(
        count=len(sales),
        total_revenue=revenue,
        total_profit=profit,
        total_quantity=sum(s.quantity for s in sales),
        average_sale_value=revenue / len(sales) if sales else 0,
        profit_margin=margin(profit, revenue),
    )


def daily_breakdown(sales, days=7):
    """
    Units, revenue and profit per local calendar day, newest day first.

    Returns a list of (date, {'count', 'revenue', 'profit'}) pairs, at most
    `days` long.
    """
    by_day = {}
    for sale in sales:
        entry = by_day.setdefault(local_date(sale.timestamp), {'count': 0, 'revenue': 0, 'profit': 0})
        entry['count'] += sale.quantity
        entry['revenue'] += sale.sale_price
        entry['profit'] += sale.profit
    return sorted(by_day.items(), key=lambda item: item[0], reverse=True)[:days]

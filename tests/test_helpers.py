from datetime import datetime, timedelta, timezone

import pytest

from catalog import variant_options
from helpers import calculate_total_stock, format_currency, format_time, format_variants, stock_status


def test_calculate_total_stock():
    assert calculate_total_stock({'5': 1, '6': 0, '7': 2}) == 3
    assert calculate_total_stock({}) == 0


@pytest.mark.parametrize('amount, text', [(1200, '₹1,200'), (38400.4, '₹38,400'), (0, '₹0'), (-200, '-₹200')])
def test_format_currency(amount, text):
    assert format_currency(amount) == text


def test_format_variants_for_shoes_and_others():
    assert format_variants({'7': 2, '8': 0, '9': 1}, 'shoes') == '7(2) 9(1)'
    assert format_variants({'Small': 2, 'Large': 1}, 'socks') == 'Small: 2, Large: 1'
    assert format_variants({'7': 0}, 'shoes') == 'Out of Stock'


@pytest.mark.parametrize('stock, status', [(0, 'Out of Stock'), (3, 'Low Stock'), (4, 'In Stock')])
def test_stock_status(stock, status):
    assert stock_status(stock) == status


def test_format_time():
    now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    assert format_time(now - timedelta(minutes=5), now=now) == '5 minutes ago'
    assert format_time(now - timedelta(hours=30), now=now) == 'Yesterday'
    assert format_time(None) == 'Never'
    older = now - timedelta(days=5)
    assert format_time(older, now=now) == older.astimezone().strftime('%d/%m/%Y')


def test_variant_options():
    assert variant_options('shoes', 'Ladies Shoes') == ['4', '5', '6', '7', '8', '9']
    assert variant_options('bags') == ['Single Item']
    sizes = variant_options('shoes')
    assert sizes[0] == '01' and sizes[-1] == '13'
    assert len(sizes) == len(set(sizes))
    assert variant_options('hats') == []

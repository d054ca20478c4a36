# catalog.py - fixed product types, categories and size options for the shop

LOW_STOCK_THRESHOLD = 3

PRODUCT_TYPES = ['shoes', 'socks', 'bags', 'belts']

PRODUCT_CATEGORIES = {
    'shoes': ['Gents Shoes', 'Ladies Shoes', 'Kids Shoes'],
    'socks': ['Gents Socks', 'Ladies Socks', 'Kids Socks'],
    'bags': ['Handbags', 'Backpacks', 'Travel Bags', 'School Bags'],
    'belts': ['Gents Belts', 'Ladies Belts', 'Kids Belts'],
}

# shoes are sized per category, every other type shares one list
VARIANT_OPTIONS = {
    'shoes': {
        'Ladies Shoes': ['4', '5', '6', '7', '8', '9'],
        'Gents Shoes': ['5', '6', '7', '8', '9', '10', '11'],
        'Kids Shoes': ['06', '07', '08', '09', '10', '11', '12', '13', '01', '02', '03', '04', '05'],
    },
    'socks': ['Small', 'Medium', 'Large'],
    'bags': ['Single Item'],
    'belts': ['28', '30', '32', '34', '36', '38'],
}


def all_categories():
    return [c for t in PRODUCT_TYPES for c in PRODUCT_CATEGORIES[t]]


def variant_options(product_type, category=None):
    """Size/style labels offered on the product form for a type and category."""
    options = VARIANT_OPTIONS.get(product_type, [])
    if isinstance(options, dict):
        if category in options:
            return list(options[category])
        # no category chosen yet: every shoe size once, in numeric order
        sizes = {size for labels in options.values() for size in labels}
        return sorted(sizes, key=int)
    return list(options)


# starter stock loaded into a fresh demo account
SAMPLE_PRODUCTS = [
    dict(product_type='shoes', name='Paragon Sport Shoes', article_number='PGN-9230',
         category='Gents Shoes', color='Black', brand='Paragon',
         variants={'5': 1, '6': 0, '7': 1, '8': 1}, buying_price=800, selling_price=1200),
    dict(product_type='shoes', name='Nike Ladies Sneakers', article_number='NK-270-WHT',
         category='Ladies Shoes', color='White', brand='Nike',
         variants={'6': 2, '7': 3, '8': 2, '9': 1}, buying_price=4500, selling_price=6999),
    dict(product_type='shoes', name='Adidas Kids Shoes', article_number='AD-KD-001',
         category='Kids Shoes', color='Blue', brand='Adidas',
         variants={'01': 2, '02': 3, '03': 1, '04': 2}, buying_price=2000, selling_price=3500),
    dict(product_type='socks', name='Cotton Gents Socks', article_number='CTN-GNT-001',
         category='Gents Socks', color='Black', brand='Cotton Plus',
         variants={'Medium': 15, 'Large': 5}, buying_price=50, selling_price=120),
    dict(product_type='bags', name='Ladies Handbag', article_number='LHB-001',
         category='Handbags', color='Brown', brand='Stylish',
         variants={'Single Item': 2}, buying_price=1500, selling_price=2800),
]

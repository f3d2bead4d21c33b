"""
Shared sources and fixtures for code scorer tests.
"""

import pytest

from code_score.config import Settings


# ============================================
# Sample sources
# ============================================

# One documented function, snake_case names, try/except. Single blank lines
# keep the duplicate-line ratio under the penalty threshold.
CLEAN_PYTHON = '''# Order totals for the shop backend.
# Prices are stored in cents.
# Tax is applied after the discount.

TAX_RATE = 0.2
CURRENCY = "EUR"

def order_total(prices, discount=0):
    """Return the taxed total of a list of prices."""
    try:
        subtotal = sum(prices) - discount
    except TypeError:
        # Non-numeric price in the list
        return None
    return round(subtotal * (1 + TAX_RATE))

if __name__ == "__main__":
    # Quick manual check
    cart = [price for price in (100, 250)]
    print(order_total(cart))
'''

MESSY_PYTHON = '''def calculateTotal(Items):
    sum = 0
    for item in Items:
       sum += item
    for item in Items:
        print(item)
    for item in Items:
        print(item)
    return sum

totalValue = calculateTotal([12, 34, 56, 78, 90, 21])
'''

CLEAN_JAVASCRIPT = '''// Cart helpers
/**
 * Sum the price of every item in the cart.
 */
function cartTotal(items) {
  try {
    return items.reduce((total, item) => total + item.price, 0);
  } catch (error) {
    // Malformed cart
    return 0;
  }
}

const formatPrice = (cents) => `$${cents / 100}`;
export { cartTotal, formatPrice };
'''

MESSY_JAVASCRIPT = '''var Total_Amount = 0;
function Add_Item(price) {
  Total_Amount = Total_Amount + price;
  console.log(Total_Amount);
  console.log(price);
  console.log("added");
}
'''


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def write_source(tmp_path):
    """Write a source file into a temp dir and return its path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write

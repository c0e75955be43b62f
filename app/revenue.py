import math
from collections.abc import Mapping
from numbers import Real

from app.errors import InvalidInputError, NonNumericFieldError


def _field(record, name: str):
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _number(record, name: str) -> float:
    value = _field(record, name)
    # bool is a Real subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise NonNumericFieldError(name, value)
    return value


def calculate_simple_revenue(item, product) -> float:
    """Discounted revenue for one line item.

    ``item`` needs ``sale_price``, ``discount`` (percent) and ``quantity``;
    ``product`` needs ``purchase_price``. Either may be a model or a mapping.
    """
    if item is None or product is None:
        raise InvalidInputError()

    sale_price = _number(item, "sale_price")
    discount = _number(item, "discount")
    quantity = _number(item, "quantity")
    _number(product, "purchase_price")

    discount_amount = sale_price * discount / 100
    return (sale_price - discount_amount) * quantity


def calculate_profit(revenue: float, item, product) -> float:
    """Revenue minus the purchase cost of the units sold."""
    if item is None or product is None:
        raise InvalidInputError()
    return revenue - _number(product, "purchase_price") * _number(item, "quantity")

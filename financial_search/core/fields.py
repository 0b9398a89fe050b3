"""Searchable field extraction for each record category."""

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .results import Category

# (snake_case attribute, camelCase key) pairs, in search order
FIELD_RULES: Dict[Category, List[Tuple[str, str]]] = {
    Category.ACCOUNT: [
        ("account_number", "accountNumber"),
        ("account_holder", "accountHolder"),
        ("type", "type"),
    ],
    Category.TRANSACTION: [
        ("description", "description"),
        ("amount", "amount"),
        ("date", "date"),
        ("type", "type"),
    ],
    Category.CUSTOMER: [
        ("name", "name"),
        ("email", "email"),
        ("customer_id", "customerId"),
        ("phone", "phone"),
    ],
}

_MISSING = object()


def canonical_number(value: Any) -> str:
    """
    Render a number in its plain decimal form.

    Integral values drop the fractional part (2500.0 -> "2500"), other floats
    use the shortest round-tripping digits (150.5 -> "150.5"). Floats whose
    decimal exponent is below -6 or at least 21 switch to exponent notation
    with an explicit sign and no padding (1e21 -> "1e+21", 1e-7 -> "1e-7").
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            return str(value)
        normalized = value.normalize()
        return format(normalized, "f")

    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        if value == 0:
            return "0"
        return _float_text(value)

    return str(value)


def _float_text(value: float) -> str:
    shortest = Decimal(repr(value)).normalize()
    exponent = shortest.adjusted()

    if -7 < exponent < 21:
        return format(shortest, "f")

    sign, digits, _ = shortest.as_tuple()
    mantissa = "".join(str(digit) for digit in digits)
    if len(mantissa) > 1:
        mantissa = f"{mantissa[0]}.{mantissa[1:]}"

    return f"{'-' if sign else ''}{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def to_text(value: Any) -> str:
    """Coerce a field value to the text it is searched as."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return canonical_number(value)
    return str(value)


def _lookup(record: Any, attribute: str, key: str) -> Any:
    if isinstance(record, Mapping):
        if key in record:
            return record[key]
        return record.get(attribute, _MISSING)

    value = getattr(record, attribute, _MISSING)
    if value is _MISSING:
        value = getattr(record, key, _MISSING)
    return value


def extract_fields(record: Any, category: Category) -> Optional[List[str]]:
    """
    Extract the searchable fields of a record.

    Args:
        record: Mapping or object carrying the category's field names
        category: Which rule set to apply

    Returns:
        Ordered list of field strings, or None when the record is missing a
        searchable field (such records never match)
    """
    if record is None:
        return None

    fields = []
    for attribute, key in FIELD_RULES[category]:
        value = _lookup(record, attribute, key)
        if value is _MISSING or value is None:
            return None
        fields.append(to_text(value))

    return fields


def account_fields(account: Any) -> Optional[List[str]]:
    """Account -> [account number, holder, type]."""
    return extract_fields(account, Category.ACCOUNT)


def transaction_fields(transaction: Any) -> Optional[List[str]]:
    """Transaction -> [description, amount, date, type]."""
    return extract_fields(transaction, Category.TRANSACTION)


def customer_fields(customer: Any) -> Optional[List[str]]:
    """Customer -> [name, email, customer id, phone]."""
    return extract_fields(customer, Category.CUSTOMER)

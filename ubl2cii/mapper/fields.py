"""
Leaf converters: UBL primitive values -> CII primitive values.

Every function returns None for a None input so callers can guard with a plain
`if x is not None` before attaching the result.
"""

from __future__ import annotations
from datetime import date
from decimal import Decimal
from typing import Optional

from ubl2cii.models import cii, ubl


def strip_trailing_zeroes(value: Decimal) -> Decimal:
    """Numeric normalization: 12.50 -> 12.5, 100.00 -> 100, 0.00 -> 0.

    Works on the digit tuple so no context precision or rounding applies; integral
    values with a positive exponent (1E+2) are expanded to plain integers.
    """
    if value == 0:
        return Decimal(0)
    sign, digits, exponent = value.as_tuple()
    if exponent > 0:
        return Decimal(int(value))
    digits = list(digits)
    while exponent < 0 and digits and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return Decimal((sign, tuple(digits) or (0,), exponent))


def convert_id(identifier: Optional[ubl.Identifier]) -> Optional[cii.ID]:
    if identifier is None:
        return None
    return cii.ID(value=identifier.value, scheme_id=identifier.scheme_id)


def convert_amount(amount: Optional[ubl.Amount], with_currency: bool = False) -> Optional[cii.Amount]:
    if amount is None:
        return None
    ret = cii.Amount()
    if with_currency:
        ret.currency_id = amount.currency_id
    if amount.value is not None:
        ret.value = strip_trailing_zeroes(amount.value)
    return ret


def convert_text(value: Optional[str]) -> Optional[cii.Text]:
    if value is None:
        return None
    return cii.Text(value=value)


def convert_note(note: Optional[str]) -> Optional[cii.Note]:
    # notes without text are dropped rather than emitted empty
    if not note:
        return None
    return cii.Note(content=[cii.Text(value=note)])


def format_date(value: Optional[date]) -> Optional[str]:
    # fixed Gregorian CCYYMMDD, never locale or timezone dependent
    if value is None:
        return None
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def convert_date(value: Optional[date]) -> Optional[cii.DateValue]:
    if value is None:
        return None
    return cii.DateValue(value=format_date(value))


def convert_date_time(value: Optional[date]) -> Optional[cii.DateTimeValue]:
    if value is None:
        return None
    return cii.DateTimeValue(value=format_date(value))


def convert_address(address: Optional[ubl.Address]) -> Optional[cii.TradeAddress]:
    if address is None:
        return None

    ret = cii.TradeAddress()
    if address.street_name:
        ret.line_one = address.street_name
    if address.additional_street_name:
        ret.line_two = address.additional_street_name
    if address.address_lines and address.address_lines[0]:
        ret.line_three = address.address_lines[0]
    if address.city_name:
        ret.city_name = address.city_name
    if address.postal_zone:
        ret.postcode_code = address.postal_zone
    if address.country_subentity is not None:
        ret.country_sub_division_names.append(convert_text(address.country_subentity))
    if address.country_code:
        ret.country_id = address.country_code
    return ret

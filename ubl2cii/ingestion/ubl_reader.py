"""
Bind an already-decoded JSON payload (dict) to the UBL dataclasses.

Keys are the dataclass field names; dates are ISO strings, decimals are strings
or numbers, binary values are base64. XML parsing is not done here.
"""

from __future__ import annotations
import base64
import binascii
import dataclasses
from datetime import date
from decimal import Decimal, InvalidOperation
import typing
from typing import Any, Dict, Union

from ubl2cii.models import ubl

DOCUMENT_TYPES = {
    "Invoice": ubl.Invoice,
    "CreditNote": ubl.CreditNote,
}


class UBLPayloadError(ValueError):
    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


def _parse_scalar(tp: type, raw: Any, path: str) -> Any:
    if tp is str:
        if not isinstance(raw, str):
            raise UBLPayloadError(path, "expected a string")
        return raw
    if tp is bool:
        if not isinstance(raw, bool):
            raise UBLPayloadError(path, "expected a boolean")
        return raw
    if tp is Decimal:
        # bool is an int subclass, reject it explicitly
        if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
            raise UBLPayloadError(path, "expected a decimal number")
        try:
            value = Decimal(str(raw))
        except InvalidOperation:
            raise UBLPayloadError(path, f"invalid decimal {raw!r}")
        if not value.is_finite():
            raise UBLPayloadError(path, f"invalid decimal {raw!r}")
        return value
    if tp is date:
        if not isinstance(raw, str):
            raise UBLPayloadError(path, "expected an ISO date string")
        try:
            return date.fromisoformat(raw)
        except ValueError:
            raise UBLPayloadError(path, f"invalid date {raw!r}")
    if tp is bytes:
        if not isinstance(raw, str):
            raise UBLPayloadError(path, "expected a base64 string")
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError):
            raise UBLPayloadError(path, "invalid base64 content")
    raise UBLPayloadError(path, f"unsupported type {tp!r}")


def _parse_value(tp: Any, raw: Any, path: str) -> Any:
    origin = typing.get_origin(tp)
    if origin is Union:
        if raw is None:
            return None
        inner = [a for a in typing.get_args(tp) if a is not type(None)]
        return _parse_value(inner[0], raw, path)

    if raw is None:
        raise UBLPayloadError(path, "value is required")

    if origin is list:
        if not isinstance(raw, list):
            raise UBLPayloadError(path, "expected a list")
        (item_type,) = typing.get_args(tp)
        return [_parse_value(item_type, item, f"{path}.{i}") for i, item in enumerate(raw)]

    if dataclasses.is_dataclass(tp):
        return _parse_dataclass(tp, raw, path)
    return _parse_scalar(tp, raw, path)


def _parse_dataclass(cls: type, raw: Any, path: str) -> Any:
    if not isinstance(raw, dict):
        raise UBLPayloadError(path, f"expected an object for {cls.__name__}")

    fields = dataclasses.fields(cls)
    unknown = set(raw) - {f.name for f in fields}
    if unknown:
        raise UBLPayloadError(path, f"unknown keys for {cls.__name__}: {', '.join(sorted(unknown))}")

    hints = typing.get_type_hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in fields:
        if f.name not in raw:
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise UBLPayloadError(f"{path}.{f.name}", "value is required")
            continue
        kwargs[f.name] = _parse_value(hints[f.name], raw[f.name], f"{path}.{f.name}")
    return cls(**kwargs)


def _body(payload: Dict[str, Any], expected: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise UBLPayloadError(expected, "payload must be a JSON object")
    document_type = payload.get("document_type", expected)
    if document_type != expected:
        raise UBLPayloadError("document_type", f"expected {expected!r}, got {document_type!r}")
    return {k: v for k, v in payload.items() if k != "document_type"}


def parse_invoice(payload: Dict[str, Any]) -> ubl.Invoice:
    return _parse_dataclass(ubl.Invoice, _body(payload, "Invoice"), "Invoice")


def parse_credit_note(payload: Dict[str, Any]) -> ubl.CreditNote:
    return _parse_dataclass(ubl.CreditNote, _body(payload, "CreditNote"), "CreditNote")


def parse_document(payload: Dict[str, Any]) -> Union[ubl.Invoice, ubl.CreditNote]:
    """Dispatch on payload["document_type"] ("Invoice" or "CreditNote")."""
    if not isinstance(payload, dict):
        raise UBLPayloadError("document", "payload must be a JSON object")
    document_type = payload.get("document_type")
    if document_type == "CreditNote":
        return parse_credit_note(payload)
    if document_type == "Invoice":
        return parse_invoice(payload)
    raise UBLPayloadError("document_type", f"must be one of {', '.join(DOCUMENT_TYPES)}")

from __future__ import annotations
import base64
import dataclasses
from decimal import Decimal
import json
from typing import Any, Dict

from ubl2cii.config.env import get_export_config
from ubl2cii.models import cii


def _to_json_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        out: Dict[str, Any] = {}
        # field order is schema order; absent values and empty lists are omitted,
        # empty (mandatory) sections stay as {}
        for f in dataclasses.fields(value):
            v = getattr(value, f.name)
            if v is None or (isinstance(v, list) and not v):
                continue
            out[f.name] = _to_json_value(v)
        return out
    if isinstance(value, list):
        return [_to_json_value(v) for v in value]
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


def cii_to_dict(document: cii.CrossIndustryInvoice) -> Dict[str, Any]:
    return _to_json_value(document)


_FROM_CONFIG = object()


def write_cii_json(document: cii.CrossIndustryInvoice, indent: Any = _FROM_CONFIG) -> str:
    """JSON text of the document; indent=None writes compact JSON."""
    if indent is _FROM_CONFIG:
        indent = get_export_config().indent
    return json.dumps(cii_to_dict(document), indent=indent)

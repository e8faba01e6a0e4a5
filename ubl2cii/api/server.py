from __future__ import annotations
import logging
from typing import Any, Callable

from flask import Flask, request, jsonify

from ubl2cii.config.env import get_api_config, get_logging_config
from ubl2cii.exports.writers import cii_to_dict
from ubl2cii.ingestion.ubl_reader import UBLPayloadError, parse_credit_note, parse_document, parse_invoice
from ubl2cii.mapper.engine import convert_document
from ubl2cii.mapper.errors import ErrorList

logger = logging.getLogger(__name__)

app = Flask(__name__)
# keep CII schema order in responses
app.json.sort_keys = False

# Configuration helpers (overridable via app.config in tests)

def _get_api_key() -> str | None:
    if 'API_KEY' in app.config:
        return app.config.get('API_KEY')
    return get_api_config().api_key


def _check_api_key():
    api_key = _get_api_key()
    if api_key:
        provided = request.headers.get('X-API-Key')
        if provided != api_key:
            return jsonify({'error': 'unauthorized'}), 401
    return None


@app.before_request
def _auth():
    # Only enforce for conversion routes; health check stays open
    if request.path.startswith('/convert'):
        return _check_api_key()
    return None


def _convert_payload(parse: Callable[[Any], Any]):
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        return jsonify({'error': 'request body must be JSON'}), 400
    try:
        document = parse(payload)
    except UBLPayloadError as e:
        logger.info("Rejected payload: %s", e)
        return jsonify({'error': str(e), 'path': e.path}), 400

    errors = ErrorList()
    try:
        result = convert_document(document, errors)
    except ValueError as e:
        # required UBL elements missing (line quantity, allowance amount)
        logger.warning("Conversion of %s failed: %s", document.id, e)
        return jsonify({'error': str(e)}), 422
    return jsonify({'document': cii_to_dict(result), 'issues': errors.to_list()})


@app.post('/convert')
def post_convert():
    return _convert_payload(parse_document)


@app.post('/convert/invoice')
def post_convert_invoice():
    return _convert_payload(parse_invoice)


@app.post('/convert/credit-note')
def post_convert_credit_note():
    return _convert_payload(parse_credit_note)


@app.get('/')
def read_root():
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    log_cfg = get_logging_config()
    logging.basicConfig(level=log_cfg.level, format=log_cfg.fmt)
    cfg = get_api_config()
    app.run(host=cfg.host, port=cfg.port)

import json
import logging
import sys

from ubl2cii.config.env import get_logging_config
from ubl2cii.exports.reports import conversion_report_md
from ubl2cii.exports.writers import write_cii_json
from ubl2cii.ingestion.ubl_reader import UBLPayloadError, parse_document
from ubl2cii.mapper.engine import convert_document
from ubl2cii.mapper.errors import ErrorList

USAGE = "Usage: python -m ubl2cii.cli <payload.json> [--report]"


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    report = "--report" in args
    paths = [a for a in args if a != "--report"]
    if len(paths) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    log_cfg = get_logging_config()
    logging.basicConfig(level=log_cfg.level, format=log_cfg.fmt)

    try:
        with open(paths[0], "r", encoding="utf-8") as f:
            payload = json.load(f)
        document = parse_document(payload)
    except (OSError, json.JSONDecodeError, UBLPayloadError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    errors = ErrorList()
    try:
        result = convert_document(document, errors)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(write_cii_json(result))
    if report:
        sys.stderr.write(conversion_report_md(errors, document.id))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Mapper: EN 16931 rule set from UBL 2.1 to CII D16B.

- fields.py: identifiers, amounts, text, dates, addresses
- entities.py: parties, references, taxes, allowances/charges, payment terms, lines
- engine.py: assembles the full CrossIndustryInvoice
- errors.py: caller-owned warning/error sink
"""

"""Typed document models.

- ubl.py: UBL 2.1 Invoice / CreditNote (source, frozen dataclasses)
- cii.py: CII D16B CrossIndustryInvoice (target, built by the mapper)
"""

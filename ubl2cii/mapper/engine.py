from __future__ import annotations
from datetime import date
import logging
from typing import Optional, Sequence, Union

from ubl2cii.models import cii, ubl
from ubl2cii.mapper.errors import ErrorList
from ubl2cii.mapper.entities import (
    convert_additional_referenced_document,
    convert_applicable_trade_tax,
    convert_line,
    convert_party,
    convert_specified_trade_allowance_charge,
    convert_specified_trade_payment_terms,
    create_header_monetary_summation,
    create_header_trade_delivery,
)
from ubl2cii.mapper.fields import convert_date, convert_date_time, convert_note, convert_text

logger = logging.getLogger(__name__)

# EN 16931 mandates this literal as the name of the procuring project (BT-11)
PROJECT_REFERENCE_NAME = "Project reference"

UBLDocument = Union[ubl.Invoice, ubl.CreditNote]
UBLLine = Union[ubl.InvoiceLine, ubl.CreditNoteLine]


def _check_preconditions(document: object, errors: Optional[ErrorList], expected: type) -> None:
    if document is None:
        raise ValueError(f"{expected.__name__} document is required")
    if errors is None:
        raise ValueError("ErrorList is required")
    if not isinstance(document, expected):
        raise TypeError(f"expected {expected.__name__}, got {type(document).__name__}")


def _log_ignored(document: UBLDocument, what: str, count: int) -> None:
    # CII allows one occurrence; surplus entries are dropped without a warning
    if count > 1:
        logger.debug("%s: ignoring %d additional %s entries", document.id, count - 1, what)


def _create_document_context(document: UBLDocument) -> cii.ExchangedDocumentContext:
    ret = cii.ExchangedDocumentContext()
    # BT-24
    if document.customization_id:
        ret.guideline_specified_document_context_parameters.append(
            cii.DocumentContextParameter(id=document.customization_id)
        )
    return ret


def _create_exchanged_document(document: UBLDocument, type_code: Optional[str]) -> cii.ExchangedDocument:
    ret = cii.ExchangedDocument()
    # BT-1, BT-3, BT-2
    if document.id:
        ret.id = document.id
    if type_code:
        ret.type_code = type_code
    ret.issue_date_time = convert_date_time(document.issue_date)

    for note in document.notes:
        converted = convert_note(note)
        if converted is not None:
            ret.included_notes.append(converted)
    return ret


def _create_header_trade_agreement(document: UBLDocument) -> cii.HeaderTradeAgreement:
    ret = cii.HeaderTradeAgreement()

    # BT-10
    if document.buyer_reference:
        ret.buyer_reference = document.buyer_reference

    if document.accounting_supplier_party is not None:
        ret.seller_trade_party = convert_party(document.accounting_supplier_party.party)
    if document.accounting_customer_party is not None:
        ret.buyer_trade_party = convert_party(document.accounting_customer_party.party)

    # BT-11, first project reference only
    _log_ignored(document, "ProjectReference", len(document.project_references))
    if document.project_references and document.project_references[0].id:
        ret.specified_procuring_project = cii.ProcuringProject(
            id=document.project_references[0].id,
            name=PROJECT_REFERENCE_NAME,
        )

    # BT-13
    if document.order_reference is not None and document.order_reference.id is not None:
        ret.buyer_order_referenced_document = cii.ReferencedDocument(issuer_assigned_id=document.order_reference.id)

    # BT-12, first contract reference only
    _log_ignored(document, "ContractDocumentReference", len(document.contract_document_references))
    if document.contract_document_references:
        ret.contract_referenced_document = cii.ReferencedDocument(
            issuer_assigned_id=document.contract_document_references[0].id or None
        )

    for doc_ref in document.additional_document_references:
        ret.additional_referenced_documents.append(convert_additional_referenced_document(doc_ref))
    return ret


def _get_or_create_first_trade_tax(settlement: cii.HeaderTradeSettlement) -> cii.TradeTax:
    """Return the first header trade tax, appending an empty one if there is none."""
    if not settlement.applicable_trade_taxes:
        settlement.applicable_trade_taxes.append(cii.TradeTax())
    return settlement.applicable_trade_taxes[0]


def _create_header_trade_settlement(document: UBLDocument, due_date: Optional[date]) -> cii.HeaderTradeSettlement:
    ret = cii.HeaderTradeSettlement()

    _log_ignored(document, "PaymentMeans", len(document.payment_means))
    payment_means = document.payment_means[0] if document.payment_means else None

    # BT-83, first payment id of the first payment means
    if payment_means is not None and payment_means.payment_ids and payment_means.payment_ids[0]:
        ret.payment_references.append(convert_text(payment_means.payment_ids[0]))

    # BT-5, BT-6
    if document.document_currency_code:
        ret.invoice_currency_code = document.document_currency_code
    if document.tax_currency_code:
        ret.tax_currency_code = document.tax_currency_code

    ret.payee_trade_party = convert_party(document.payee_party)

    if payment_means is not None:
        account = cii.CreditorFinancialAccount()
        if payment_means.payee_financial_account is not None and payment_means.payee_financial_account.id:
            account.iban_id = payment_means.payee_financial_account.id
        ret.specified_trade_settlement_payment_means.append(
            cii.TradeSettlementPaymentMeans(
                type_code=payment_means.payment_means_code or None,
                payee_party_creditor_financial_account=account,
            )
        )

    for tax_total in document.tax_totals:
        for tax_subtotal in tax_total.tax_subtotals:
            ret.applicable_trade_taxes.append(convert_applicable_trade_tax(tax_subtotal))

    # BT-7
    if document.tax_point_date is not None:
        _get_or_create_first_trade_tax(ret).tax_point_date = convert_date(document.tax_point_date)

    if document.invoice_periods:
        period = document.invoice_periods[0]

        # BT-8
        if period.description_codes and period.description_codes[0]:
            _get_or_create_first_trade_tax(ret).due_date_type_code = period.description_codes[0]

        ret.billing_specified_period = cii.SpecifiedPeriod(
            start_date_time=convert_date_time(period.start_date),
            end_date_time=convert_date_time(period.end_date),
        )

    for allowance_charge in document.allowance_charges:
        ret.specified_trade_allowance_charges.append(convert_specified_trade_allowance_charge(allowance_charge))

    for payment_terms in document.payment_terms:
        ret.specified_trade_payment_terms.append(
            convert_specified_trade_payment_terms(payment_terms, payment_means, due_date)
        )

    tax_total_amounts = [tax_total.tax_amount for tax_total in document.tax_totals]
    ret.specified_trade_settlement_header_monetary_summation = create_header_monetary_summation(
        document.legal_monetary_total, tax_total_amounts
    )

    # BT-19
    if document.accounting_cost:
        ret.receivable_specified_trade_accounting_accounts.append(
            cii.TradeAccountingAccount(id=document.accounting_cost)
        )
    return ret


def _convert(
    document: UBLDocument,
    type_code: Optional[str],
    lines: Sequence[UBLLine],
    due_date: Optional[date],
) -> cii.CrossIndustryInvoice:
    logger.debug("Converting %s %s with %d lines", type(document).__name__, document.id, len(lines))

    context = _create_document_context(document)
    header = _create_exchanged_document(document, type_code)

    transaction = cii.SupplyChainTradeTransaction()
    for line in lines:
        transaction.included_supply_chain_trade_line_items.append(convert_line(line))

    transaction.applicable_header_trade_agreement = _create_header_trade_agreement(document)

    _log_ignored(document, "Delivery", len(document.deliveries))
    transaction.applicable_header_trade_delivery = create_header_trade_delivery(
        document.deliveries[0] if document.deliveries else None
    )

    transaction.applicable_header_trade_settlement = _create_header_trade_settlement(document, due_date)

    ret = cii.CrossIndustryInvoice(
        exchanged_document_context=context,
        exchanged_document=header,
        supply_chain_trade_transaction=transaction,
    )
    logger.debug("Converted %s %s", type(document).__name__, document.id)
    return ret


def convert_invoice(invoice: ubl.Invoice, errors: ErrorList) -> cii.CrossIndustryInvoice:
    """Convert a UBL 2.1 Invoice into a CII D16B CrossIndustryInvoice.

    Raises ValueError/TypeError before any work if the invoice or the error list
    is missing. The error list is the caller's sink; the mapping itself does not
    report normalizations into it.
    """
    _check_preconditions(invoice, errors, ubl.Invoice)
    return _convert(invoice, invoice.invoice_type_code, invoice.invoice_lines, invoice.due_date)


def convert_credit_note(credit_note: ubl.CreditNote, errors: ErrorList) -> cii.CrossIndustryInvoice:
    """Convert a UBL 2.1 CreditNote; BT-9 then comes from the first PaymentMeans."""
    _check_preconditions(credit_note, errors, ubl.CreditNote)
    return _convert(credit_note, credit_note.credit_note_type_code, credit_note.credit_note_lines, None)


def convert_document(document: UBLDocument, errors: ErrorList) -> cii.CrossIndustryInvoice:
    if isinstance(document, ubl.CreditNote):
        return convert_credit_note(document, errors)
    return convert_invoice(document, errors)

from __future__ import annotations
from datetime import date
from typing import List, Optional

from ubl2cii.models import cii, ubl
from ubl2cii.mapper.fields import (
    convert_address,
    convert_amount,
    convert_date,
    convert_date_time,
    convert_id,
    convert_note,
    convert_text,
)

# BT-17 tender or lot reference; BT-18 uses 130. 916 (BT-122) is the fallback.
ORIGINATOR_DOCUMENT_TYPE_CODE = "50"
INVOICED_OBJECT_DOCUMENT_TYPE_CODE = "130"
REFERENCE_DOCUMENT_TYPE_CODE = "916"


def normalize_tax_scheme_id(scheme_id: Optional[str]) -> Optional[str]:
    """CII tax registrations must use the "VA" scheme where UBL says "VAT"."""
    if scheme_id == "VAT":
        return "VA"
    return scheme_id


def is_originator_document_reference_type_code(code: Optional[str]) -> bool:
    return code == ORIGINATOR_DOCUMENT_TYPE_CODE


def is_valid_document_reference_type_code(code: Optional[str]) -> bool:
    # 916 is deliberately not in the admitted set
    return is_originator_document_reference_type_code(code) or code == INVOICED_OBJECT_DOCUMENT_TYPE_CODE


def convert_party(party: Optional[ubl.Party]) -> Optional[cii.TradeParty]:
    """Map a UBL Party onto a CII TradeParty.

    - every PartyIdentification becomes an ID
    - the first PartyName is the party name; if there is none, the first legal
      entity's registration name fills the mandatory name
    - EndpointID becomes a URI universal communication
    - each PartyTaxScheme with a company id becomes a tax registration whose
      scheme is the tax scheme id ("VAT" -> "VA")
    """
    if party is None:
        return None

    ret = cii.TradeParty()
    for party_id in party.party_identifications:
        converted = convert_id(party_id)
        if converted is not None:
            ret.ids.append(converted)

    if party.party_names and party.party_names[0]:
        ret.name = party.party_names[0]

    if party.party_legal_entities:
        legal_entity = party.party_legal_entities[0]

        organization = cii.LegalOrganization()
        if legal_entity.registration_name:
            organization.trading_business_name = legal_entity.registration_name
        organization.id = convert_id(legal_entity.company_id)
        organization.postal_trade_address = convert_address(legal_entity.registration_address)

        if not ret.name and legal_entity.registration_name:
            ret.name = legal_entity.registration_name

        ret.specified_legal_organization = organization

    ret.postal_trade_address = convert_address(party.postal_address)

    if party.endpoint_id is not None:
        ret.uri_universal_communications.append(cii.UniversalCommunication(uri_id=convert_id(party.endpoint_id)))

    for party_tax_scheme in party.party_tax_schemes:
        if party_tax_scheme.company_id is None or not party_tax_scheme.company_id.value:
            continue
        tax_id = convert_id(party_tax_scheme.company_id)
        if party_tax_scheme.tax_scheme is not None:
            scheme_id = normalize_tax_scheme_id(party_tax_scheme.tax_scheme.id)
            if scheme_id:
                tax_id.scheme_id = scheme_id
        ret.specified_tax_registrations.append(cii.TaxRegistration(id=tax_id))
    return ret


def convert_additional_referenced_document(doc_ref: ubl.DocumentReference) -> cii.ReferencedDocument:
    ret = cii.ReferencedDocument()
    if doc_ref.id:
        ret.issuer_assigned_id = doc_ref.id

    if is_valid_document_reference_type_code(doc_ref.document_type_code):
        ret.type_code = doc_ref.document_type_code
    else:
        ret.type_code = REFERENCE_DOCUMENT_TYPE_CODE

    ret.formatted_issue_date_time = convert_date(doc_ref.issue_date)

    for description in doc_ref.document_descriptions:
        ret.names.append(
            cii.Text(
                value=description.value or None,
                language_id=description.language_id or None,
                language_locale_id=description.language_locale_id or None,
            )
        )

    attachment = doc_ref.attachment
    if attachment is not None:
        # ExternalReference and EmbeddedDocumentBinaryObject should be mutually
        # exclusive; both are passed through if the source has both
        external = attachment.external_reference
        if external is not None and external.uri:
            ret.uri_id = external.uri

        embedded = attachment.embedded_document_binary_object
        if embedded is not None:
            ret.attachment_binary_objects.append(
                cii.BinaryObject(
                    value=embedded.value,
                    mime_code=embedded.mime_code or None,
                    filename=embedded.filename or None,
                )
            )
    return ret


def convert_category_trade_tax(tax_category: ubl.TaxCategory) -> cii.TradeTax:
    ret = cii.TradeTax()
    if tax_category.tax_scheme is not None and tax_category.tax_scheme.id:
        ret.type_code = tax_category.tax_scheme.id
    if tax_category.id:
        ret.category_code = tax_category.id
    ret.rate_applicable_percent = tax_category.percent
    return ret


def convert_applicable_trade_tax(tax_subtotal: ubl.TaxSubtotal) -> cii.TradeTax:
    tax_category = tax_subtotal.tax_category

    ret = convert_category_trade_tax(tax_category)
    ret.calculated_amount = convert_amount(tax_subtotal.tax_amount)
    ret.basis_amount = convert_amount(tax_subtotal.taxable_amount)
    if tax_category.tax_exemption_reasons and tax_category.tax_exemption_reasons[0]:
        ret.exemption_reason = tax_category.tax_exemption_reasons[0]
    if tax_category.tax_exemption_reason_code:
        ret.exemption_reason_code = tax_category.tax_exemption_reason_code
    return ret


def convert_specified_trade_allowance_charge(allowance_charge: ubl.AllowanceCharge) -> cii.TradeAllowanceCharge:
    if allowance_charge.amount is None:
        raise ValueError("AllowanceCharge without Amount")

    ret = cii.TradeAllowanceCharge(charge_indicator=cii.Indicator(indicator=allowance_charge.charge_indicator))
    ret.actual_amount = convert_amount(allowance_charge.amount)
    if allowance_charge.allowance_charge_reason_code:
        ret.reason_code = allowance_charge.allowance_charge_reason_code
    if allowance_charge.allowance_charge_reasons and allowance_charge.allowance_charge_reasons[0]:
        ret.reason = allowance_charge.allowance_charge_reasons[0]
    ret.calculation_percent = allowance_charge.multiplier_factor_numeric
    if allowance_charge.base_amount is not None:
        ret.basis_amount = cii.Amount(value=allowance_charge.base_amount.value)

    if allowance_charge.tax_categories:
        ret.category_trade_taxes.append(convert_category_trade_tax(allowance_charge.tax_categories[0]))
    return ret


def convert_specified_trade_payment_terms(
    payment_terms: ubl.PaymentTerms,
    payment_means: Optional[ubl.PaymentMeans],
    invoice_due_date: Optional[date],
) -> cii.TradePaymentTerms:
    ret = cii.TradePaymentTerms()
    for note in payment_terms.notes:
        ret.descriptions.append(convert_text(note))

    # BT-9: the document due date wins; credit notes only have it on PaymentMeans
    if invoice_due_date is not None:
        ret.due_date_date_time = convert_date_time(invoice_due_date)
    elif payment_means is not None and payment_means.payment_due_date is not None:
        ret.due_date_date_time = convert_date_time(payment_means.payment_due_date)
    return ret


def create_header_monetary_summation(
    monetary_total: Optional[ubl.MonetaryTotal],
    tax_total_amounts: List[Optional[ubl.Amount]],
) -> cii.HeaderMonetarySummation:
    """Build the header summation in schema order.

    Line, charge, allowance and tax basis totals come first, then every tax total
    amount (BT-110/BT-111, currency mandatory), then rounding, grand total,
    prepaid and due payable amounts. Without a monetary total only the tax total
    amounts are emitted.
    """
    ret = cii.HeaderMonetarySummation()

    def _add(target: List[cii.Amount], amount: Optional[ubl.Amount], with_currency: bool = False) -> None:
        converted = convert_amount(amount, with_currency)
        if converted is not None:
            target.append(converted)

    if monetary_total is not None:
        _add(ret.line_total_amounts, monetary_total.line_extension_amount)
        _add(ret.charge_total_amounts, monetary_total.charge_total_amount)
        _add(ret.allowance_total_amounts, monetary_total.allowance_total_amount)
        _add(ret.tax_basis_total_amounts, monetary_total.tax_exclusive_amount)

    for tax_amount in tax_total_amounts:
        _add(ret.tax_total_amounts, tax_amount, with_currency=True)

    if monetary_total is not None:
        _add(ret.rounding_amounts, monetary_total.payable_rounding_amount)
        _add(ret.grand_total_amounts, monetary_total.tax_inclusive_amount)
        _add(ret.total_prepaid_amounts, monetary_total.prepaid_amount)
        _add(ret.due_payable_amounts, monetary_total.payable_amount)
    return ret


def create_header_trade_delivery(delivery: Optional[ubl.Delivery]) -> cii.HeaderTradeDelivery:
    # mandatory in CII, returned empty when there is no delivery
    ret = cii.HeaderTradeDelivery()
    if delivery is None:
        return ret

    location = delivery.delivery_location
    if location is not None:
        ship_to = cii.TradeParty()
        location_id = convert_id(location.id)
        if location_id is not None:
            ship_to.ids.append(location_id)
        ship_to.postal_trade_address = convert_address(location.address)
        ret.ship_to_trade_party = ship_to

    if delivery.actual_delivery_date is not None:
        ret.actual_delivery_supply_chain_event = cii.SupplyChainEvent(
            occurrence_date_time=convert_date_time(delivery.actual_delivery_date)
        )
    return ret


def _convert_trade_product(item: ubl.Item) -> cii.TradeProduct:
    ret = cii.TradeProduct()
    if item.standard_item_identification is not None:
        ret.global_id = convert_id(item.standard_item_identification)
    if item.sellers_item_identification is not None and item.sellers_item_identification.value:
        ret.seller_assigned_id = item.sellers_item_identification.value
    if item.name is not None:
        ret.names.append(convert_text(item.name))
    if item.descriptions and item.descriptions[0]:
        ret.description = item.descriptions[0]

    for prop in item.additional_item_properties:
        characteristic = cii.ProductCharacteristic()
        if prop.name is not None:
            characteristic.descriptions.append(convert_text(prop.name))
        if prop.value is not None:
            characteristic.values.append(convert_text(prop.value))
        ret.applicable_product_characteristics.append(characteristic)

    for classification in item.commodity_classifications:
        code = classification.item_classification_code
        ret.designated_product_classifications.append(
            cii.ProductClassification(class_code=cii.Code(value=code.value or None, list_id=code.list_id or None))
        )
    return ret


def convert_line(line: ubl.InvoiceLine | ubl.CreditNoteLine) -> cii.SupplyChainTradeLineItem:
    """Convert one invoice or credit note line into a CII line item."""
    quantity = line.quantity
    if quantity is None:
        raise ValueError(f"Line {line.id!r} without invoiced/credited quantity")

    line_document = cii.DocumentLineDocument(line_id=line.id)
    for note in line.notes:
        converted = convert_note(note)
        if converted is not None:
            line_document.included_notes.append(converted)

    agreement = cii.LineTradeAgreement(net_price_product_trade_price=cii.TradePrice())
    if line.order_line_references:
        # BT-132, only the first order line reference is used
        agreement.buyer_order_referenced_document = cii.ReferencedDocument(
            line_id=line.order_line_references[0].line_id
        )
    if line.price is not None and line.price.price_amount is not None:
        agreement.net_price_product_trade_price.charge_amounts.append(convert_amount(line.price.price_amount))

    delivery = cii.LineTradeDelivery(billed_quantity=cii.Quantity(value=quantity.value, unit_code=quantity.unit_code))

    settlement = cii.LineTradeSettlement()
    for tax_category in line.item.classified_tax_categories:
        settlement.applicable_trade_taxes.append(convert_category_trade_tax(tax_category))

    summation = cii.LineMonetarySummation()
    line_total = convert_amount(line.line_extension_amount)
    if line_total is not None:
        summation.line_total_amounts.append(line_total)
    settlement.specified_trade_settlement_line_monetary_summation = summation

    if line.accounting_cost:
        settlement.receivable_specified_trade_accounting_accounts.append(
            cii.TradeAccountingAccount(id=line.accounting_cost)
        )

    return cii.SupplyChainTradeLineItem(
        associated_document_line_document=line_document,
        specified_trade_product=_convert_trade_product(line.item),
        specified_line_trade_agreement=agreement,
        specified_line_trade_delivery=delivery,
        specified_line_trade_settlement=settlement,
    )

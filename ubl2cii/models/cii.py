"""
CII D16B (Cross Industry Invoice) object model written by the mapper.

Field order inside each dataclass follows the element order of the CII schema so
that a serializer walking the fields emits positionally valid output.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

DATE_FORMAT_102 = "102"  # UN/CEFACT 2379: CCYYMMDD


@dataclass
class ID:
    value: Optional[str] = None
    scheme_id: Optional[str] = None


@dataclass
class Amount:
    value: Optional[Decimal] = None
    currency_id: Optional[str] = None


@dataclass
class Quantity:
    value: Decimal
    unit_code: str


@dataclass
class Text:
    value: Optional[str] = None
    language_id: Optional[str] = None
    language_locale_id: Optional[str] = None


@dataclass
class Code:
    value: Optional[str] = None
    list_id: Optional[str] = None


@dataclass
class Indicator:
    indicator: bool


@dataclass
class DateValue:
    value: str
    format: str = DATE_FORMAT_102


@dataclass
class DateTimeValue:
    value: str
    format: str = DATE_FORMAT_102


@dataclass
class BinaryObject:
    value: Optional[bytes] = None
    mime_code: Optional[str] = None
    filename: Optional[str] = None


@dataclass
class Note:
    content: List[Text] = field(default_factory=list)


@dataclass
class TradeAddress:
    postcode_code: Optional[str] = None
    line_one: Optional[str] = None
    line_two: Optional[str] = None
    line_three: Optional[str] = None
    city_name: Optional[str] = None
    country_id: Optional[str] = None
    country_sub_division_names: List[Text] = field(default_factory=list)


@dataclass
class LegalOrganization:
    id: Optional[ID] = None
    trading_business_name: Optional[str] = None
    postal_trade_address: Optional[TradeAddress] = None


@dataclass
class UniversalCommunication:
    uri_id: Optional[ID] = None


@dataclass
class TaxRegistration:
    id: Optional[ID] = None


@dataclass
class TradeParty:
    ids: List[ID] = field(default_factory=list)
    name: Optional[str] = None
    specified_legal_organization: Optional[LegalOrganization] = None
    postal_trade_address: Optional[TradeAddress] = None
    uri_universal_communications: List[UniversalCommunication] = field(default_factory=list)
    specified_tax_registrations: List[TaxRegistration] = field(default_factory=list)


@dataclass
class ReferencedDocument:
    issuer_assigned_id: Optional[str] = None
    uri_id: Optional[str] = None
    line_id: Optional[str] = None
    type_code: Optional[str] = None
    names: List[Text] = field(default_factory=list)
    attachment_binary_objects: List[BinaryObject] = field(default_factory=list)
    formatted_issue_date_time: Optional[DateValue] = None


@dataclass
class ProcuringProject:
    id: str
    name: str


@dataclass
class TradeTax:
    calculated_amount: Optional[Amount] = None
    type_code: Optional[str] = None
    exemption_reason: Optional[str] = None
    basis_amount: Optional[Amount] = None
    category_code: Optional[str] = None
    exemption_reason_code: Optional[str] = None
    tax_point_date: Optional[DateValue] = None
    due_date_type_code: Optional[str] = None
    rate_applicable_percent: Optional[Decimal] = None


@dataclass
class TradeAllowanceCharge:
    charge_indicator: Indicator
    calculation_percent: Optional[Decimal] = None
    basis_amount: Optional[Amount] = None
    actual_amount: Optional[Amount] = None
    reason_code: Optional[str] = None
    reason: Optional[str] = None
    category_trade_taxes: List[TradeTax] = field(default_factory=list)


@dataclass
class TradePaymentTerms:
    descriptions: List[Text] = field(default_factory=list)
    due_date_date_time: Optional[DateTimeValue] = None


@dataclass
class CreditorFinancialAccount:
    iban_id: Optional[str] = None


@dataclass
class TradeSettlementPaymentMeans:
    type_code: Optional[str] = None
    payee_party_creditor_financial_account: Optional[CreditorFinancialAccount] = None


@dataclass
class SpecifiedPeriod:
    start_date_time: Optional[DateTimeValue] = None
    end_date_time: Optional[DateTimeValue] = None


@dataclass
class TradeAccountingAccount:
    id: str


@dataclass
class HeaderMonetarySummation:
    line_total_amounts: List[Amount] = field(default_factory=list)
    charge_total_amounts: List[Amount] = field(default_factory=list)
    allowance_total_amounts: List[Amount] = field(default_factory=list)
    tax_basis_total_amounts: List[Amount] = field(default_factory=list)
    tax_total_amounts: List[Amount] = field(default_factory=list)
    rounding_amounts: List[Amount] = field(default_factory=list)
    grand_total_amounts: List[Amount] = field(default_factory=list)
    total_prepaid_amounts: List[Amount] = field(default_factory=list)
    due_payable_amounts: List[Amount] = field(default_factory=list)


@dataclass
class LineMonetarySummation:
    line_total_amounts: List[Amount] = field(default_factory=list)


@dataclass
class HeaderTradeAgreement:
    buyer_reference: Optional[str] = None
    seller_trade_party: Optional[TradeParty] = None
    buyer_trade_party: Optional[TradeParty] = None
    buyer_order_referenced_document: Optional[ReferencedDocument] = None
    contract_referenced_document: Optional[ReferencedDocument] = None
    additional_referenced_documents: List[ReferencedDocument] = field(default_factory=list)
    specified_procuring_project: Optional[ProcuringProject] = None


@dataclass
class SupplyChainEvent:
    occurrence_date_time: Optional[DateTimeValue] = None


@dataclass
class HeaderTradeDelivery:
    ship_to_trade_party: Optional[TradeParty] = None
    actual_delivery_supply_chain_event: Optional[SupplyChainEvent] = None


@dataclass
class HeaderTradeSettlement:
    payment_references: List[Text] = field(default_factory=list)
    tax_currency_code: Optional[str] = None
    invoice_currency_code: Optional[str] = None
    payee_trade_party: Optional[TradeParty] = None
    specified_trade_settlement_payment_means: List[TradeSettlementPaymentMeans] = field(default_factory=list)
    applicable_trade_taxes: List[TradeTax] = field(default_factory=list)
    billing_specified_period: Optional[SpecifiedPeriod] = None
    specified_trade_allowance_charges: List[TradeAllowanceCharge] = field(default_factory=list)
    specified_trade_payment_terms: List[TradePaymentTerms] = field(default_factory=list)
    specified_trade_settlement_header_monetary_summation: Optional[HeaderMonetarySummation] = None
    receivable_specified_trade_accounting_accounts: List[TradeAccountingAccount] = field(default_factory=list)


@dataclass
class DocumentLineDocument:
    line_id: Optional[str] = None
    included_notes: List[Note] = field(default_factory=list)


@dataclass
class ProductCharacteristic:
    descriptions: List[Text] = field(default_factory=list)
    values: List[Text] = field(default_factory=list)


@dataclass
class ProductClassification:
    class_code: Optional[Code] = None


@dataclass
class TradeProduct:
    global_id: Optional[ID] = None
    seller_assigned_id: Optional[str] = None
    names: List[Text] = field(default_factory=list)
    description: Optional[str] = None
    applicable_product_characteristics: List[ProductCharacteristic] = field(default_factory=list)
    designated_product_classifications: List[ProductClassification] = field(default_factory=list)


@dataclass
class TradePrice:
    charge_amounts: List[Amount] = field(default_factory=list)


@dataclass
class LineTradeAgreement:
    buyer_order_referenced_document: Optional[ReferencedDocument] = None
    net_price_product_trade_price: Optional[TradePrice] = None


@dataclass
class LineTradeDelivery:
    billed_quantity: Optional[Quantity] = None


@dataclass
class LineTradeSettlement:
    applicable_trade_taxes: List[TradeTax] = field(default_factory=list)
    specified_trade_settlement_line_monetary_summation: Optional[LineMonetarySummation] = None
    receivable_specified_trade_accounting_accounts: List[TradeAccountingAccount] = field(default_factory=list)


@dataclass
class SupplyChainTradeLineItem:
    associated_document_line_document: DocumentLineDocument
    specified_trade_product: TradeProduct
    specified_line_trade_agreement: LineTradeAgreement
    specified_line_trade_delivery: LineTradeDelivery
    specified_line_trade_settlement: LineTradeSettlement


@dataclass
class SupplyChainTradeTransaction:
    included_supply_chain_trade_line_items: List[SupplyChainTradeLineItem] = field(default_factory=list)
    applicable_header_trade_agreement: Optional[HeaderTradeAgreement] = None
    applicable_header_trade_delivery: Optional[HeaderTradeDelivery] = None
    applicable_header_trade_settlement: Optional[HeaderTradeSettlement] = None


@dataclass
class DocumentContextParameter:
    id: str


@dataclass
class ExchangedDocumentContext:
    guideline_specified_document_context_parameters: List[DocumentContextParameter] = field(default_factory=list)


@dataclass
class ExchangedDocument:
    id: Optional[str] = None
    type_code: Optional[str] = None
    issue_date_time: Optional[DateTimeValue] = None
    included_notes: List[Note] = field(default_factory=list)


@dataclass
class CrossIndustryInvoice:
    exchanged_document_context: ExchangedDocumentContext
    exchanged_document: ExchangedDocument
    supply_chain_trade_transaction: SupplyChainTradeTransaction

"""
UBL 2.1 Invoice / CreditNote object model (read-only input of the mapper).

Only the parts used by the EN 16931 mapping are modelled. Field names follow the
UBL element names in snake_case; repeated elements are lists even where EN 16931
allows a single occurrence.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class Identifier:
    value: Optional[str] = None
    scheme_id: Optional[str] = None


@dataclass(frozen=True)
class Amount:
    value: Decimal
    currency_id: Optional[str] = None


@dataclass(frozen=True)
class Quantity:
    value: Decimal
    unit_code: str


@dataclass(frozen=True)
class Code:
    value: Optional[str] = None
    list_id: Optional[str] = None


@dataclass(frozen=True)
class Description:
    value: Optional[str] = None
    language_id: Optional[str] = None
    language_locale_id: Optional[str] = None


@dataclass(frozen=True)
class Address:
    street_name: Optional[str] = None
    additional_street_name: Optional[str] = None
    address_lines: List[str] = field(default_factory=list)
    city_name: Optional[str] = None
    postal_zone: Optional[str] = None
    country_subentity: Optional[str] = None
    country_code: Optional[str] = None  # cac:Country/cbc:IdentificationCode


@dataclass(frozen=True)
class TaxScheme:
    id: Optional[str] = None


@dataclass(frozen=True)
class PartyTaxScheme:
    company_id: Optional[Identifier] = None
    tax_scheme: Optional[TaxScheme] = None


@dataclass(frozen=True)
class PartyLegalEntity:
    registration_name: Optional[str] = None
    company_id: Optional[Identifier] = None
    registration_address: Optional[Address] = None


@dataclass(frozen=True)
class Party:
    endpoint_id: Optional[Identifier] = None
    party_identifications: List[Identifier] = field(default_factory=list)
    party_names: List[str] = field(default_factory=list)
    postal_address: Optional[Address] = None
    party_tax_schemes: List[PartyTaxScheme] = field(default_factory=list)
    party_legal_entities: List[PartyLegalEntity] = field(default_factory=list)


@dataclass(frozen=True)
class SupplierParty:
    party: Optional[Party] = None


@dataclass(frozen=True)
class CustomerParty:
    party: Optional[Party] = None


@dataclass(frozen=True)
class TaxCategory:
    id: Optional[str] = None
    percent: Optional[Decimal] = None
    tax_exemption_reason_code: Optional[str] = None
    tax_exemption_reasons: List[str] = field(default_factory=list)
    tax_scheme: Optional[TaxScheme] = None


@dataclass(frozen=True)
class TaxSubtotal:
    tax_category: TaxCategory
    taxable_amount: Optional[Amount] = None
    tax_amount: Optional[Amount] = None


@dataclass(frozen=True)
class TaxTotal:
    tax_amount: Optional[Amount] = None
    tax_subtotals: List[TaxSubtotal] = field(default_factory=list)


@dataclass(frozen=True)
class AllowanceCharge:
    charge_indicator: bool
    amount: Optional[Amount] = None  # required by UBL
    allowance_charge_reason_code: Optional[str] = None
    allowance_charge_reasons: List[str] = field(default_factory=list)
    multiplier_factor_numeric: Optional[Decimal] = None
    base_amount: Optional[Amount] = None
    tax_categories: List[TaxCategory] = field(default_factory=list)


@dataclass(frozen=True)
class PaymentTerms:
    notes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FinancialAccount:
    id: Optional[str] = None


@dataclass(frozen=True)
class PaymentMeans:
    payment_means_code: Optional[str] = None
    payment_due_date: Optional[date] = None
    payment_ids: List[str] = field(default_factory=list)
    payee_financial_account: Optional[FinancialAccount] = None


@dataclass(frozen=True)
class ExternalReference:
    uri: Optional[str] = None


@dataclass(frozen=True)
class BinaryObject:
    value: Optional[bytes] = None
    mime_code: Optional[str] = None
    filename: Optional[str] = None


@dataclass(frozen=True)
class Attachment:
    embedded_document_binary_object: Optional[BinaryObject] = None
    external_reference: Optional[ExternalReference] = None


@dataclass(frozen=True)
class DocumentReference:
    id: Optional[str] = None
    issue_date: Optional[date] = None
    document_type_code: Optional[str] = None
    document_descriptions: List[Description] = field(default_factory=list)
    attachment: Optional[Attachment] = None


@dataclass(frozen=True)
class OrderReference:
    id: Optional[str] = None


@dataclass(frozen=True)
class ProjectReference:
    id: Optional[str] = None


@dataclass(frozen=True)
class Location:
    id: Optional[Identifier] = None
    address: Optional[Address] = None


@dataclass(frozen=True)
class Delivery:
    actual_delivery_date: Optional[date] = None
    delivery_location: Optional[Location] = None


@dataclass(frozen=True)
class Period:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description_codes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MonetaryTotal:
    line_extension_amount: Optional[Amount] = None
    tax_exclusive_amount: Optional[Amount] = None
    tax_inclusive_amount: Optional[Amount] = None
    allowance_total_amount: Optional[Amount] = None
    charge_total_amount: Optional[Amount] = None
    prepaid_amount: Optional[Amount] = None
    payable_rounding_amount: Optional[Amount] = None
    payable_amount: Optional[Amount] = None


@dataclass(frozen=True)
class ItemProperty:
    name: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True)
class CommodityClassification:
    item_classification_code: Code


@dataclass(frozen=True)
class Item:
    name: Optional[str] = None
    descriptions: List[str] = field(default_factory=list)
    sellers_item_identification: Optional[Identifier] = None
    standard_item_identification: Optional[Identifier] = None
    additional_item_properties: List[ItemProperty] = field(default_factory=list)
    commodity_classifications: List[CommodityClassification] = field(default_factory=list)
    classified_tax_categories: List[TaxCategory] = field(default_factory=list)


@dataclass(frozen=True)
class Price:
    price_amount: Optional[Amount] = None


@dataclass(frozen=True)
class OrderLineReference:
    line_id: Optional[str] = None


@dataclass(frozen=True)
class _DocumentLine:
    id: Optional[str] = None
    notes: List[str] = field(default_factory=list)
    line_extension_amount: Optional[Amount] = None
    accounting_cost: Optional[str] = None
    order_line_references: List[OrderLineReference] = field(default_factory=list)
    item: Item = field(default_factory=Item)
    price: Optional[Price] = None


@dataclass(frozen=True)
class InvoiceLine(_DocumentLine):
    invoiced_quantity: Optional[Quantity] = None  # required by UBL

    @property
    def quantity(self) -> Optional[Quantity]:
        return self.invoiced_quantity


@dataclass(frozen=True)
class CreditNoteLine(_DocumentLine):
    credited_quantity: Optional[Quantity] = None  # required by UBL

    @property
    def quantity(self) -> Optional[Quantity]:
        return self.credited_quantity


@dataclass(frozen=True)
class _Document:
    customization_id: Optional[str] = None
    id: Optional[str] = None
    issue_date: Optional[date] = None
    notes: List[str] = field(default_factory=list)
    tax_point_date: Optional[date] = None
    document_currency_code: Optional[str] = None
    tax_currency_code: Optional[str] = None
    accounting_cost: Optional[str] = None
    buyer_reference: Optional[str] = None
    invoice_periods: List[Period] = field(default_factory=list)
    order_reference: Optional[OrderReference] = None
    contract_document_references: List[DocumentReference] = field(default_factory=list)
    additional_document_references: List[DocumentReference] = field(default_factory=list)
    project_references: List[ProjectReference] = field(default_factory=list)
    accounting_supplier_party: Optional[SupplierParty] = None
    accounting_customer_party: Optional[CustomerParty] = None
    payee_party: Optional[Party] = None
    deliveries: List[Delivery] = field(default_factory=list)
    payment_means: List[PaymentMeans] = field(default_factory=list)
    payment_terms: List[PaymentTerms] = field(default_factory=list)
    allowance_charges: List[AllowanceCharge] = field(default_factory=list)
    tax_totals: List[TaxTotal] = field(default_factory=list)
    legal_monetary_total: Optional[MonetaryTotal] = None


@dataclass(frozen=True)
class Invoice(_Document):
    invoice_type_code: Optional[str] = None
    due_date: Optional[date] = None  # BT-9, credit notes carry it on PaymentMeans
    invoice_lines: List[InvoiceLine] = field(default_factory=list)


@dataclass(frozen=True)
class CreditNote(_Document):
    credit_note_type_code: Optional[str] = None
    credit_note_lines: List[CreditNoteLine] = field(default_factory=list)

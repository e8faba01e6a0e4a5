import unittest
from datetime import date
from decimal import Decimal

from ubl2cii.mapper.entities import (
    convert_additional_referenced_document, convert_applicable_trade_tax, convert_line, convert_party,
    convert_specified_trade_allowance_charge, convert_specified_trade_payment_terms,
    create_header_monetary_summation, create_header_trade_delivery, is_valid_document_reference_type_code,
    normalize_tax_scheme_id,
)
from ubl2cii.models import ubl


def eur(value: str) -> ubl.Amount:
    return ubl.Amount(Decimal(value), "EUR")


class TestParty(unittest.TestCase):
    def test_name_falls_back_to_registration_name(self):
        party = ubl.Party(party_legal_entities=[ubl.PartyLegalEntity(registration_name="Acme Ltd")])
        out = convert_party(party)
        self.assertEqual(out.name, "Acme Ltd")
        self.assertEqual(out.specified_legal_organization.trading_business_name, "Acme Ltd")

    def test_party_name_wins_over_registration_name(self):
        party = ubl.Party(
            party_names=["Acme Trading"],
            party_legal_entities=[ubl.PartyLegalEntity(registration_name="Acme Ltd")],
        )
        self.assertEqual(convert_party(party).name, "Acme Trading")

    def test_identifiers_endpoint_and_address(self):
        party = ubl.Party(
            endpoint_id=ubl.Identifier("x@example.com", "EM"),
            party_identifications=[ubl.Identifier("A"), ubl.Identifier("B", "0088")],
            postal_address=ubl.Address(city_name="Oslo"),
        )
        out = convert_party(party)
        self.assertEqual([i.value for i in out.ids], ["A", "B"])
        self.assertEqual(out.ids[1].scheme_id, "0088")
        self.assertEqual(out.uri_universal_communications[0].uri_id.value, "x@example.com")
        self.assertEqual(out.postal_trade_address.city_name, "Oslo")
        self.assertIsNone(out.specified_legal_organization)

    def test_tax_registrations(self):
        party = ubl.Party(party_tax_schemes=[
            ubl.PartyTaxScheme(ubl.Identifier("DE1"), ubl.TaxScheme("VAT")),
            ubl.PartyTaxScheme(ubl.Identifier("AU2"), ubl.TaxScheme("GST")),
            ubl.PartyTaxScheme(ubl.Identifier(""), ubl.TaxScheme("VAT")),
            ubl.PartyTaxScheme(None, ubl.TaxScheme("VAT")),
        ])
        regs = convert_party(party).specified_tax_registrations
        self.assertEqual([(r.id.value, r.id.scheme_id) for r in regs], [("DE1", "VA"), ("AU2", "GST")])

    def test_tax_scheme_normalization(self):
        self.assertEqual(normalize_tax_scheme_id("VAT"), "VA")
        self.assertEqual(normalize_tax_scheme_id("GST"), "GST")
        self.assertIsNone(normalize_tax_scheme_id(None))

    def test_none(self):
        self.assertIsNone(convert_party(None))


class TestDocumentReference(unittest.TestCase):
    def test_type_code_gate(self):
        for code, expected in (("50", "50"), ("130", "130"), ("916", "916"), ("ABC", "916"), (None, "916")):
            out = convert_additional_referenced_document(ubl.DocumentReference(id="D", document_type_code=code))
            self.assertEqual(out.type_code, expected)
        self.assertFalse(is_valid_document_reference_type_code("916"))

    def test_descriptions_and_issue_date(self):
        out = convert_additional_referenced_document(ubl.DocumentReference(
            id="D1",
            issue_date=date(2024, 1, 31),
            document_descriptions=[ubl.Description("One", "en", "en-GB"), ubl.Description("Zwei", "de")],
        ))
        self.assertEqual(out.issuer_assigned_id, "D1")
        self.assertEqual(out.formatted_issue_date_time.value, "20240131")
        self.assertEqual([(n.value, n.language_id, n.language_locale_id) for n in out.names],
                         [("One", "en", "en-GB"), ("Zwei", "de", None)])

    def test_attachment_with_both_forms_passes_both(self):
        attachment = ubl.Attachment(
            embedded_document_binary_object=ubl.BinaryObject(b"%PDF", "application/pdf", "a.pdf"),
            external_reference=ubl.ExternalReference("https://example.com/a.pdf"),
        )
        out = convert_additional_referenced_document(ubl.DocumentReference(id="D", attachment=attachment))
        self.assertEqual(out.uri_id, "https://example.com/a.pdf")
        self.assertEqual(len(out.attachment_binary_objects), 1)
        self.assertEqual(out.attachment_binary_objects[0].value, b"%PDF")
        self.assertEqual(out.attachment_binary_objects[0].filename, "a.pdf")

    def test_external_reference_without_uri(self):
        attachment = ubl.Attachment(external_reference=ubl.ExternalReference())
        out = convert_additional_referenced_document(ubl.DocumentReference(attachment=attachment))
        self.assertIsNone(out.uri_id)
        self.assertEqual(out.attachment_binary_objects, [])


class TestTaxesAndCharges(unittest.TestCase):
    def test_trade_tax(self):
        subtotal = ubl.TaxSubtotal(
            tax_category=ubl.TaxCategory(
                id="E", percent=Decimal("0"), tax_exemption_reason_code="VATEX-EU-132",
                tax_exemption_reasons=["Exempt", "second"], tax_scheme=ubl.TaxScheme("VAT"),
            ),
            taxable_amount=eur("100.00"),
            tax_amount=eur("0.00"),
        )
        out = convert_applicable_trade_tax(subtotal)
        self.assertEqual(out.type_code, "VAT")
        self.assertEqual(out.category_code, "E")
        self.assertEqual(str(out.calculated_amount.value), "0")
        self.assertEqual(str(out.basis_amount.value), "100")
        self.assertIsNone(out.basis_amount.currency_id)
        self.assertEqual(out.exemption_reason, "Exempt")
        self.assertEqual(out.exemption_reason_code, "VATEX-EU-132")

    def test_trade_tax_without_amounts(self):
        out = convert_applicable_trade_tax(ubl.TaxSubtotal(tax_category=ubl.TaxCategory(id="S")))
        self.assertEqual(out.category_code, "S")
        self.assertIsNone(out.calculated_amount)
        self.assertIsNone(out.basis_amount)

    def test_allowance_charge(self):
        ac = ubl.AllowanceCharge(
            charge_indicator=True,
            amount=eur("5.50"),
            allowance_charge_reason_code="FC",
            allowance_charge_reasons=["Freight", "other"],
            multiplier_factor_numeric=Decimal("10"),
            base_amount=eur("55.00"),
            tax_categories=[ubl.TaxCategory(id="S", percent=Decimal("19"), tax_scheme=ubl.TaxScheme("VAT")),
                            ubl.TaxCategory(id="Z")],
        )
        out = convert_specified_trade_allowance_charge(ac)
        self.assertIs(out.charge_indicator.indicator, True)
        self.assertEqual(str(out.actual_amount.value), "5.5")
        self.assertEqual(out.reason_code, "FC")
        self.assertEqual(out.reason, "Freight")
        self.assertEqual(out.calculation_percent, Decimal("10"))
        self.assertEqual(out.basis_amount.value, Decimal("55.00"))
        self.assertEqual(len(out.category_trade_taxes), 1)
        tax = out.category_trade_taxes[0]
        self.assertEqual((tax.type_code, tax.category_code, tax.rate_applicable_percent), ("VAT", "S", Decimal("19")))

    def test_allowance_without_amount_is_rejected(self):
        with self.assertRaises(ValueError):
            convert_specified_trade_allowance_charge(ubl.AllowanceCharge(charge_indicator=False))


class TestPaymentTerms(unittest.TestCase):
    def test_document_due_date_wins(self):
        means = ubl.PaymentMeans(payment_due_date=date(2024, 5, 1))
        out = convert_specified_trade_payment_terms(ubl.PaymentTerms(notes=["a", "a"]), means, date(2024, 4, 1))
        self.assertEqual(out.due_date_date_time.value, "20240401")
        self.assertEqual([d.value for d in out.descriptions], ["a", "a"])

    def test_payment_means_due_date_fallback(self):
        means = ubl.PaymentMeans(payment_due_date=date(2024, 5, 1))
        out = convert_specified_trade_payment_terms(ubl.PaymentTerms(), means, None)
        self.assertEqual(out.due_date_date_time.value, "20240501")

    def test_no_due_date(self):
        out = convert_specified_trade_payment_terms(ubl.PaymentTerms(), None, None)
        self.assertIsNone(out.due_date_date_time)


class TestMonetarySummation(unittest.TestCase):
    def test_order_and_cardinality(self):
        total = ubl.MonetaryTotal(tax_exclusive_amount=eur("100.00"))
        out = create_header_monetary_summation(total, [eur("10.00"), eur("5.00")])
        self.assertEqual(len(out.tax_basis_total_amounts), 1)
        self.assertEqual([(str(a.value), a.currency_id) for a in out.tax_total_amounts], [("10", "EUR"), ("5", "EUR")])
        self.assertEqual(out.line_total_amounts, [])
        self.assertEqual(out.due_payable_amounts, [])

    def test_missing_monetary_total(self):
        out = create_header_monetary_summation(None, [eur("1.00"), None])
        self.assertIsNotNone(out)
        self.assertEqual(len(out.tax_total_amounts), 1)
        self.assertEqual(out.grand_total_amounts, [])

    def test_all_totals(self):
        total = ubl.MonetaryTotal(
            line_extension_amount=eur("1"), charge_total_amount=eur("2"), allowance_total_amount=eur("3"),
            tax_exclusive_amount=eur("4"), payable_rounding_amount=eur("5"), tax_inclusive_amount=eur("6"),
            prepaid_amount=eur("7"), payable_amount=eur("8"),
        )
        out = create_header_monetary_summation(total, [])
        values = [
            out.line_total_amounts[0].value, out.charge_total_amounts[0].value, out.allowance_total_amounts[0].value,
            out.tax_basis_total_amounts[0].value, out.rounding_amounts[0].value, out.grand_total_amounts[0].value,
            out.total_prepaid_amounts[0].value, out.due_payable_amounts[0].value,
        ]
        self.assertEqual([str(v) for v in values], ["1", "2", "3", "4", "5", "6", "7", "8"])
        self.assertIsNone(out.grand_total_amounts[0].currency_id)


class TestDelivery(unittest.TestCase):
    def test_empty_delivery_is_still_built(self):
        out = create_header_trade_delivery(None)
        self.assertIsNotNone(out)
        self.assertIsNone(out.ship_to_trade_party)
        self.assertIsNone(out.actual_delivery_supply_chain_event)

    def test_location_and_date(self):
        delivery = ubl.Delivery(
            actual_delivery_date=date(2024, 2, 28),
            delivery_location=ubl.Location(ubl.Identifier("LOC-1", "0088"), ubl.Address(city_name="Rome")),
        )
        out = create_header_trade_delivery(delivery)
        self.assertEqual(out.ship_to_trade_party.ids[0].value, "LOC-1")
        self.assertEqual(out.ship_to_trade_party.postal_trade_address.city_name, "Rome")
        self.assertEqual(out.actual_delivery_supply_chain_event.occurrence_date_time.value, "20240228")


class TestLine(unittest.TestCase):
    def _line(self, **kwargs):
        defaults = dict(
            id="1",
            invoiced_quantity=ubl.Quantity(Decimal("3"), "H87"),
            line_extension_amount=eur("30.00"),
            item=ubl.Item(name="Bolt", descriptions=["M8", "unused"]),
        )
        defaults.update(kwargs)
        return ubl.InvoiceLine(**defaults)

    def test_basic_line(self):
        out = convert_line(self._line(notes=["n1", ""], accounting_cost="ACC-9",
                                      price=ubl.Price(eur("10.00")),
                                      order_line_references=[ubl.OrderLineReference("7"), ubl.OrderLineReference("8")]))
        self.assertEqual(out.associated_document_line_document.line_id, "1")
        self.assertEqual(len(out.associated_document_line_document.included_notes), 1)
        self.assertEqual(out.specified_trade_product.names[0].value, "Bolt")
        self.assertEqual(out.specified_trade_product.description, "M8")
        self.assertEqual(out.specified_line_trade_agreement.buyer_order_referenced_document.line_id, "7")
        self.assertEqual(str(out.specified_line_trade_agreement.net_price_product_trade_price.charge_amounts[0].value), "10")
        qty = out.specified_line_trade_delivery.billed_quantity
        self.assertEqual((qty.value, qty.unit_code), (Decimal("3"), "H87"))
        settlement = out.specified_line_trade_settlement
        self.assertEqual(str(settlement.specified_trade_settlement_line_monetary_summation.line_total_amounts[0].value), "30")
        self.assertEqual(settlement.receivable_specified_trade_accounting_accounts[0].id, "ACC-9")

    def test_product_details(self):
        item = ubl.Item(
            name="Bolt",
            sellers_item_identification=ubl.Identifier("S-1"),
            standard_item_identification=ubl.Identifier("0123", "0160"),
            additional_item_properties=[ubl.ItemProperty("Size", "M8"), ubl.ItemProperty("Finish")],
            commodity_classifications=[ubl.CommodityClassification(ubl.Code("123", "STI"))],
            classified_tax_categories=[ubl.TaxCategory(id="S", percent=Decimal("21"), tax_scheme=ubl.TaxScheme("VAT"))],
        )
        out = convert_line(self._line(item=item))
        product = out.specified_trade_product
        self.assertEqual(product.global_id.scheme_id, "0160")
        self.assertEqual(product.seller_assigned_id, "S-1")
        self.assertEqual([(c.descriptions[0].value, [v.value for v in c.values])
                          for c in product.applicable_product_characteristics],
                         [("Size", ["M8"]), ("Finish", [])])
        self.assertEqual(product.designated_product_classifications[0].class_code.list_id, "STI")
        tax = out.specified_line_trade_settlement.applicable_trade_taxes[0]
        self.assertEqual((tax.type_code, tax.category_code, tax.rate_applicable_percent), ("VAT", "S", Decimal("21")))

    def test_credit_note_line_uses_credited_quantity(self):
        line = ubl.CreditNoteLine(id="1", credited_quantity=ubl.Quantity(Decimal("1"), "C62"))
        out = convert_line(line)
        self.assertEqual(out.specified_line_trade_delivery.billed_quantity.unit_code, "C62")
        self.assertIsNone(out.specified_line_trade_agreement.buyer_order_referenced_document)

    def test_missing_quantity_is_rejected(self):
        with self.assertRaises(ValueError):
            convert_line(ubl.InvoiceLine(id="1"))


if __name__ == "__main__":
    unittest.main()

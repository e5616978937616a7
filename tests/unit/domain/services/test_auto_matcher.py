"""Tests for first-match auto-mapping."""

from netsuite_workbench.domain.catalog.registry import fields_for
from netsuite_workbench.domain.entities.mapping import FieldMapping, blank_mappings
from netsuite_workbench.domain.entities.record_type import FieldDef, RecordType
from netsuite_workbench.domain.services.auto_matcher import (
    auto_match,
    find_match,
    matches,
    normalize_name,
)

CUSTOMER_HEADERS = ["Company Name", "E-Mail", "Phone Number", "Notes"]
CUSTOMER_FIELDS = fields_for(RecordType.CUSTOMER)


class TestNormalizeName:
    def test_strips_case_and_punctuation(self):
        assert normalize_name("E-Mail Address") == "emailaddress"
        assert normalize_name("  Company_Name ") == "companyname"

    def test_non_ascii_letters_are_dropped(self):
        assert normalize_name("Straße") == "strae"


class TestMatches:
    def test_equal_id(self):
        assert matches("Company Name", FieldDef("companyname", "Company Name"))

    def test_equal_label(self):
        assert matches("Customer ID", FieldDef("entityid", "Customer ID"))

    def test_source_contained_in_id(self):
        assert matches("zip", FieldDef("zipcode", "Postal"))

    def test_id_contained_in_source(self):
        assert matches("Customer Email", FieldDef("email", "Email"))

    def test_label_containment_is_not_enough(self):
        assert not matches("Postal", FieldDef("zip", "Postal Code"))

    def test_blank_source_matches_first_field(self):
        # "" is contained in every normalized id
        assert matches("---", FieldDef("companyname", "Company Name"))
        assert matches("\u4fa1\u683c", FieldDef("companyname", "Company Name"))

    def test_symbol_only_header_takes_first_catalog_field(self):
        result = auto_match(blank_mappings(["---"]), CUSTOMER_FIELDS)

        assert result[0].target_field == CUSTOMER_FIELDS[0].field_id


class TestAutoMatch:
    def test_maps_customer_upload(self):
        # Arrange
        mappings = blank_mappings(CUSTOMER_HEADERS)

        # Act
        result = auto_match(mappings, CUSTOMER_FIELDS)

        # Assert
        targets = {m.source_column: m.target_field for m in result}
        assert targets == {
            "Company Name": "companyname",
            "E-Mail": "email",
            "Phone Number": "phone",
            "Notes": "",
        }

    def test_first_catalog_field_wins(self):
        fields = [FieldDef("phone", "Phone"), FieldDef("mobilephone", "Mobile")]

        assert find_match("Phone", fields) == fields[0]

    def test_existing_targets_are_kept(self):
        mappings = [FieldMapping(source_column="Email", target_field="comments")]

        result = auto_match(mappings, CUSTOMER_FIELDS)

        assert result[0].target_field == "comments"

    def test_is_idempotent(self):
        once = auto_match(blank_mappings(CUSTOMER_HEADERS), CUSTOMER_FIELDS)
        twice = auto_match(once, CUSTOMER_FIELDS)

        assert twice == once

    def test_does_not_mutate_input(self):
        mappings = blank_mappings(CUSTOMER_HEADERS)

        auto_match(mappings, CUSTOMER_FIELDS)

        assert all(not m.is_mapped for m in mappings)

    def test_keeps_order_and_transforms(self):
        mappings = [
            FieldMapping(source_column="Notes"),
            FieldMapping(source_column="E-Mail", transform="trim-lowercase"),
        ]

        result = auto_match(mappings, CUSTOMER_FIELDS)

        assert [m.source_column for m in result] == ["Notes", "E-Mail"]
        assert result[1].target_field == "email"
        assert result[1].transform == "trim-lowercase"

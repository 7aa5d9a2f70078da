"""Tests for Company, Warehouse and Supplier aggregates."""

import pytest
from protean.exceptions import ValidationError
from stockflow.company.company import Company
from stockflow.company.events import CompanyRegistered
from stockflow.shared.email import EmailAddress
from stockflow.supplier.events import SupplierAdded
from stockflow.supplier.supplier import Supplier
from stockflow.warehouse.events import WarehouseCreated, WarehouseUpdated
from stockflow.warehouse.warehouse import Warehouse

COMPANY_ID = "c0000000-0000-0000-0000-000000000001"


class TestCompany:
    def test_register_trims_name(self):
        company = Company.register("  Acme Corp ")
        assert company.name == "Acme Corp"

    def test_register_raises_event(self):
        company = Company.register("Acme Corp")
        [event] = [e for e in company._events if isinstance(e, CompanyRegistered)]
        assert event.company_id == str(company.id)

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Company.register("")


class TestWarehouse:
    def test_create(self):
        wh = Warehouse.create(COMPANY_ID, "Main Warehouse", "Chicago, IL")
        assert wh.company_id == COMPANY_ID
        assert wh.name == "Main Warehouse"
        assert wh.location == "Chicago, IL"

    def test_location_is_optional(self):
        wh = Warehouse.create(COMPANY_ID, "Main Warehouse")
        assert wh.location is None

    def test_create_raises_event(self):
        wh = Warehouse.create(COMPANY_ID, "Main Warehouse")
        assert any(isinstance(e, WarehouseCreated) for e in wh._events)

    def test_update_only_given_fields(self):
        wh = Warehouse.create(COMPANY_ID, "Main Warehouse", "Chicago, IL")
        wh.update_details(name="North Hub")
        assert wh.name == "North Hub"
        assert wh.location == "Chicago, IL"

    def test_update_raises_event(self):
        wh = Warehouse.create(COMPANY_ID, "Main Warehouse")
        wh.update_details(location="Denver, CO")
        [event] = [e for e in wh._events if isinstance(e, WarehouseUpdated)]
        assert event.location == "Denver, CO"


class TestSupplier:
    def test_add(self):
        supplier = Supplier.add(COMPANY_ID, "Acme Supply", " orders@acme.example ")
        assert supplier.name == "Acme Supply"
        assert supplier.contact_email.address == "orders@acme.example"

    def test_add_raises_event(self):
        supplier = Supplier.add(COMPANY_ID, "Acme Supply", "orders@acme.example")
        [event] = [e for e in supplier._events if isinstance(e, SupplierAdded)]
        assert event.contact_email == "orders@acme.example"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            Supplier.add(COMPANY_ID, "Acme Supply", "not-an-email")


class TestEmailAddress:
    @pytest.mark.parametrize(
        "address",
        ["orders@acme.example", "first.last@sub.acme.example", "a+tag@x.io"],
    )
    def test_valid(self, address):
        assert EmailAddress(address=address).address == address

    @pytest.mark.parametrize(
        "address",
        [
            "no-at-sign",
            "two@@acme.example",
            "@acme.example",
            "orders@acme",
            "orders@.acme.example",
            "orders@acme.example.",
            ".orders@acme.example",
            "or..ders@acme.example",
            "or ders@acme.example",
        ],
    )
    def test_invalid(self, address):
        with pytest.raises(ValidationError):
            EmailAddress(address=address)

"""Unit tests for the Customer aggregate and the VIP tier rule."""

from datetime import date

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import ContactDetails, Customer, Gender, VipStatus
from storefront.domain.model.value_objects import Money


def _contact(**overrides) -> ContactDetails:
    fields = dict(
        name="Nguyen Van An",
        email="an.nguyen@gmail.com",
        phone="0901234567",
        address="12 Le Loi, District 1",
    )
    fields.update(overrides)
    return ContactDetails(**fields)


# ── Tier rule ────────────────────────────────────────────────────────────────


class TestVipStatus:

    @pytest.mark.parametrize(
        "spend, tier",
        [
            ("0", VipStatus.STANDARD),
            ("9999999", VipStatus.STANDARD),
            ("10000000", VipStatus.SILVER),
            ("24999999", VipStatus.SILVER),
            ("25000000", VipStatus.GOLD),
            ("50000000", VipStatus.PLATINUM),
            ("70000000", VipStatus.PLATINUM),
            ("70000001", VipStatus.DIAMOND),
        ],
    )
    def test_boundaries(self, spend, tier):
        assert VipStatus.for_lifetime_spend(Money.of(spend)) == tier

    def test_diamond_needs_strictly_more_than_threshold(self):
        assert VipStatus.for_lifetime_spend(Money.of("70000000.00")) == VipStatus.PLATINUM
        assert VipStatus.for_lifetime_spend(Money.of("70000000.01")) == VipStatus.DIAMOND


# ── Contact details ──────────────────────────────────────────────────────────


class TestContactDetails:

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            _contact(name="  ")

    def test_blank_address_rejected(self):
        with pytest.raises(ValidationError, match="Shipping address is required"):
            _contact(address="")


# ── Register / record order ──────────────────────────────────────────────────


class TestRegister:

    def test_first_order_sets_totals(self):
        customer = Customer.register(_contact(), Money.of("2000000"))
        assert customer.id is None
        assert customer.total_orders == 1
        assert customer.total_spent == Money.of("2000000")
        assert customer.vip_status == VipStatus.STANDARD

    def test_big_first_order_gets_tier_immediately(self):
        customer = Customer.register(_contact(), Money.of("30000000"))
        assert customer.vip_status == VipStatus.GOLD

    def test_default_country_used_when_none_given(self):
        customer = Customer.register(_contact(), Money.of("1"), default_country="Vietnam")
        assert customer.country == "Vietnam"

    def test_given_country_wins_over_default(self):
        customer = Customer.register(
            _contact(country="France"), Money.of("1"), default_country="Vietnam"
        )
        assert customer.country == "France"


class TestRecordOrder:

    def _existing(self, **overrides) -> Customer:
        customer = Customer.register(
            _contact(city="Ha Noi", gender=Gender.FEMALE, date_of_birth=date(1990, 5, 1)),
            Money.of("9000000"),
        )
        for key, value in overrides.items():
            setattr(customer, key, value)
        return customer

    def test_accumulates_and_crosses_tier(self):
        customer = self._existing()
        customer.record_order(_contact(), Money.of("2000000"))
        assert customer.total_orders == 2
        assert customer.total_spent == Money.of("11000000")
        assert customer.vip_status == VipStatus.SILVER

    def test_required_fields_overwritten(self):
        customer = self._existing()
        customer.record_order(
            _contact(name="An Nguyen", phone="0987654321", address="99 Hai Ba Trung, District 3"),
            Money.of("1"),
        )
        assert customer.name == "An Nguyen"
        assert customer.phone == "0987654321"
        assert customer.address == "99 Hai Ba Trung, District 3"

    def test_empty_optional_fields_keep_previous_values(self):
        customer = self._existing()
        customer.record_order(_contact(city="", gender=None), Money.of("1"))
        assert customer.city == "Ha Noi"
        assert customer.gender == Gender.FEMALE
        assert customer.date_of_birth == date(1990, 5, 1)

    def test_non_empty_optional_fields_overwrite(self):
        customer = self._existing()
        customer.record_order(_contact(city="Da Nang", gender=Gender.OTHER), Money.of("1"))
        assert customer.city == "Da Nang"
        assert customer.gender == Gender.OTHER

    def test_tier_never_drops_as_spend_grows(self):
        customer = self._existing()
        seen = [customer.vip_status]
        for _ in range(10):
            customer.record_order(_contact(), Money.of("7000000"))
            seen.append(customer.vip_status)
        order = list(VipStatus)
        assert [order.index(s) for s in seen] == sorted(order.index(s) for s in seen)
        assert seen[-1] == VipStatus.DIAMOND

    def test_other_email_rejected(self):
        customer = self._existing()
        with pytest.raises(ValidationError, match="cannot be recorded"):
            customer.record_order(_contact(email="someone@gmail.com"), Money.of("1"))

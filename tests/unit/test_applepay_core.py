import pytest
from unittest.mock import MagicMock

from subscribepro_checkout.checkout import Address, CustomerSession
from subscribepro_checkout.exceptions import (
    BillingAddressEmptyError,
    InvalidCardTypeError,
    PlatformApiError,
)
from subscribepro_checkout.platform.models import PaymentProfile, PlatformAddress

def test_get_quote_is_fetched_once(make_core, quote):
    checkout_session = MagicMock()
    checkout_session.get_quote.return_value = quote
    core = make_core(checkout_session=checkout_session)

    first = core.get_quote()
    second = core.get_quote()
    assert first is second is quote
    assert checkout_session.get_quote.call_count == 1

def test_get_customer_data_is_fetched_once(make_core):
    customer_session = MagicMock()
    customer_session.get_customer_data.return_value = {"email": "a@b.c"}
    core = make_core(customer_session=customer_session)

    assert core.get_customer_data() == {"email": "a@b.c"}
    assert core.get_customer_data() == {"email": "a@b.c"}
    assert customer_session.get_customer_data.call_count == 1

def test_grand_total_and_row_items(make_core):
    core = make_core()
    assert core.get_grand_total() == {"label": "MERCHANT", "amount": "118.50"}
    assert core.get_row_items() == [
        {"label": "SUBTOTAL", "amount": "100.00"},
        {"label": "SHIPPING", "amount": "10.00"},
        {"label": "TAX", "amount": "8.50"},
    ]

def test_format_price_has_no_symbol(make_core):
    core = make_core()
    assert core.format_price(5) == "5.00"
    assert core.format_price(1234.5) == "1234.50"
    assert core.format_price(1234567.891) == "1234567.89"

def test_grand_total_over_thousand_is_plain_decimal(make_core, quote):
    quote.grand_total = 1234.5
    quote.shipping_address.subtotal_with_discount = 1200
    core = make_core()
    assert core.get_grand_total()["amount"] == "1234.50"
    assert core.get_row_items()[0] == {"label": "SUBTOTAL", "amount": "1200.00"}

def test_region_lookup_delegates(make_core):
    core = make_core()
    assert core.get_directory_region_by_code("ca", "US").name == "California"
    assert core.get_directory_region_by_name("Ontario", "CA").code == "ON"
    assert not core.get_directory_region_by_code("ZZ", "US")

def test_get_platform_customer_delegates(make_core, platform_customer):
    platform_customer.get_customer.return_value = "customer"
    core = make_core()
    assert core.get_platform_customer("a@b.c", True, 3) == "customer"
    platform_customer.get_customer.assert_called_once_with("a@b.c", True, 3)

def test_map_address_copies_fields(make_core, billing_address):
    target = PlatformAddress()
    make_core().map_magento_address_to_platform(billing_address, target)
    assert target.first_name == "Jane"
    assert target.last_name == "Doe"
    assert target.company == "Acme"
    assert target.street1 == "123 Main Street"
    assert target.street2 == "Apt 4B"
    assert target.city == "San Francisco"
    assert target.region == "CA"
    assert target.postcode == "94102"
    assert target.country == "US"
    assert target.phone == "415-555-0100"

@pytest.mark.parametrize("street", [["1 Loop"], ["1 Loop", ""], ["1 Loop", None]])
def test_map_address_empty_second_line_is_none(make_core, billing_address, street):
    billing_address.street = street
    target = PlatformAddress(street2="stale")
    make_core().map_magento_address_to_platform(billing_address, target)
    assert target.street1 == "1 Loop"
    assert target.street2 is None
    assert target.to_dict()["street2"] is None

def test_map_address_first_line_is_string(make_core, billing_address):
    billing_address.street = []
    target = PlatformAddress()
    make_core().map_magento_address_to_platform(billing_address, target)
    assert target.street1 == ""

@pytest.mark.parametrize("sp_type,expected", [
    ("visa", "VI"), ("master", "MC"), ("american_express", "AE"), ("discover", "DI"), ("jcb", "JCB"),
])
def test_card_type_mapping(make_core, sp_type, expected):
    assert make_core().map_subscribe_pro_card_type_to_magento(sp_type) == expected

def test_card_type_unknown_suppressed_returns_none(make_core):
    assert make_core().map_subscribe_pro_card_type_to_magento("diners", False) is None

def test_card_type_unknown_raises_with_type(make_core):
    with pytest.raises(InvalidCardTypeError) as exc:
        make_core().map_subscribe_pro_card_type_to_magento("diners")
    assert "diners" in str(exc.value)
    assert exc.value.card_type == "diners"

def test_card_type_table_is_not_mutable_from_outside(make_core):
    core = make_core()
    core.get_all_card_type_mappings()["diners"] = "DN"
    assert core.map_subscribe_pro_card_type_to_magento("diners", False) is None

def test_create_profile_without_billing_address_makes_no_remote_call(make_core, platform_payment_profile):
    core = make_core()
    with pytest.raises(BillingAddressEmptyError) as exc:
        core.create_platform_payment_profile(123, {"data": "x"}, None)
    assert "billing address is empty" in str(exc.value)
    assert platform_payment_profile.create_apple_pay_profile.call_count == 0
    assert platform_payment_profile.save_apple_pay_profile.call_count == 0

def test_create_profile_populates_and_saves(make_core, platform_payment_profile, billing_address):
    profile = PaymentProfile(website_id=1)
    platform_payment_profile.create_apple_pay_profile.return_value = profile

    def _save(p):
        p.id = 987
        return p
    platform_payment_profile.save_apple_pay_profile.side_effect = _save

    payment_data = {"version": "EC_v1", "data": "abc"}
    result = make_core().create_platform_payment_profile(123, payment_data, billing_address, 1)

    platform_payment_profile.create_apple_pay_profile.assert_called_once_with(payment_data, 1)
    platform_payment_profile.save_apple_pay_profile.assert_called_once_with(profile)
    assert result is profile
    assert result.id == 987
    assert result.customer_id == 123
    assert result.apple_pay_payment_data == payment_data
    assert result.billing_address.street2 == "Apt 4B"
    assert result.billing_address.country == "US"

def test_create_profile_propagates_platform_errors(make_core, platform_payment_profile, billing_address):
    platform_payment_profile.create_apple_pay_profile.return_value = PaymentProfile()
    platform_payment_profile.save_apple_pay_profile.side_effect = PlatformApiError(422, "Invalid token")
    with pytest.raises(PlatformApiError) as exc:
        make_core().create_platform_payment_profile(1, {}, billing_address)
    assert exc.value.status_code == 422

def test_place_order_returns_true_and_submits(make_core, quote, billing_address, order_repository):
    quote.billing_address = billing_address
    quote.payment.method = "subscribe_pro"
    core = make_core()
    assert core.place_order("q1") is True
    assert len(order_repository.list()) == 1
    assert quote.is_active is False

def test_place_order_returns_false_on_business_failure(make_core, quote):
    # pas d'adresse de facturation ni de paiement: échec métier, pas d'exception
    assert make_core().place_order("q1", "flatrate_flatrate") is False

def test_quote_submit_order_delegates(make_core, quote, billing_address):
    from subscribepro_checkout.checkout import Payment
    quote.billing_address = billing_address
    increment_id = make_core().quote_submit_order("q1", Payment(method="subscribe_pro"))
    assert increment_id == "100000001"

def test_accessors_return_sessions(make_core):
    customer_session = CustomerSession({"email": "x@y.z"})
    core = make_core(customer_session=customer_session)
    assert core.get_customer_session() is customer_session
    assert core.get_checkout_session().quote_id == "q1"

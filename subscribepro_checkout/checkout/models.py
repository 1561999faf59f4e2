# module subscribepro_checkout.checkout.models
"""Modèles côté boutique: adresse, panier (quote), paiement, commande."""
from typing import Any, Dict, List, Optional


class Address:
    def __init__(
        self,
        firstname: Optional[str] = None,
        lastname: Optional[str] = None,
        company: Optional[str] = None,
        street: Optional[List[str]] = None,
        city: Optional[str] = None,
        region: Optional[str] = None,
        region_id: Optional[int] = None,
        region_code: Optional[str] = None,
        postcode: Optional[str] = None,
        country_id: Optional[str] = None,
        telephone: Optional[str] = None,
        email: Optional[str] = None,
    ):
        self.firstname = firstname
        self.lastname = lastname
        self.company = company
        self.street = list(street or [])
        self.city = city
        self.region = region
        self.region_id = region_id
        self.region_code = region_code
        self.postcode = postcode
        self.country_id = country_id
        self.telephone = telephone
        self.email = email

    def get_street_line(self, number: int) -> str:
        """Ligne de rue 1-indexée; chaîne vide si absente."""
        if number < 1 or number > len(self.street):
            return ""
        return self.street[number - 1] or ""

    def get_data(self, key: str) -> Any:
        return getattr(self, key, None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "firstname": self.firstname,
            "lastname": self.lastname,
            "company": self.company,
            "street": list(self.street),
            "city": self.city,
            "region": self.region,
            "region_id": self.region_id,
            "region_code": self.region_code,
            "postcode": self.postcode,
            "country_id": self.country_id,
            "telephone": self.telephone,
            "email": self.email,
        }


class QuoteAddress(Address):
    def __init__(
        self,
        subtotal_with_discount: float = 0.0,
        shipping_amount: float = 0.0,
        tax_amount: float = 0.0,
        shipping_method: Optional[str] = None,
        **fields: Any,
    ):
        super().__init__(**fields)
        self.subtotal_with_discount = subtotal_with_discount
        self.shipping_amount = shipping_amount
        self.tax_amount = tax_amount
        self.shipping_method = shipping_method


class Payment:
    def __init__(self, method: Optional[str] = None, additional_information: Optional[Dict[str, Any]] = None):
        self.method = method
        self.additional_information = dict(additional_information or {})

    def set_additional_information(self, key: str, value: Any) -> None:
        self.additional_information[key] = value


class Quote:
    def __init__(
        self,
        id: Any,
        grand_total: float = 0.0,
        currency_code: str = "USD",
        customer_email: Optional[str] = None,
        shipping_address: Optional[QuoteAddress] = None,
        billing_address: Optional[Address] = None,
        store_id: Optional[int] = None,
        website_id: Optional[int] = None,
        is_active: bool = True,
    ):
        self.id = id
        self.grand_total = grand_total
        self.currency_code = currency_code
        self.customer_email = customer_email
        self.shipping_address = shipping_address or QuoteAddress()
        self.billing_address = billing_address
        self.payment = Payment()
        self.store_id = store_id
        self.website_id = website_id
        self.is_active = is_active

    def get_shipping_address(self) -> QuoteAddress:
        return self.shipping_address


class Order:
    def __init__(self, increment_id: str, quote_id: Any, grand_total: float, payment: Payment, customer_email: Optional[str] = None):
        self.increment_id = increment_id
        self.quote_id = quote_id
        self.grand_total = grand_total
        self.payment = payment
        self.customer_email = customer_email

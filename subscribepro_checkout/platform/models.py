# module subscribepro_checkout.platform.models
"""
Représentations des objets de la plateforme Subscribe Pro (adresse, client, profil de paiement).
- to_dict(): payload JSON envoyé à l'API
- from_dict(): hydratation depuis une réponse API (champs inconnus ignorés)
"""
from typing import Any, Dict, Optional

ADDRESS_FIELDS = (
    "first_name",
    "last_name",
    "company",
    "street1",
    "street2",
    "city",
    "region",
    "postcode",
    "country",
    "phone",
)


class PlatformAddress:
    def __init__(self, **fields: Any):
        self.id: Optional[int] = fields.get("id")
        for name in ADDRESS_FIELDS:
            setattr(self, name, fields.get(name))

    def to_dict(self) -> Dict[str, Any]:
        # street2 reste présent à None (JSON null): "pas de valeur" != chaîne vide
        return {name: getattr(self, name) for name in ADDRESS_FIELDS}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PlatformAddress":
        data = data or {}
        return cls(id=data.get("id"), **{name: data.get(name) for name in ADDRESS_FIELDS})


class PlatformCustomer:
    def __init__(
        self,
        id: Optional[int] = None,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        platform_specific_customer_id: Optional[str] = None,
    ):
        self.id = id
        self.email = email
        self.first_name = first_name
        self.last_name = last_name
        self.platform_specific_customer_id = platform_specific_customer_id

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }
        if self.platform_specific_customer_id:
            data["platform_specific_customer_id"] = self.platform_specific_customer_id
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PlatformCustomer":
        data = data or {}
        return cls(
            id=data.get("id"),
            email=data.get("email"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            platform_specific_customer_id=data.get("platform_specific_customer_id"),
        )


class PaymentProfile:
    TYPE_APPLE_PAY = "apple_pay"

    def __init__(self, website_id=None):
        self.id: Optional[int] = None
        self.customer_id: Optional[int] = None
        self.billing_address = PlatformAddress()
        self.apple_pay_payment_data: Dict[str, Any] = {}
        self.profile_type: str = self.TYPE_APPLE_PAY
        self.payment_token: Optional[str] = None
        self.creditcard_type: Optional[str] = None
        self.creditcard_last_digits: Optional[str] = None
        self.creditcard_month: Optional[str] = None
        self.creditcard_year: Optional[str] = None
        self.status: Optional[str] = None
        self.website_id = website_id

    def get_billing_address(self) -> PlatformAddress:
        return self.billing_address

    def set_billing_address(self, address: PlatformAddress) -> None:
        self.billing_address = address

    def set_customer_id(self, customer_id: int) -> None:
        self.customer_id = customer_id

    def set_apple_pay_payment_data(self, data: Dict[str, Any]) -> None:
        self.apple_pay_payment_data = data

    def to_apple_pay_dict(self) -> Dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "billing_address": self.billing_address.to_dict(),
            "applepay_payment_data": self.apple_pay_payment_data,
        }

    def import_data(self, data: Dict[str, Any]) -> "PaymentProfile":
        """Met à jour le profil depuis une réponse API (identifiants et infos carte attribués par le serveur)."""
        data = data or {}
        self.id = data.get("id", self.id)
        self.customer_id = data.get("customer_id", self.customer_id)
        self.profile_type = data.get("profile_type") or self.profile_type
        self.payment_token = data.get("payment_token", self.payment_token)
        self.creditcard_type = data.get("creditcard_type", self.creditcard_type)
        self.creditcard_last_digits = data.get("creditcard_last_digits", self.creditcard_last_digits)
        self.creditcard_month = data.get("creditcard_month", self.creditcard_month)
        self.creditcard_year = data.get("creditcard_year", self.creditcard_year)
        self.status = data.get("status", self.status)
        if data.get("billing_address"):
            self.billing_address = PlatformAddress.from_dict(data["billing_address"])
        return self

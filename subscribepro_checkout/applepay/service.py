"""
Cas d'usage 'applepay': relie le paiement autorisé dans la feuille Apple Pay au panier.
- convert_contact_to_address: contact Apple Pay -> Address (région résolue par code puis par nom)
- set_payment_to_quote: adresse de facturation, client plateforme, profil de paiement, paiement du panier
"""
import logging
from typing import Any, Dict, Optional

from subscribepro_checkout.applepay.core import ApplePayCore
from subscribepro_checkout.checkout.models import Address, Payment
from subscribepro_checkout.exceptions import LocalizedException
from subscribepro_checkout.platform.models import PaymentProfile

logger = logging.getLogger(__name__)

PAYMENT_METHOD_CODE = "subscribe_pro"

# module subscribepro_checkout.applepay.service
class ApplePayPaymentService:
    def __init__(self, core: ApplePayCore):
        self.core = core

    def convert_contact_to_address(self, contact: Optional[Dict[str, Any]]) -> Optional[Address]:
        """
        Convertit un ApplePayPaymentContact en Address.
        - Retourne None si le contact est vide (l'appelant décide de l'erreur)
        - administrativeArea: essai par code (ex: "CA"), sinon par nom (ex: "California")
        """
        if not contact:
            return None
        country_id = (contact.get("countryCode") or "").upper() or None
        area = contact.get("administrativeArea") or ""
        region = self.core.get_directory_region_by_code(area, country_id)
        if not region:
            region = self.core.get_directory_region_by_name(area, country_id)

        lines = [str(line) for line in (contact.get("addressLines") or []) if line is not None]
        return Address(
            firstname=contact.get("givenName"),
            lastname=contact.get("familyName"),
            street=lines,
            city=contact.get("locality"),
            region=region.name if region else area or None,
            region_id=region.id,
            region_code=region.code if region else area or None,
            postcode=contact.get("postalCode"),
            country_id=country_id,
            telephone=contact.get("phoneNumber"),
            email=contact.get("emailAddress"),
        )

    def resolve_customer_email(self, billing_address: Address, shipping_contact: Optional[Dict[str, Any]] = None) -> str:
        # client connecté d'abord, puis panier et contacts Apple Pay
        customer_data = self.core.get_customer_data() if self.core.get_customer_session().is_logged_in() else {}
        email = (
            customer_data.get("email")
            or self.core.get_quote().customer_email
            or (shipping_contact or {}).get("emailAddress")
            or billing_address.email
        )
        if not email:
            raise LocalizedException("The customer email is missing.")
        return email

    def set_payment_to_quote(self, payment: Dict[str, Any], website_id=None) -> PaymentProfile:
        """
        Flux complet après autorisation Apple Pay.
        payment: {"token": {"paymentData": {...}, "paymentMethod": {...}}, "billingContact": {...}, "shippingContact": {...}}
        - Crée (si besoin) le client plateforme puis le profil de paiement
        - Renseigne le paiement du panier (méthode, token, type et 4 derniers chiffres de carte)
        """
        quote = self.core.get_quote()
        billing_address = self.convert_contact_to_address(payment.get("billingContact"))
        email = self.resolve_customer_email(billing_address, payment.get("shippingContact")) if billing_address else None

        token = payment.get("token") or {}
        payment_data = token.get("paymentData") or {}

        if billing_address:
            customer_data = self.core.get_customer_data()
            platform_customer = self.core.get_platform_customer(
                email,
                True,
                website_id,
                first_name=customer_data.get("firstname") or billing_address.firstname,
                last_name=customer_data.get("lastname") or billing_address.lastname,
            )
            customer_id = platform_customer.id
        else:
            customer_id = None

        # Lève BillingAddressEmptyError avant tout appel si l'adresse manque
        profile = self.core.create_platform_payment_profile(customer_id, payment_data, billing_address, website_id)

        quote.billing_address = billing_address
        if not quote.customer_email:
            quote.customer_email = email

        quote_payment = Payment(method=PAYMENT_METHOD_CODE)
        quote_payment.set_additional_information("payment_method_token", profile.payment_token or str(profile.id))
        quote_payment.set_additional_information("profile_id", profile.id)
        quote_payment.set_additional_information(
            "cc_type", self.core.map_subscribe_pro_card_type_to_magento(profile.creditcard_type, False)
        )
        quote_payment.set_additional_information("cc_last_4", profile.creditcard_last_digits)
        quote_payment.set_additional_information("is_third_party", False)
        quote.payment = quote_payment

        logger.info(
            "applepay.service payment set quote_id=%s profile_id=%s customer_id=%s",
            quote.id, profile.id, customer_id,
        )
        return profile

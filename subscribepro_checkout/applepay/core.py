"""
Orchestration du checkout Apple Pay.

ApplePayCore compose les collaborateurs du checkout (sessions, devise, régions, services
plateforme, soumission de commande) et expose les étapes du flux:
totaux de la feuille de paiement, résolution du client plateforme, mapping d'adresse et de
type de carte, création du profil de paiement, passage de commande.

Usage: une instance par checkout (par requête HTTP). Le panier et les données client sont
chargés au premier accès puis conservés sans invalidation; ne pas réutiliser une instance
pour un autre panier ou un autre client.
"""
import logging
from typing import Any, Dict, List, Optional

from subscribepro_checkout.checkout.currency import Currency, NO_SYMBOL
from subscribepro_checkout.checkout.models import Address, Payment, Quote
from subscribepro_checkout.checkout.regions import Region, RegionDirectory
from subscribepro_checkout.checkout.service import OrderService, QuoteManagement
from subscribepro_checkout.checkout.session import CheckoutSession, CustomerSession
from subscribepro_checkout.exceptions import BillingAddressEmptyError, InvalidCardTypeError
from subscribepro_checkout.platform.customer import PlatformCustomerManager
from subscribepro_checkout.platform.models import PaymentProfile, PlatformAddress, PlatformCustomer
from subscribepro_checkout.platform.payment_profile import ApplePayPaymentProfileService

# Type Subscribe Pro / Spreedly => type boutique
CARD_TYPE_MAPPINGS = {
    "visa": "VI",
    "master": "MC",
    "american_express": "AE",
    "discover": "DI",
    "jcb": "JCB",
}

# module subscribepro_checkout.applepay.core
class ApplePayCore:
    def __init__(
        self,
        checkout_session: CheckoutSession,
        customer_session: CustomerSession,
        currency: Currency,
        directory_region: RegionDirectory,
        platform_customer: PlatformCustomerManager,
        platform_payment_profile: ApplePayPaymentProfileService,
        order_service: OrderService,
        quote_management: QuoteManagement,
        logger: Optional[logging.Logger] = None,
    ):
        self.checkout_session = checkout_session
        self.customer_session = customer_session
        self.currency = currency
        self.directory_region = directory_region
        self.platform_customer = platform_customer
        self.platform_payment_profile = platform_payment_profile
        self.order_service = order_service
        self.quote_management = quote_management
        self.logger = logger or logging.getLogger(__name__)
        self._quote: Optional[Quote] = None
        self._customer_data: Optional[Dict[str, Any]] = None

    def get_quote(self) -> Quote:
        if not self._quote:
            self._quote = self.checkout_session.get_quote()
        return self._quote

    def format_price(self, price) -> str:
        # Apple Pay n'accepte que des décimaux simples (1234.50)
        return self.currency.format(price, {"display": NO_SYMBOL, "grouping": False}, False)

    def get_directory_region_by_name(self, administrative_area: str, country_id: str) -> Region:
        return self.directory_region.load_by_name(administrative_area, country_id)

    def get_directory_region_by_code(self, administrative_area: str, country_id: str) -> Region:
        return self.directory_region.load_by_code(administrative_area, country_id)

    def get_grand_total(self) -> Dict[str, str]:
        return {
            "label": "MERCHANT",
            "amount": self.format_price(self.get_quote().grand_total),
        }

    def get_row_items(self) -> List[Dict[str, str]]:
        address = self.get_quote().get_shipping_address()
        return [
            {
                "label": "SUBTOTAL",
                "amount": self.format_price(address.subtotal_with_discount),
            },
            {
                "label": "SHIPPING",
                "amount": self.format_price(address.shipping_amount),
            },
            {
                "label": "TAX",
                "amount": self.format_price(address.tax_amount),
            },
        ]

    def get_checkout_session(self) -> CheckoutSession:
        return self.checkout_session

    def get_customer_session(self) -> CustomerSession:
        return self.customer_session

    def get_customer_data(self) -> Dict[str, Any]:
        if self._customer_data is None:
            self._customer_data = self.get_customer_session().get_customer_data()
        return self._customer_data

    def get_platform_customer(
        self,
        customer_email: str,
        create_if_not_exist: bool = False,
        website_id=None,
        **customer_fields: Any,
    ) -> PlatformCustomer:
        return self.platform_customer.get_customer(customer_email, create_if_not_exist, website_id, **customer_fields)

    def create_platform_payment_profile(
        self,
        subscribe_pro_customer_id: int,
        payment_profile_data: Dict[str, Any],
        billing_address: Optional[Address],
        website_id=None,
    ) -> PaymentProfile:
        """
        Crée et sauvegarde un profil de paiement Apple Pay sur la plateforme.
        - Adresse de facturation absente: BillingAddressEmptyError, aucun appel plateforme
        - Un seul envoi réseau (save_apple_pay_profile) en fin de flux; erreurs plateforme propagées
        Retour: le profil mis à jour avec les identifiants attribués par le serveur.
        """
        if not billing_address:
            raise BillingAddressEmptyError()

        # Nouveau profil
        payment_profile = self.platform_payment_profile.create_apple_pay_profile(payment_profile_data, website_id)

        sp_billing_address = payment_profile.get_billing_address()
        self.map_magento_address_to_platform(billing_address, sp_billing_address)
        payment_profile.set_billing_address(sp_billing_address)

        payment_profile.set_customer_id(subscribe_pro_customer_id)
        payment_profile.set_apple_pay_payment_data(payment_profile_data)

        # Création via l'API
        self.platform_payment_profile.save_apple_pay_profile(payment_profile)
        self.logger.info(
            "applepay.core payment profile created id=%s customer_id=%s",
            payment_profile.id, subscribe_pro_customer_id,
        )
        return payment_profile

    def map_magento_address_to_platform(self, magento_address: Address, platform_address: PlatformAddress) -> None:
        platform_address.first_name = magento_address.get_data("firstname")
        platform_address.last_name = magento_address.get_data("lastname")
        platform_address.company = magento_address.get_data("company")
        platform_address.street1 = str(magento_address.get_street_line(1))
        street2 = magento_address.get_street_line(2)
        if street2:
            platform_address.street2 = str(street2)
        else:
            platform_address.street2 = None
        platform_address.city = magento_address.get_data("city")
        platform_address.region = magento_address.get_data("region_code")
        platform_address.postcode = magento_address.get_data("postcode")
        platform_address.country = magento_address.get_data("country_id")
        platform_address.phone = magento_address.get_data("telephone")

    def map_subscribe_pro_card_type_to_magento(self, card_type: Optional[str], throw_exception_on_type_not_found: bool = True) -> Optional[str]:
        card_types = self.get_all_card_type_mappings()
        if card_type in card_types:
            return card_types[card_type]
        if throw_exception_on_type_not_found:
            raise InvalidCardTypeError(card_type)
        return None

    def get_all_card_type_mappings(self) -> Dict[str, str]:
        return dict(CARD_TYPE_MAPPINGS)

    def quote_submit_order(self, cart_id: Any, payment_method: Optional[Payment] = None) -> str:
        return self.quote_management.place_order(cart_id, payment_method)

    def place_order(self, quote_id: Any, default_shipping_method: Optional[str] = None) -> bool:
        return self.order_service.create_order(quote_id, default_shipping_method)

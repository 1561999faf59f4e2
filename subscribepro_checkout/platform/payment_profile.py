"""
Profils de paiement Apple Pay côté plateforme.
- create_apple_pay_profile: coquille locale non sauvegardée (aucun appel réseau)
- save_apple_pay_profile: unique appel API, le profil est mis à jour avec la réponse
"""
import logging
from typing import Any, Callable, Dict

from subscribepro_checkout.platform.client import PlatformClient, get_platform_client
from subscribepro_checkout.platform.models import PaymentProfile

logger = logging.getLogger(__name__)

APPLE_PAY_PROFILE_PATH = "/services/v2/vault/paymentprofile/applepay.json"

# module subscribepro_checkout.platform.payment_profile
class ApplePayPaymentProfileService:
    def __init__(self, client_factory: Callable[..., PlatformClient] = get_platform_client):
        self.client_factory = client_factory

    def create_apple_pay_profile(self, data: Dict[str, Any], website_id=None) -> PaymentProfile:
        profile = PaymentProfile(website_id=website_id)
        profile.set_apple_pay_payment_data(data or {})
        return profile

    def save_apple_pay_profile(self, profile: PaymentProfile) -> PaymentProfile:
        client = self.client_factory(profile.website_id)
        data = client.post(APPLE_PAY_PROFILE_PATH, {"payment_profile": profile.to_apple_pay_dict()})
        profile.import_data(data.get("payment_profile") or {})
        logger.info(
            "platform.payment_profile saved id=%s customer_id=%s type=%s",
            profile.id, profile.customer_id, profile.creditcard_type,
        )
        return profile

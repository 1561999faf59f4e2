import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from subscribepro_checkout import config
from subscribepro_checkout.applepay.core import ApplePayCore
from subscribepro_checkout.applepay.dependencies import (
    get_apple_pay_core,
    get_apple_pay_payment_service,
    get_third_party_payment,
)
from subscribepro_checkout.applepay.service import ApplePayPaymentService
from subscribepro_checkout.settings import ThirdPartyPayment
from subscribepro_checkout.utils.rate_limit import optional_rate_limit

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/applepay", tags=["Apple Pay"])


class ApplePayPaymentBody(BaseModel):
    token: Dict[str, Any] = Field(default_factory=dict)
    billingContact: Optional[Dict[str, Any]] = None
    shippingContact: Optional[Dict[str, Any]] = None


class PaymentProfileRequest(BaseModel):
    payment: ApplePayPaymentBody
    website_id: Optional[int] = None


class PlaceOrderRequest(BaseModel):
    default_shipping_method: Optional[str] = None


# module subscribepro_checkout.applepay.views
@router.get("/payment-request")
def get_payment_request(core: ApplePayCore = Depends(get_apple_pay_core)) -> Dict[str, Any]:
    """
    Données de la feuille de paiement Apple Pay pour le panier courant.
    - total: {"label": "MERCHANT", "amount": "..."}
    - lineItems: SUBTOTAL, SHIPPING, TAX (dans cet ordre)
    """
    quote = core.get_quote()
    return {
        "total": core.get_grand_total(),
        "lineItems": core.get_row_items(),
        "currencyCode": quote.currency_code,
    }

@router.post("/payment-profile", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
def create_payment_profile(
    body: PaymentProfileRequest,
    service: ApplePayPaymentService = Depends(get_apple_pay_payment_service),
) -> Dict[str, Any]:
    """
    Crée le profil de paiement plateforme à partir du token Apple Pay et l'attache au panier.
    - Erreurs métier (adresse manquante, panier introuvable): 400 via le handler LocalizedException
    - Erreurs plateforme: 502 via le handler PlatformApiError
    """
    profile = service.set_payment_to_quote(body.payment.model_dump(), body.website_id)
    return {
        "status": "ok",
        "profile": {
            "id": profile.id,
            "customer_id": profile.customer_id,
            "creditcard_type": profile.creditcard_type,
            "creditcard_last_digits": profile.creditcard_last_digits,
        },
    }

@router.post("/place-order")
def place_order(
    body: Optional[PlaceOrderRequest] = None,
    core: ApplePayCore = Depends(get_apple_pay_core),
) -> Dict[str, Any]:
    """
    Passe la commande du panier courant.
    - default_shipping_method: appliqué si le panier n'a pas de mode de livraison (défaut: DEFAULT_SHIPPING_METHOD)
    - 400 si la commande n'a pas pu être créée (place_order renvoie False)
    """
    shipping_method = (body.default_shipping_method if body else None) or config.DEFAULT_SHIPPING_METHOD
    quote = core.get_quote()
    if not core.place_order(quote.id, shipping_method):
        raise HTTPException(status_code=400, detail="La commande n'a pas pu être créée")
    logger.info("applepay.place_order ok quote_id=%s", quote.id)
    return {"status": "ok"}

@router.get("/third-party-methods")
def get_third_party_methods(
    store_id: Optional[int] = Query(default=None),
    third_party: ThirdPartyPayment = Depends(get_third_party_payment),
) -> Dict[str, Any]:
    return {
        "allowed": third_party.is_allowed(store_id),
        "methods": third_party.get_allowed_methods(store_id),
    }

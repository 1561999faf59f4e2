"""
Dépendances FastAPI du module applepay.
- Construit un ApplePayCore par requête à partir de la session (quote_id, customer)
- Chaque fournisseur est surchargeable via app.dependency_overrides (boutique hôte, tests)
"""
from functools import lru_cache

from fastapi import Depends, Request

from subscribepro_checkout import config
from subscribepro_checkout.applepay.core import ApplePayCore
from subscribepro_checkout.applepay.service import ApplePayPaymentService
from subscribepro_checkout.checkout import (
    CheckoutSession,
    Currency,
    CustomerSession,
    OrderService,
    QuoteManagement,
    RegionDirectory,
    get_order_repository,
    get_quote_repository,
)
from subscribepro_checkout.platform import ApplePayPaymentProfileService, PlatformCustomerManager
from subscribepro_checkout.settings import ScopeConfig, ThirdPartyPayment

# module subscribepro_checkout.applepay.dependencies
@lru_cache(maxsize=1)
def get_scope_config() -> ScopeConfig:
    return ScopeConfig.from_file()

@lru_cache(maxsize=1)
def get_region_directory() -> RegionDirectory:
    return RegionDirectory()

def get_third_party_payment(scope_config: ScopeConfig = Depends(get_scope_config)) -> ThirdPartyPayment:
    return ThirdPartyPayment(scope_config)

def get_platform_customer_manager() -> PlatformCustomerManager:
    return PlatformCustomerManager()

def get_payment_profile_service() -> ApplePayPaymentProfileService:
    return ApplePayPaymentProfileService()

def get_apple_pay_core(
    request: Request,
    directory_region: RegionDirectory = Depends(get_region_directory),
    platform_customer: PlatformCustomerManager = Depends(get_platform_customer_manager),
    platform_payment_profile: ApplePayPaymentProfileService = Depends(get_payment_profile_service),
) -> ApplePayCore:
    """Nouvelle instance par requête (cache panier/client limité à la requête)."""
    quote_repository = get_quote_repository()
    quote_management = QuoteManagement(quote_repository, get_order_repository())
    session = request.session
    quote = quote_repository.get(session.get("quote_id"))
    return ApplePayCore(
        checkout_session=CheckoutSession(quote_repository, session.get("quote_id")),
        customer_session=CustomerSession(session.get("customer")),
        currency=Currency(quote.currency_code if quote else config.DEFAULT_CURRENCY),
        directory_region=directory_region,
        platform_customer=platform_customer,
        platform_payment_profile=platform_payment_profile,
        order_service=OrderService(quote_repository, quote_management),
        quote_management=quote_management,
    )

def get_apple_pay_payment_service(core: ApplePayCore = Depends(get_apple_pay_core)) -> ApplePayPaymentService:
    return ApplePayPaymentService(core)

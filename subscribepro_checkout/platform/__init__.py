"""
Module 'platform': client REST Subscribe Pro, clients plateforme, profils de paiement Apple Pay.
"""
from .client import PlatformClient, get_platform_client, reset_platform_clients
from .models import PlatformAddress, PlatformCustomer, PaymentProfile
from .customer import PlatformCustomerManager
from .payment_profile import ApplePayPaymentProfileService

__all__ = [
    "PlatformClient",
    "get_platform_client",
    "reset_platform_clients",
    "PlatformAddress",
    "PlatformCustomer",
    "PaymentProfile",
    "PlatformCustomerManager",
    "ApplePayPaymentProfileService",
]

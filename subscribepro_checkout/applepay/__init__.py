"""
Module 'applepay' (feature-first): orchestration du checkout Apple Pay, cas d'usage et endpoints.
"""
from .core import ApplePayCore, CARD_TYPE_MAPPINGS
from .service import ApplePayPaymentService, PAYMENT_METHOD_CODE

__all__ = [
    "ApplePayCore",
    "CARD_TYPE_MAPPINGS",
    "ApplePayPaymentService",
    "PAYMENT_METHOD_CODE",
]

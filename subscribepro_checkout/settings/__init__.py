"""
Module 'settings': réglages store-scope (paiements tiers).
"""
from .scope_config import ScopeConfig, SCOPE_DEFAULT, SCOPE_STORE
from .third_party_payment import ThirdPartyPayment, XML_PATH_IS_ALLOWED, XML_PATH_ALLOWED_METHODS

__all__ = [
    "ScopeConfig",
    "SCOPE_DEFAULT",
    "SCOPE_STORE",
    "ThirdPartyPayment",
    "XML_PATH_IS_ALLOWED",
    "XML_PATH_ALLOWED_METHODS",
]

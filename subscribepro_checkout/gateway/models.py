# module subscribepro_checkout.gateway.models
"""Objets manipulés par le pipeline gateway (paiement de commande + token vault)."""
from typing import Any, Dict, Optional


class VaultPaymentToken:
    def __init__(self, gateway_token: str, customer_id: Optional[int] = None, payment_method_code: str = "subscribe_pro"):
        self.gateway_token = gateway_token
        self.customer_id = customer_id
        self.payment_method_code = payment_method_code


class PaymentExtensionAttributes:
    def __init__(self, vault_payment_token: Optional[VaultPaymentToken] = None):
        self.vault_payment_token = vault_payment_token


class OrderPayment:
    def __init__(
        self,
        method: str = "subscribe_pro_vault",
        extension_attributes: Optional[PaymentExtensionAttributes] = None,
        additional_information: Optional[Dict[str, Any]] = None,
    ):
        self.method = method
        self.extension_attributes = extension_attributes
        self.additional_information = dict(additional_information or {})


class PaymentDataObject:
    """Enveloppe passée aux builders: le paiement et (optionnellement) la commande."""

    def __init__(self, payment: OrderPayment, order: Any = None):
        self.payment = payment
        self.order = order

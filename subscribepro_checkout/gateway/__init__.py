"""
Module 'gateway': construction des requêtes de paiement (token vault, montant).
"""
from .models import VaultPaymentToken, PaymentExtensionAttributes, OrderPayment, PaymentDataObject
from .subject_reader import SubjectReader
from .request import VaultDataBuilder, AmountDataBuilder, BuilderComposite, PAYMENT_PROFILE_ID, AMOUNT

__all__ = [
    "VaultPaymentToken",
    "PaymentExtensionAttributes",
    "OrderPayment",
    "PaymentDataObject",
    "SubjectReader",
    "VaultDataBuilder",
    "AmountDataBuilder",
    "BuilderComposite",
    "PAYMENT_PROFILE_ID",
    "AMOUNT",
]

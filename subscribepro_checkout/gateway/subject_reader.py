"""
Lecture du « build subject » (mapping opaque transmis aux builders de requête gateway).
"""
from typing import Any, Dict

from subscribepro_checkout.gateway.models import PaymentDataObject

# module subscribepro_checkout.gateway.subject_reader
class SubjectReader:
    def read_payment(self, subject: Dict[str, Any]) -> PaymentDataObject:
        payment = (subject or {}).get("payment")
        if not isinstance(payment, PaymentDataObject):
            raise ValueError("Payment data object should be provided")
        return payment

    def read_amount(self, subject: Dict[str, Any]) -> float:
        amount = (subject or {}).get("amount")
        if amount is None:
            raise ValueError("Payment amount should be provided")
        return float(amount)

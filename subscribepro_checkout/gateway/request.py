"""
Builders de requête gateway.
- VaultDataBuilder: {"profile_id": <gateway token>} depuis le token vault du paiement.
- AmountDataBuilder: {"amount": <montant en centimes>} depuis le subject.
- BuilderComposite: fusionne les fragments (les clés des builders suivants écrasent les précédentes).
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable

from subscribepro_checkout.exceptions import VaultNotFoundError
from subscribepro_checkout.gateway.subject_reader import SubjectReader

logger = logging.getLogger(__name__)

PAYMENT_PROFILE_ID = "profile_id"
AMOUNT = "amount"

# module subscribepro_checkout.gateway.request
class VaultDataBuilder:
    def __init__(self, subject_reader: SubjectReader):
        self.subject_reader = subject_reader

    def build(self, build_subject: Dict[str, Any]) -> Dict[str, Any]:
        payment_do = self.subject_reader.read_payment(build_subject)
        payment = payment_do.payment

        extension_attributes = getattr(payment, "extension_attributes", None)
        if not extension_attributes or not extension_attributes.vault_payment_token:
            logger.error("gateway.vault_data_builder: token vault absent method=%s", getattr(payment, "method", None))
            raise VaultNotFoundError()

        payment_token = extension_attributes.vault_payment_token
        return {PAYMENT_PROFILE_ID: payment_token.gateway_token}


class AmountDataBuilder:
    def __init__(self, subject_reader: SubjectReader):
        self.subject_reader = subject_reader

    def build(self, build_subject: Dict[str, Any]) -> Dict[str, Any]:
        # La plateforme attend des centimes, arrondi au demi supérieur comme Currency
        amount = Decimal(str(self.subject_reader.read_amount(build_subject)))
        return {AMOUNT: int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))}


class BuilderComposite:
    def __init__(self, builders: Iterable[Any]):
        self.builders = list(builders)

    def build(self, build_subject: Dict[str, Any]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for builder in self.builders:
            result.update(builder.build(build_subject))
        return result

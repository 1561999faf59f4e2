import pytest

from subscribepro_checkout.exceptions import VaultNotFoundError
from subscribepro_checkout.gateway import (
    AmountDataBuilder,
    BuilderComposite,
    OrderPayment,
    PaymentDataObject,
    PaymentExtensionAttributes,
    SubjectReader,
    VaultDataBuilder,
    VaultPaymentToken,
)

def _subject(extension_attributes):
    return {"payment": PaymentDataObject(OrderPayment(extension_attributes=extension_attributes))}

def test_build_returns_profile_id():
    builder = VaultDataBuilder(SubjectReader())
    subject = _subject(PaymentExtensionAttributes(VaultPaymentToken("tok_abc")))
    assert builder.build(subject) == {"profile_id": "tok_abc"}

def test_build_without_extension_attributes_raises():
    builder = VaultDataBuilder(SubjectReader())
    with pytest.raises(VaultNotFoundError) as exc:
        builder.build(_subject(None))
    assert "vault is not found" in str(exc.value)

def test_build_without_token_raises():
    builder = VaultDataBuilder(SubjectReader())
    with pytest.raises(VaultNotFoundError):
        builder.build(_subject(PaymentExtensionAttributes(None)))

def test_subject_reader_requires_payment_data_object():
    with pytest.raises(ValueError):
        VaultDataBuilder(SubjectReader()).build({"payment": {"not": "a payment"}})
    with pytest.raises(ValueError):
        SubjectReader().read_payment({})

def test_composite_merges_fragments():
    reader = SubjectReader()
    composite = BuilderComposite([VaultDataBuilder(reader), AmountDataBuilder(reader)])
    subject = _subject(PaymentExtensionAttributes(VaultPaymentToken("tok_xyz")))
    subject["amount"] = 10.5
    assert composite.build(subject) == {"profile_id": "tok_xyz", "amount": 1050}

def test_composite_stops_when_vault_missing():
    reader = SubjectReader()
    composite = BuilderComposite([AmountDataBuilder(reader), VaultDataBuilder(reader)])
    subject = _subject(None)
    subject["amount"] = 10
    with pytest.raises(VaultNotFoundError):
        composite.build(subject)

@pytest.mark.parametrize("amount,cents", [
    (1.015, 102), (0.285, 29), (0.125, 13), (10.5, 1050), ("19.99", 1999), (0, 0),
])
def test_amount_builder_rounds_half_up(amount, cents):
    assert AmountDataBuilder(SubjectReader()).build({"amount": amount}) == {"amount": cents}

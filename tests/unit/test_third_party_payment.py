import pytest
from unittest.mock import MagicMock

from subscribepro_checkout.settings import (
    ScopeConfig,
    ThirdPartyPayment,
    XML_PATH_IS_ALLOWED,
    XML_PATH_ALLOWED_METHODS,
    SCOPE_STORE,
)

def _third_party(default=None, stores=None):
    return ThirdPartyPayment(ScopeConfig({"default": default or {}, "stores": stores or {}}, environ={}))

def test_allowed_methods_split_in_order():
    tp = _third_party({XML_PATH_IS_ALLOWED: "1", XML_PATH_ALLOWED_METHODS: "visa,master,amex"})
    assert tp.is_allowed() is True
    assert tp.get_allowed_methods() == ["visa", "master", "amex"]

def test_allowed_methods_keeps_duplicates():
    tp = _third_party({XML_PATH_IS_ALLOWED: True, XML_PATH_ALLOWED_METHODS: "paypal,paypal,braintree"})
    assert tp.get_allowed_methods() == ["paypal", "paypal", "braintree"]

@pytest.mark.parametrize("flag", ["0", "", None, False, "no"])
def test_allowed_methods_empty_when_not_allowed(flag):
    tp = _third_party({XML_PATH_IS_ALLOWED: flag, XML_PATH_ALLOWED_METHODS: "visa,master"})
    assert tp.is_allowed() is False
    assert tp.get_allowed_methods() == []

@pytest.mark.parametrize("value", ["", None])
def test_allowed_methods_empty_value(value):
    tp = _third_party({XML_PATH_IS_ALLOWED: "1", XML_PATH_ALLOWED_METHODS: value})
    assert tp.get_allowed_methods() == []

def test_store_scope_overrides_default():
    tp = _third_party(
        {XML_PATH_IS_ALLOWED: "0", XML_PATH_ALLOWED_METHODS: "visa"},
        {"2": {XML_PATH_IS_ALLOWED: "1", XML_PATH_ALLOWED_METHODS: "paypal,affirm"}},
    )
    assert tp.get_allowed_methods() == []
    assert tp.get_allowed_methods(2) == ["paypal", "affirm"]
    # store inconnu: retombe sur le scope default
    assert tp.get_allowed_methods(3) == []

def test_reads_through_scope_config_with_store_scope():
    scope_config = MagicMock()
    scope_config.is_set_flag.return_value = True
    scope_config.get_value.return_value = "a,b"
    tp = ThirdPartyPayment(scope_config)

    assert tp.get_allowed_methods(7) == ["a", "b"]
    scope_config.get_value.assert_called_once_with(XML_PATH_ALLOWED_METHODS, SCOPE_STORE, 7)
    scope_config.is_set_flag.assert_called_once_with(XML_PATH_IS_ALLOWED, SCOPE_STORE, 7)

def test_config_store_errors_propagate():
    scope_config = MagicMock()
    scope_config.is_set_flag.side_effect = RuntimeError("config store unreachable")
    with pytest.raises(RuntimeError):
        ThirdPartyPayment(scope_config).is_allowed(1)

import json
import pytest

from subscribepro_checkout.settings import ScopeConfig, SCOPE_STORE, XML_PATH_IS_ALLOWED

def test_from_file_missing_gives_empty_config(tmp_path):
    cfg = ScopeConfig.from_file(str(tmp_path / "absent.json"))
    assert cfg.get_value("any/path") is None

def test_from_file_reads_default_and_stores(tmp_path):
    path = tmp_path / "scope.json"
    path.write_text(json.dumps({
        "default": {"a/b/c": "x"},
        "stores": {"1": {"a/b/c": "y"}},
    }), encoding="utf-8")
    cfg = ScopeConfig.from_file(str(path))
    assert cfg.get_value("a/b/c") == "x"
    assert cfg.get_value("a/b/c", SCOPE_STORE, 1) == "y"
    assert cfg.get_value("a/b/c", SCOPE_STORE, 2) == "x"

def test_from_file_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        ScopeConfig.from_file(str(path))

def test_env_override_applies_to_default_scope():
    env = {"SWARMING_SUBSCRIBEPRO__THIRD_PARTY_PAYMENT__IS_ALLOWED": "true"}
    cfg = ScopeConfig({"default": {XML_PATH_IS_ALLOWED: "0"}}, environ=env)
    assert cfg.is_set_flag(XML_PATH_IS_ALLOWED) is True

@pytest.mark.parametrize("value,expected", [
    ("1", True), ("TRUE", True), ("on", True), (1, True), (True, True),
    ("0", False), ("false", False), (0, False), (None, False), ("", False),
])
def test_is_set_flag_parsing(value, expected):
    cfg = ScopeConfig({"default": {"x/y/z": value}}, environ={})
    assert cfg.is_set_flag("x/y/z") is expected

"""
Store de configuration « scopé » (default / store).
- Source: fichier JSON (SCOPE_CONFIG_FILE) de la forme
  {"default": {"<path>": <valeur>}, "stores": {"<store_id>": {"<path>": <valeur>}}}
- Surcharges par variables d'environnement: le chemin en majuscules, "/" remplacé par "__"
  (ex: SWARMING_SUBSCRIBEPRO__THIRD_PARTY_PAYMENT__IS_ALLOWED=1), appliquées au scope default.
- Résolution: valeur du store si définie, sinon valeur par défaut.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from subscribepro_checkout.config import SCOPE_CONFIG_FILE

logger = logging.getLogger(__name__)

SCOPE_DEFAULT = "default"
SCOPE_STORE = "store"

_TRUTHY = {"1", "true", "yes", "on"}

# module subscribepro_checkout.settings.scope_config
def _env_key(path: str) -> str:
    return path.upper().replace("/", "__")

def _is_truthy(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in _TRUTHY

class ScopeConfig:
    def __init__(self, data: Optional[Dict[str, Any]] = None, environ: Optional[Dict[str, str]] = None):
        data = data or {}
        self._default: Dict[str, Any] = dict(data.get("default") or {})
        self._stores: Dict[str, Dict[str, Any]] = {
            str(k): dict(v or {}) for k, v in (data.get("stores") or {}).items()
        }
        self._environ = os.environ if environ is None else environ

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "ScopeConfig":
        """
        Charge la configuration depuis un fichier JSON.
        - Fichier absent: configuration vide (seules les variables d'environnement comptent).
        - JSON invalide: l'erreur est propagée (configuration cassée = démarrage impossible).
        """
        file_path = Path(path or SCOPE_CONFIG_FILE)
        if not file_path.exists():
            logger.info("scope_config: %s absent, configuration vide", file_path)
            return cls({})
        with file_path.open(encoding="utf-8") as fh:
            return cls(json.load(fh))

    def get_value(self, path: str, scope: str = SCOPE_DEFAULT, scope_id=None) -> Any:
        if scope == SCOPE_STORE and scope_id is not None:
            store_values = self._stores.get(str(scope_id)) or {}
            if path in store_values:
                return store_values[path]
        env_value = self._environ.get(_env_key(path))
        if env_value is not None:
            return env_value
        return self._default.get(path)

    def is_set_flag(self, path: str, scope: str = SCOPE_DEFAULT, scope_id=None) -> bool:
        return _is_truthy(self.get_value(path, scope, scope_id))

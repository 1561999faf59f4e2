# subscribepro_checkout.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale de l'intégration Subscribe Pro.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise et expose les identifiants de la plateforme (URL, client id/secret, timeout)
- Expose les réglages de session, CORS et de checkout (devise, mode de livraison par défaut)
- Les réglages « store scope » (paiements tiers) vivent dans un fichier JSON (SCOPE_CONFIG_FILE)
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def website_credentials(website_id) -> tuple[str, str]:
    """
    Identifiants OAuth de la plateforme pour un website donné.
    - SUBSCRIBEPRO_WEBSITE_<ID>_CLIENT_ID / _CLIENT_SECRET si présents
    - sinon le couple par défaut SUBSCRIBEPRO_CLIENT_ID / SUBSCRIBEPRO_CLIENT_SECRET
    """
    if website_id is not None:
        prefix = f"SUBSCRIBEPRO_WEBSITE_{website_id}_"
        client_id = _clean_env(os.getenv(prefix + "CLIENT_ID") or "")
        client_secret = _clean_env(os.getenv(prefix + "CLIENT_SECRET") or "")
        if client_id and client_secret:
            return client_id, client_secret
    return SUBSCRIBEPRO_CLIENT_ID, SUBSCRIBEPRO_CLIENT_SECRET

# Plateforme Subscribe Pro: URL de base (préfixée en https:// si besoin) et identifiants
SUBSCRIBEPRO_BASE_URL = _clean_env(os.getenv("SUBSCRIBEPRO_BASE_URL") or "https://api.subscribepro.com")
if SUBSCRIBEPRO_BASE_URL and not SUBSCRIBEPRO_BASE_URL.startswith("http"):
    SUBSCRIBEPRO_BASE_URL = "https://" + SUBSCRIBEPRO_BASE_URL
SUBSCRIBEPRO_BASE_URL = SUBSCRIBEPRO_BASE_URL.rstrip("/")

SUBSCRIBEPRO_CLIENT_ID = _clean_env(os.getenv("SUBSCRIBEPRO_CLIENT_ID") or "")
SUBSCRIBEPRO_CLIENT_SECRET = _clean_env(os.getenv("SUBSCRIBEPRO_CLIENT_SECRET") or "")
SUBSCRIBEPRO_TIMEOUT = float(os.getenv("SUBSCRIBEPRO_TIMEOUT", "10"))

# Réglages « store scope » (paiements tiers autorisés, etc.)
SCOPE_CONFIG_FILE = _clean_env(os.getenv("SCOPE_CONFIG_FILE") or str(BASE_DIR / "scope_config.json"))

# Session / CORS
SESSION_SECRET = _clean_env(os.getenv("SESSION_SECRET") or "replace_me_with_a_long_random_secret")
COOKIE_SECURE = (os.getenv("COOKIE_SECURE", "false").lower() == "true")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Checkout: devise par défaut et mode de livraison appliqué si le panier n'en a pas
DEFAULT_CURRENCY = _clean_env(os.getenv("DEFAULT_CURRENCY") or "USD")
DEFAULT_SHIPPING_METHOD = _clean_env(os.getenv("DEFAULT_SHIPPING_METHOD") or "flatrate_flatrate")

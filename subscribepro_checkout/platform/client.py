"""
Client HTTP de la plateforme Subscribe Pro (API REST v2).
- Authentification HTTP Basic (client id / client secret), JSON en entrée et en sortie.
- Toute réponse non-2xx lève PlatformApiError (pas de retry, pas de fallback).
- Un client par website, créé à la demande (get_platform_client).
"""
import logging
import threading
from typing import Any, Dict, Optional

import httpx

from subscribepro_checkout import config
from subscribepro_checkout.exceptions import PlatformApiError

logger = logging.getLogger(__name__)

_clients: Dict[Any, "PlatformClient"] = {}
_clients_lock = threading.Lock()

# module subscribepro_checkout.platform.client
class PlatformClient:
    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        timeout: float = 10,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url,
            auth=(client_id, client_secret),
            headers={"Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", path, json=payload)

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        resp = self._http.request(method, path, **kwargs)
        if 200 <= resp.status_code < 300:
            if not resp.content:
                return {}
            try:
                data = resp.json()
            except ValueError:
                data = None
            if not isinstance(data, dict):
                logger.error("platform.client %s %s: réponse inattendue status=%s body=%s", method, path, resp.status_code, resp.text)
                raise PlatformApiError(resp.status_code, "Unexpected response from the platform.", {})
            return data
        body = _safe_json(resp)
        message = body.get("message") or body.get("error") or resp.text or resp.reason_phrase
        logger.error("platform.client %s %s failed: status=%s body=%s", method, path, resp.status_code, resp.text)
        raise PlatformApiError(resp.status_code, str(message), body)


def _safe_json(resp: httpx.Response) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def get_platform_client(website_id=None) -> PlatformClient:
    """
    Retourne le client du website (créé une seule fois par processus).
    - Identifiants: config.website_credentials(website_id)
    """
    with _clients_lock:
        client = _clients.get(website_id)
        if client is None:
            client_id, client_secret = config.website_credentials(website_id)
            if not client_id or not client_secret:
                logger.warning("platform.client: identifiants absents pour website_id=%s", website_id)
            client = PlatformClient(
                config.SUBSCRIBEPRO_BASE_URL,
                client_id,
                client_secret,
                timeout=config.SUBSCRIBEPRO_TIMEOUT,
            )
            _clients[website_id] = client
        return client


def reset_platform_clients() -> None:
    with _clients_lock:
        for client in _clients.values():
            client.close()
        _clients.clear()

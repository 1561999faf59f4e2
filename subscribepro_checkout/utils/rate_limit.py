"""
Limitation de débit optionnelle des routes de checkout.
- Clé: panier de la session (quote_id), sinon cookie de session hashé, sinon IP; toujours suffixée par le chemin
- LOCAL_RATE_LIMIT_FALLBACK=1: compteur en mémoire (dev, tests)
- Sinon fastapi-limiter (Redis) uniquement si le lifespan l'a activé (app.state.rate_limit_enabled)
"""
from typing import Dict, Any
from urllib.parse import urlparse
from fastapi import Request, Response, HTTPException
import os
import time
import hashlib

SESSION_COOKIE_NAME = "session"

def rate_limit_key(request: Request) -> str:
    path = request.url.path
    # request.session n'existe que si SessionMiddleware est installé
    if "session" in request.scope:
        quote_id = request.session.get("quote_id")
        if quote_id:
            return f"cart:{quote_id}:{path}"
    cookie = request.cookies.get(SESSION_COOKIE_NAME)
    if cookie:
        digest = hashlib.sha256(cookie.encode("utf-8")).hexdigest()[:16]
        return f"session:{digest}:{path}"
    ip = request.client.host if request.client else "local"
    return f"ip:{ip}:{path}"

def _local_hit(request: Request, times: int, seconds: int) -> None:
    now = time.time()
    key = rate_limit_key(request)
    store = getattr(request.app.state, "_rl_store", {})
    hits = [t for t in store.get(key, []) if now - t < seconds]
    if len(hits) >= times:
        raise HTTPException(status_code=429, detail="Too Many Requests")
    hits.append(now)
    store[key] = hits
    request.app.state._rl_store = store

def optional_rate_limit(times: int, seconds: int):
    async def _dep(request: Request, response: Response):
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            _local_hit(request, times, seconds)
            return

        if getattr(request.app.state, "rate_limit_enabled", None) is not True:
            return

        from fastapi_limiter.depends import RateLimiter

        async def _identifier(req: Request) -> str:
            return rate_limit_key(req)
        await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
    return _dep

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    from fastapi_limiter import FastAPILimiter

    enabled = getattr(request.app.state, "rate_limit_enabled", None)
    ready = getattr(FastAPILimiter, "redis", None) is not None
    info: Dict[str, Any] = {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": ready,
        "backend": "redis" if ready else None,
    }
    redis_url = os.getenv("RATE_LIMIT_REDIS_URL")
    if ready and redis_url:
        parsed = urlparse(redis_url)
        info["redis"] = {"scheme": parsed.scheme, "host": parsed.hostname, "port": parsed.port}
    return info

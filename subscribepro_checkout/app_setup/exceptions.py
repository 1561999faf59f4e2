"""
Gestionnaires d’exceptions utilisés par la factory.
- HTTPException: réponse JSON standard {"detail": ...}
- LocalizedException (adresse manquante, type de carte invalide, panier introuvable...): 400
- VaultNotFoundError: 400, le pipeline gateway ne doit pas débiter
- PlatformApiError: 502, l’erreur de la plateforme est remontée sans retry
"""
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from subscribepro_checkout.exceptions import LocalizedException, PlatformApiError, VaultNotFoundError

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(LocalizedException)
    async def localized_exception_handler(request: Request, exc: LocalizedException):
        logger.warning("LocalizedException path=%s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(VaultNotFoundError)
    async def vault_not_found_handler(request: Request, exc: VaultNotFoundError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(PlatformApiError)
    async def platform_api_error_handler(request: Request, exc: PlatformApiError):
        logger.error("PlatformApiError path=%s status=%s: %s", request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=502, content={"detail": exc.message, "platform_status": exc.status_code})

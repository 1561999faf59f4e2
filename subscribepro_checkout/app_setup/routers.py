"""
Registre central des routers (API v1 Apple Pay, health).
"""
from fastapi import FastAPI
from subscribepro_checkout.applepay import views as applepay_views
from subscribepro_checkout.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # API v1
    app.include_router(applepay_views.router)
    # Health & monitoring
    app.include_router(health_router)

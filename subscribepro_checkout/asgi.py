"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: gunicorn + uvicorn workers) importe `subscribepro_checkout.asgi:app`.
- Toute la configuration FastAPI est centralisée dans app_setup.factory.create_app().
"""
from subscribepro_checkout.app_setup.factory import create_app

app = create_app()

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router
from app.core.settings import settings
from app.core.logging import setup_logging
from app.core.errors import SERVER_ERROR_MESSAGE, error_payload
from app.core.request_id import set_request_id, ensure_request_id
from app.db.gateway import QueryError, QueryGateway, build_engine

"""
Application FastAPI (entrypoint).

Rôle (fonctionnel) :
- Construit l’application (create_app) : settings, CORS, middleware, routers, gestion d’erreurs.
- Gère le cycle de vie du pool PostgreSQL (lifespan) :
  - démarrage : création de la QueryGateway, log de la config DB (sans mot de passe),
    test de connexion en tâche de fond (le service écoute même si la base est injoignable,
    sauf DB_STARTUP_CHECK_FATAL=true)
  - arrêt (SIGINT / SIGTERM via uvicorn) : fermeture du pool avant la sortie du process.
- Centralise l’observabilité : request_id (X-Request-Id), log JSON par requête, seuil “slow request”.
- Uniformise les erreurs côté client : {"error": "..."} sans détail SQL ni stacktrace.

Ce fichier ne contient pas de logique métier :
- Les requêtes SQL sont dans app.db.queries
- Les use-cases sont dans app.services
- Les routes sont dans app.api
"""


class UTF8JSONResponse(JSONResponse):
    """Réponse JSON avec charset UTF-8 explicite (messages accentués)."""
    media_type = "application/json; charset=utf-8"


setup_logging(settings.LOG_LEVEL)

# logger principal projet
log = logging.getLogger("actionplan")

# logger dédié observabilité HTTP (séparé du métier)
http_log = logging.getLogger("app.http")

SLOW_MS = int(settings.SLOW_REQUEST_MS)


def _split_origins(value: str) -> list[str]:
    """Parse une liste d’origines CORS depuis une string 'a,b,c'."""
    if not value:
        return []
    return [o.strip() for o in value.split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    gateway: Optional[QueryGateway] = getattr(app.state, "gateway", None)
    if gateway is None:
        log.info("DB config", extra=settings.db_log_context())
        gateway = QueryGateway(build_engine(settings))
        app.state.gateway = gateway

    ping_task = None
    if settings.DB_STARTUP_CHECK_FATAL:
        if not await gateway.ping():
            await gateway.dispose()
            raise RuntimeError("PostgreSQL injoignable au démarrage")
    else:
        # Fail open : le test de connexion ne bloque pas le service
        ping_task = asyncio.create_task(gateway.ping())

    log.info("Serveur API démarré sur le port %s", settings.PORT)
    try:
        yield
    finally:
        log.info("Arrêt du serveur...")
        if ping_task is not None and not ping_task.done():
            ping_task.cancel()
        await gateway.dispose()


def create_app(gateway: Optional[QueryGateway] = None) -> FastAPI:
    """
    Construit l’application.

    - gateway fournie : utilisée telle quelle (tests, scripts) ; sinon créée au démarrage.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        default_response_class=UTF8JSONResponse,
        lifespan=lifespan,
    )
    if gateway is not None:
        app.state.gateway = gateway

    # --- CORS (toutes origines par défaut) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split_origins(settings.CORS_ORIGINS) or ["*"],
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    app.include_router(api_router)

    @app.middleware("http")
    async def request_observability(request: Request, call_next):
        rid = ensure_request_id(request.headers.get("X-Request-Id"))
        request.state.request_id = rid

        start = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            # Répondu ici (et non par ServerErrorMiddleware) : request_id encore actif, header posé
            log.error("Unhandled error: %s", exc, exc_info=exc, extra={"path": request.url.path})
            response = UTF8JSONResponse(status_code=500, content=error_payload(SERVER_ERROR_MESSAGE))
            return response
        finally:
            duration_ms = int((time.perf_counter() - start) * 1000)

            if response is not None:
                response.headers["X-Request-Id"] = rid

            level = logging.WARNING if duration_ms >= SLOW_MS else logging.INFO
            http_log.log(
                level,
                "request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": getattr(response, "status_code", None),
                    "duration_ms": duration_ms,
                    "client_ip": request.client.host if request.client else None,
                },
            )

            set_request_id(None)

    # --- Error handlers : {"error": "..."}, pas de stacktrace côté client ---
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """404 métier (AppHTTPException) et erreurs HTTP natives (route inconnue, 405…)."""
        return UTF8JSONResponse(
            status_code=exc.status_code,
            content=error_payload(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(QueryError)
    async def query_error_handler(request: Request, exc: QueryError):
        """Erreur base de données -> 500 générique + log serveur avec le contexte de la requête SQL."""
        log.error(
            "Erreur lors de la %s",
            exc.description,
            exc_info=exc,
            extra={"query": exc.query_name, "path": request.url.path},
        )
        return UTF8JSONResponse(status_code=500, content=error_payload(SERVER_ERROR_MESSAGE))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return UTF8JSONResponse(status_code=422, content=error_payload("Requête invalide"))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Fallback : toute exception non gérée -> 500 + log serveur."""
        log.error("Unhandled error: %s", exc, exc_info=exc, extra={"path": request.url.path})
        return UTF8JSONResponse(status_code=500, content=error_payload(SERVER_ERROR_MESSAGE))

    return app


app = create_app()

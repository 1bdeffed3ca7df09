from __future__ import annotations

import logging
import ssl
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.core.settings import Settings
from app.db.queries import PING, InvalidQueryParam, QueryDef

"""
DB Gateway.

Rôle (fonctionnel) :
- Construit l’engine SQLAlchemy async (driver asyncpg) à partir des settings :
  pool de connexions borné, TLS obligatoire vers PostgreSQL.
- Expose QueryGateway, seul point d’accès à la base pour les services :
  - fetch_all / fetch_one : exécutent une requête nommée (app.db.queries) avec des paramètres
    liés par position, et renvoient des lignes sous forme de dict (colonne -> valeur).
  - ping : test de connexion (acquire + SELECT 1 + release), loggé, ne lève jamais.
  - dispose : ferme le pool (arrêt propre).

Notes :
- Aucune variable globale : la gateway est créée dans le lifespan de l’application,
  stockée sur app.state et injectée dans les routes (Depends(get_gateway)).
- Toute erreur d’exécution (base injoignable, valeur invalide, SQL rejeté) est convertie en
  QueryError ; la couche HTTP la transforme en 500 générique.
"""

log = logging.getLogger("app.db")


class QueryError(RuntimeError):
    """Échec d’exécution d’une requête nommée (cause chaînée via __cause__)."""

    def __init__(self, query: QueryDef):
        super().__init__(f"Erreur lors de la {query.description} ({query.name})")
        self.query_name = query.name
        self.description = query.description


def build_ssl_context(settings: Settings) -> ssl.SSLContext:
    """
    Contexte TLS pour asyncpg.

    - DB_SSL_VERIFY=true : vérification du certificat + hostname (CA système ou DB_SSL_CA_FILE).
    - DB_SSL_VERIFY=false : chiffrement conservé, certificat serveur accepté sans vérification.
    """
    ctx = ssl.create_default_context(cafile=settings.DB_SSL_CA_FILE)
    if not settings.DB_SSL_VERIFY:
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
    return ctx


def build_engine(settings: Settings) -> AsyncEngine:
    """Engine async configuré une seule fois au démarrage (lève ConfigError si la config DB est incomplète)."""
    return create_async_engine(
        settings.database_url(),
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
        connect_args={"ssl": build_ssl_context(settings)},
    )


class QueryGateway:
    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def fetch_all(self, query: QueryDef, *args: Any) -> List[Dict[str, Any]]:
        """Exécute la requête et renvoie toutes les lignes, dans l’ordre du SQL."""
        try:
            values = query.bind(*args)
            async with self._engine.connect() as conn:
                result = await conn.execute(text(query.sql), values)
                return [dict(row) for row in result.mappings().all()]
        except (InvalidQueryParam, SQLAlchemyError, OSError) as exc:
            raise QueryError(query) from exc

    async def fetch_one(self, query: QueryDef, *args: Any) -> Optional[Dict[str, Any]]:
        """Première ligne ou None (recherche par clé primaire)."""
        rows = await self.fetch_all(query, *args)
        return rows[0] if rows else None

    async def ping(self) -> bool:
        try:
            await self.fetch_all(PING)
        except QueryError as exc:
            log.error("Erreur de connexion à PostgreSQL: %s", exc.__cause__, exc_info=exc)
            return False
        log.info("Connexion à PostgreSQL réussie")
        return True

    async def dispose(self) -> None:
        await self._engine.dispose()
        log.info("Pool de connexions fermé")

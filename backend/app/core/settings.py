from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

"""
Core Settings.

Rôle (fonctionnel) :
- Centralise la configuration de l’application via variables d’environnement (Pydantic Settings).
- Charge un fichier .env (par défaut backend/.env) pour faciliter le dev/local.
- Fournit un objet global `settings` importable dans tout le projet.

Organisation :
- App : nom, env, debug, niveau de log, seuil de requête lente.
- HTTP : hôte/port d’écoute, origines CORS.
- DB : identifiants de connexion (aucune valeur par défaut sauf le port),
  TLS obligatoire (vérification du certificat configurable), taille du pool.
- Démarrage : comportement si la base est injoignable au lancement.
"""

# Pointe toujours vers backend/.env (racine backend/)
ENV_PATH = Path(__file__).resolve().parents[2] / ".env"  # backend/.env


class ConfigError(RuntimeError):
    """Configuration incomplète ou invalide (fatal au démarrage)."""


class Settings(BaseSettings):
    # --- App ---
    APP_NAME: str = "Action Plan API"
    ENV: str = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    SLOW_REQUEST_MS: int = 800

    # --- HTTP ---
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Liste CSV des origines autorisées ("*" = toutes)
    CORS_ORIGINS: str = "*"

    # --- DB ---
    # Pas de valeur par défaut : lues uniquement depuis l’environnement
    DB_USER: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_NAME: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_PORT: int = 5432

    # TLS toujours actif ; DB_SSL_VERIFY=false accepte un certificat non vérifié (auto-signé)
    DB_SSL_VERIFY: bool = True
    DB_SSL_CA_FILE: Optional[str] = None

    # Pool de connexions (borne la concurrence côté base)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30

    # Si true : un échec du test de connexion au démarrage arrête le process
    DB_STARTUP_CHECK_FATAL: bool = False

    # Config Pydantic Settings
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def _require_db(self) -> None:
        missing = [
            name
            for name in ("DB_USER", "DB_HOST", "DB_NAME", "DB_PASSWORD")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigError(f"Variables de connexion manquantes : {', '.join(missing)}")

    def database_url(self) -> URL:
        """URL async (runtime FastAPI, driver asyncpg)."""
        self._require_db()
        return URL.create(
            "postgresql+asyncpg",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    def database_url_sync(self) -> URL:
        """URL sync (Alembic + scripts, driver psycopg) avec sslmode explicite."""
        self._require_db()
        if self.DB_SSL_VERIFY:
            # libpq ne lit pas le magasin système sans sslrootcert=system
            query = {"sslmode": "verify-full", "sslrootcert": self.DB_SSL_CA_FILE or "system"}
        else:
            # sslrootcert présent => libpq bascule en verify-ca
            query = {"sslmode": "require"}
        return URL.create(
            "postgresql+psycopg",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query=query,
        )

    def db_log_context(self) -> dict:
        """Paramètres DB non sensibles (jamais le mot de passe) pour le log de démarrage."""
        return {
            "db_user": self.DB_USER,
            "db_host": self.DB_HOST,
            "db_name": self.DB_NAME,
            "db_port": self.DB_PORT,
        }


# Instance globale importable
settings = Settings()

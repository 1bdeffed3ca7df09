import uvicorn

from app.core.settings import settings

"""
Lancement du serveur : `python -m app` (ou la commande `actionplan-api`).

uvicorn gère SIGINT / SIGTERM : le lifespan ferme le pool puis le process sort avec le code 0.
"""


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=(settings.ENV == "dev" and settings.DEBUG),
        log_config=None,  # logging déjà configuré en JSON par app.core.logging
    )


if __name__ == "__main__":
    main()

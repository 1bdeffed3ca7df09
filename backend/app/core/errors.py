from __future__ import annotations

from typing import Dict

from fastapi import HTTPException

"""
Core Errors.

Rôle (fonctionnel) :
- Standardise le format des erreurs renvoyées par l’API : un objet avec une seule clé "error"
  contenant un message lisible (pas de code structuré, pas de stacktrace).
- Fournit une exception applicative (AppHTTPException) pour lever les erreurs “métier”
  (ex : ressource introuvable) depuis les services.

Convention de réponse :
{
  "error": "Sujet non trouvé"
}
"""

# Message générique renvoyé au client pour toute erreur serveur / base de données
SERVER_ERROR_MESSAGE = "Erreur serveur"


def error_payload(message: str) -> Dict[str, str]:
    """Construit le payload d’erreur de l’API."""
    return {"error": message}


class AppHTTPException(HTTPException):
    """
    Exception applicative standardisée.

    Exemple :
        raise AppHTTPException(404, "Sujet non trouvé")
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.message = message

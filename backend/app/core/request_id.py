from __future__ import annotations

import re
import uuid
from contextvars import ContextVar

"""
Core Request ID.

Rôle (fonctionnel) :
- Conserve l’identifiant de la requête HTTP en cours (header X-Request-Id) dans un ContextVar.
- Le JsonFormatter le recopie dans chaque ligne de log : une erreur SQL loggée par le
  gestionnaire d’exceptions se rattache ainsi à la ligne "request" du middleware.

Notes :
- L’identifiant client est renvoyé en header et écrit dans les logs : seuls les caractères
  [A-Za-z0-9._:-] sont conservés, tronqués à MAX_REQUEST_ID_LEN.
- Si le client n’envoie rien d’exploitable, un UUID est généré.
- Le middleware remet la valeur à None en fin de requête.
"""

MAX_REQUEST_ID_LEN = 64

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._:\-]")

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(rid: str | None) -> None:
    _request_id.set(rid)


def get_request_id() -> str | None:
    return _request_id.get()


def sanitize_request_id(incoming: str | None) -> str | None:
    """Nettoie un X-Request-Id entrant ; None s’il ne reste rien."""
    if not incoming:
        return None
    cleaned = _UNSAFE_RE.sub("", incoming)[:MAX_REQUEST_ID_LEN]
    return cleaned or None


def ensure_request_id(incoming: str | None = None) -> str:
    """Réutilise l’identifiant entrant (nettoyé) ou en génère un, puis l’attache au contexte."""
    rid = sanitize_request_id(incoming) or str(uuid.uuid4())
    set_request_id(rid)
    return rid

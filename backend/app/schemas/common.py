from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator

"""
Schemas communs.

- Count : entier de comptage ; un agrégat NULL renvoyé par la base devient 0.
- HealthOut : réponse statique de /api/health.
- ErrorOut : enveloppe d’erreur {"error": "..."} (documentation OpenAPI des 404/500).
"""


def _zero_if_null(value: Any) -> Any:
    return 0 if value is None else value


Count = Annotated[int, BeforeValidator(_zero_if_null)]


class HealthOut(BaseModel):
    status: str
    message: str


class ErrorOut(BaseModel):
    error: str

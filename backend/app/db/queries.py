from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from app.models.action import (
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_NOUVEAU,
    STATUS_OVERDUE,
)

"""
Requêtes SQL nommées.

Rôle (fonctionnel) :
- Regroupe toutes les requêtes de lecture de l’API sous forme de définitions nommées
  (QueryDef) : nom, description (utilisée dans les logs d’erreur), SQL, paramètres.
- Chaque définition est validée à l’import : les placeholders `:nom` du SQL doivent
  correspondre exactement aux paramètres déclarés.
- Les paramètres sont toujours liés (bind) par le driver, jamais interpolés dans le SQL.

Notes :
- Les trois listes de sujets (tous / sous-sujets / racines) ne diffèrent que par les compteurs,
  les jointures et le filtre : elles sont construites par le même builder (_sujet_listing).
- Les compteurs utilisent COUNT(DISTINCT ...) : les LEFT JOIN multiples (actions + sous-sujets)
  produisent un produit cartésien que DISTINCT neutralise.
- COALESCE(..., 0) garantit un entier même si le moteur renvoie NULL.
"""

# Placeholder ":nom" (ignore les casts PostgreSQL "::type")
_BIND_RE = re.compile(r"(?<![:\w]):([A-Za-z_]\w*)")


class QueryDefinitionError(ValueError):
    """Définition de requête incohérente (placeholders / paramètres / arité)."""


class InvalidQueryParam(ValueError):
    """Valeur de paramètre non convertible vers le type attendu (ex : id non numérique)."""

    def __init__(self, param: str, value: Any):
        super().__init__(f"Paramètre invalide {param}={value!r}")
        self.param = param
        self.value = value


@dataclass(frozen=True)
class QueryParam:
    """Paramètre lié : nom du placeholder + conversion appliquée à la valeur brute (path param)."""
    name: str
    cast: Callable[[Any], Any] = int

    def convert(self, value: Any) -> Any:
        try:
            return self.cast(value)
        except (TypeError, ValueError) as exc:
            raise InvalidQueryParam(self.name, value) from exc


@dataclass(frozen=True)
class QueryDef:
    name: str
    description: str
    sql: str
    params: Tuple[QueryParam, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        placeholders = set(_BIND_RE.findall(self.sql))
        declared = [p.name for p in self.params]

        if len(declared) != len(set(declared)):
            raise QueryDefinitionError(f"{self.name}: paramètre déclaré deux fois {declared}")
        if placeholders != set(declared):
            raise QueryDefinitionError(
                f"{self.name}: placeholders {sorted(placeholders)} != paramètres {sorted(declared)}"
            )

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, *args: Any) -> Dict[str, Any]:
        """Associe les arguments positionnels aux paramètres déclarés (dans l’ordre)."""
        if len(args) != self.arity:
            raise QueryDefinitionError(f"{self.name}: {self.arity} paramètre(s) attendu(s), {len(args)} reçu(s)")
        return {p.name: p.convert(value) for p, value in zip(self.params, args)}


# -----------------------------
# Fragments partagés
# -----------------------------
def _count_actions(alias: str) -> str:
    return f"COALESCE(COUNT(DISTINCT a.id), 0) AS {alias}"


def _count_status(status: str, alias: str) -> str:
    # status est une constante du module models.action (jamais une entrée client)
    return f"COALESCE(COUNT(DISTINCT CASE WHEN a.status = '{status}' THEN a.id END), 0) AS {alias}"


_JOIN_ACTIONS = "LEFT JOIN action a ON s.id = a.sujet_id"
_JOIN_SOUS_SUJETS = "LEFT JOIN sujet ss ON s.id = ss.parent_sujet_id"


def _sujet_listing(
    *,
    counts: Iterable[str],
    joins: Iterable[str] = (),
    where: Optional[str] = None,
) -> str:
    """Liste de sujets (s.*) + compteurs agrégés, groupée par sujet, plus récents d’abord."""
    columns = ",\n  ".join(["s.*", *counts])
    lines = [f"SELECT\n  {columns}", "FROM sujet s", _JOIN_ACTIONS, *joins]
    if where:
        lines.append(f"WHERE {where}")
    lines += ["GROUP BY s.id", "ORDER BY s.created_at DESC"]
    return "\n".join(lines)


def _action_listing(where: str) -> str:
    """Liste d’actions : ordre manuel croissant, puis plus récentes d’abord."""
    return "\n".join(
        [
            "SELECT * FROM action",
            f"WHERE {where}",
            "ORDER BY ordre ASC, created_at DESC",
        ]
    )


_ID_SUJET = QueryParam("sujet_id")
_ID_ACTION = QueryParam("action_id")


# -----------------------------
# Sujets
# -----------------------------
SUJETS_AVEC_STATS = QueryDef(
    name="sujets_avec_stats",
    description="récupération des sujets",
    sql=_sujet_listing(
        counts=[
            _count_actions("total_actions"),
            _count_status(STATUS_COMPLETED, "completed_actions"),
            _count_status(STATUS_OVERDUE, "overdue_actions"),
        ],
    ),
)

SUJET_PAR_ID = QueryDef(
    name="sujet_par_id",
    description="récupération du sujet",
    sql="SELECT * FROM sujet WHERE id = :sujet_id",
    params=(_ID_SUJET,),
)

SOUS_SUJETS = QueryDef(
    name="sous_sujets",
    description="récupération des sous-sujets",
    sql=_sujet_listing(
        counts=[
            _count_actions("total_actions"),
            _count_status(STATUS_COMPLETED, "completed_actions"),
        ],
        where="s.parent_sujet_id = :sujet_id",
    ),
    params=(_ID_SUJET,),
)

SUJETS_RACINES = QueryDef(
    name="sujets_racines",
    description="récupération des sujets racines",
    sql=_sujet_listing(
        counts=[
            _count_actions("total_actions"),
            "COALESCE(COUNT(DISTINCT ss.id), 0) AS total_sous_sujets",
        ],
        joins=[_JOIN_SOUS_SUJETS],
        where="s.parent_sujet_id IS NULL",
    ),
)

# -----------------------------
# Actions
# -----------------------------
ACTIONS_DU_SUJET = QueryDef(
    name="actions_du_sujet",
    description="récupération des actions",
    sql=_action_listing("sujet_id = :sujet_id AND parent_action_id IS NULL"),
    params=(_ID_SUJET,),
)

ACTION_PAR_ID = QueryDef(
    name="action_par_id",
    description="récupération de l'action",
    sql="SELECT * FROM action WHERE id = :action_id",
    params=(_ID_ACTION,),
)

SOUS_ACTIONS = QueryDef(
    name="sous_actions",
    description="récupération des sous-actions",
    sql=_action_listing("parent_action_id = :action_id"),
    params=(_ID_ACTION,),
)

# -----------------------------
# Statistiques / santé
# -----------------------------
STATISTIQUES = QueryDef(
    name="statistiques",
    description="récupération des statistiques",
    sql="\n".join(
        [
            "SELECT",
            "  COALESCE(COUNT(DISTINCT s.id), 0) AS total_sujets,",
            "  " + _count_actions("total_actions") + ",",
            "  " + _count_status(STATUS_COMPLETED, "actions_completed") + ",",
            "  " + _count_status(STATUS_OVERDUE, "actions_overdue") + ",",
            "  " + _count_status(STATUS_IN_PROGRESS, "actions_in_progress") + ",",
            "  " + _count_status(STATUS_NOUVEAU, "actions_nouveau"),
            "FROM sujet s",
            _JOIN_ACTIONS,
        ]
    ),
)

PING = QueryDef(
    name="ping",
    description="test de connexion",
    sql="SELECT 1",
)

ALL_QUERIES: Tuple[QueryDef, ...] = (
    SUJETS_AVEC_STATS,
    SUJET_PAR_ID,
    SOUS_SUJETS,
    SUJETS_RACINES,
    ACTIONS_DU_SUJET,
    ACTION_PAR_ID,
    SOUS_ACTIONS,
    STATISTIQUES,
    PING,
)

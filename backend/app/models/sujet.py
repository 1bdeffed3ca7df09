from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

"""
Model Sujet.

Rôle (fonctionnel) :
- Représente un sujet (thème) du plan d’action.
- Les sujets forment un arbre : parent_sujet_id NULL = sujet racine, sinon sous-sujet.

Relations :
- Sujet -> Sujet (parent / sous_sujets), suppression en cascade des sous-sujets.
- Sujet -> Action (1..N) via action.sujet_id, quel que soit le niveau d’imbrication de l’action.

Index :
- parent_sujet_id : listes “sous-sujets” et “racines”.
- created_at : tri “plus récents d’abord” de toutes les listes de sujets.
"""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Sujet(Base):
    __tablename__ = "sujet"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Parent (NULL = racine)
    parent_sujet_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("sujet.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    # Colonnes descriptives (opaques pour l’API, renvoyées telles quelles)
    titre: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    auteur: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Horodatages
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    parent = relationship("Sujet", remote_side="Sujet.id", back_populates="sous_sujets")
    sous_sujets = relationship("Sujet", back_populates="parent")
    actions = relationship("Action", back_populates="sujet")

    __table_args__ = (
        Index("ix_sujet_created_at", "created_at"),
    )

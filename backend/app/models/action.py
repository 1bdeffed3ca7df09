from __future__ import annotations

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

"""
Model Action.

Rôle (fonctionnel) :
- Représente une action (tâche) rattachée à exactement un sujet.
- Une action peut être une sous-action (parent_action_id renseigné).
- Porte un statut (completed / overdue / in_progress / nouveau) et un ordre d’affichage manuel.

Relations :
- Action -> Sujet (N..1, obligatoire).
- Action -> Action (parent / sous_actions).

Index :
- (sujet_id, parent_action_id) : liste des actions de premier niveau d’un sujet.
- (ordre, created_at) : tri des listes d’actions.
"""

# Statuts connus (buckets des compteurs agrégés)
STATUS_COMPLETED = "completed"
STATUS_OVERDUE = "overdue"
STATUS_IN_PROGRESS = "in_progress"
STATUS_NOUVEAU = "nouveau"

ACTION_STATUSES = (STATUS_COMPLETED, STATUS_OVERDUE, STATUS_IN_PROGRESS, STATUS_NOUVEAU)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Action(Base):
    __tablename__ = "action"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Sujet propriétaire (obligatoire)
    sujet_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("sujet.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Action parente (NULL = action de premier niveau)
    parent_action_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("action.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    titre: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    responsable: Mapped[str | None] = mapped_column(String(255), nullable=True)
    echeance: Mapped[date | None] = mapped_column(Date, nullable=True)

    status: Mapped[str] = mapped_column(String(20), nullable=False, default=STATUS_NOUVEAU, index=True)
    ordre: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    sujet = relationship("Sujet", back_populates="actions")
    parent = relationship("Action", remote_side="Action.id", back_populates="sous_actions")
    sous_actions = relationship("Action", back_populates="parent")

    __table_args__ = (
        Index("ix_action_sujet_parent", "sujet_id", "parent_action_id"),
        Index("ix_action_ordre_created", "ordre", "created_at"),
    )

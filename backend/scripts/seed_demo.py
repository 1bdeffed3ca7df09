# backend/scripts/seed_demo.py
from __future__ import annotations

import argparse
import random
import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, delete, func, select
from sqlalchemy.orm import Session, sessionmaker

# Permet de lancer le script depuis backend/ sans souci d'import
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from app.core.settings import settings
from app.models.action import ACTION_STATUSES, Action
from app.models.sujet import Sujet


# ---- Données de démo (plan d’action) ----
THEMES = {
    "Sécurité": ["Accès au site", "Habilitations", "Plan de prévention"],
    "Qualité": ["Audit interne", "Non-conformités", "Indicateurs"],
    "Environnement": ["Déchets", "Consommation énergie"],
    "Ressources humaines": ["Formation", "Recrutement", "Entretiens annuels"],
    "Informatique": ["Sauvegardes", "Migration messagerie", "Parc matériel"],
}

VERBES = ["Mettre à jour", "Rédiger", "Valider", "Planifier", "Contrôler", "Former", "Diffuser"]
OBJETS = ["la procédure", "le registre", "le planning", "la check-list", "le rapport", "le support"]
PERSONNES = ["C. Martin", "A. Bernard", "S. Dubois", "L. Moreau", "J. Laurent", "N. Petit"]

# Répartition des statuts (nouveau / en cours majoritaires)
STATUS_WEIGHTS = {"completed": 3, "overdue": 1, "in_progress": 3, "nouveau": 3}


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def random_status() -> str:
    return random.choices(ACTION_STATUSES, weights=[STATUS_WEIGHTS[s] for s in ACTION_STATUSES])[0]


def random_titre() -> str:
    return f"{random.choice(VERBES)} {random.choice(OBJETS)}"


def add_actions(
    db: Session,
    sujet: Sujet,
    *,
    n: int,
    created_from: datetime,
    parent: Optional[Action] = None,
) -> int:
    """Ajoute n actions (ordre 1..n) sous un sujet, éventuellement sous une action parente."""
    count = 0
    for ordre in range(1, n + 1):
        created_at = created_from + timedelta(hours=random.randint(1, 72))
        action = Action(
            sujet_id=sujet.id,
            parent_action_id=parent.id if parent else None,
            titre=random_titre(),
            responsable=random.choice(PERSONNES),
            echeance=date.today() + timedelta(days=random.randint(-20, 60)),
            status=random_status(),
            ordre=ordre,
            created_at=created_at,
            updated_at=created_at,
        )
        db.add(action)
        db.flush()  # récupère action.id
        count += 1

        # Sous-actions (1 niveau) sur une partie des actions de premier niveau
        if parent is None and random.random() < 0.3:
            count += add_actions(db, sujet, n=random.randint(1, 3), created_from=created_at, parent=action)
    return count


def seed(reset: bool, n_sujets: int, max_actions: int, days: int) -> None:
    engine = create_engine(settings.database_url_sync(), future=True)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    with SessionLocal() as db:
        if reset:
            # ordre inverse des FK
            db.execute(delete(Action))
            db.execute(delete(Sujet))
            db.commit()
            print("✅ Reset done (all demo data deleted).")

        start = now_utc() - timedelta(days=days)
        sujets_count = 0
        actions_count = 0

        themes = list(THEMES.items())
        for i in range(n_sujets):
            theme, sous_themes = themes[i % len(themes)]
            created_at = start + timedelta(seconds=random.randint(0, days * 86400))

            racine = Sujet(
                titre=theme if i < len(themes) else f"{theme} #{i // len(themes) + 1}",
                description=f"Plan d’action {theme.lower()}",
                auteur=random.choice(PERSONNES),
                created_at=created_at,
                updated_at=created_at,
            )
            db.add(racine)
            db.flush()
            sujets_count += 1
            actions_count += add_actions(db, racine, n=random.randint(0, max_actions), created_from=created_at)

            for titre in sous_themes:
                sous_created = created_at + timedelta(hours=random.randint(1, 48))
                sous = Sujet(
                    parent_sujet_id=racine.id,
                    titre=titre,
                    auteur=random.choice(PERSONNES),
                    created_at=sous_created,
                    updated_at=sous_created,
                )
                db.add(sous)
                db.flush()
                sujets_count += 1
                actions_count += add_actions(db, sous, n=random.randint(0, max_actions), created_from=sous_created)

        db.commit()

        total_sujets = db.execute(select(func.count(Sujet.id))).scalar_one()
        total_actions = db.execute(select(func.count(Action.id))).scalar_one()
        print("✅ Seed terminé.")
        print(f"   - Sujets ajoutés: {sujets_count} (total en base: {total_sujets})")
        print(f"   - Actions ajoutées: {actions_count} (total en base: {total_actions})")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--reset", action="store_true", help="Supprime les données demo avant de reseed")
    parser.add_argument("--sujets", type=int, default=5, help="Nombre de sujets racines à générer")
    parser.add_argument("--max-actions", type=int, default=6, help="Nombre max d’actions de premier niveau par sujet")
    parser.add_argument("--days", type=int, default=90, help="Fenêtre de dates de création (derniers N jours)")
    parser.add_argument("--seed", type=int, default=42, help="Seed RNG pour reproductibilité")
    args = parser.parse_args()

    random.seed(args.seed)
    seed(reset=args.reset, n_sujets=args.sujets, max_actions=args.max_actions, days=args.days)


if __name__ == "__main__":
    main()

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import get_gateway
from app.db.base import Base
from app.db.gateway import QueryGateway
from app.main import create_app
from app.models import Action, Sujet

T0 = datetime(2024, 1, 15, 9, 0, 0)


def at(minutes: int) -> datetime:
    """Date de création relative (minutes après T0)."""
    return T0 + timedelta(minutes=minutes)


def make_engine():
    # Une seule connexion partagée : la base en mémoire survit entre les checkouts
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


class Factory:
    """Insère des sujets / actions via l’ORM (commit immédiat, ids disponibles)."""

    def __init__(self, session):
        self.session = session
        self._tick = 0

    def _next_created(self) -> datetime:
        self._tick += 1
        return at(self._tick)

    async def sujet(
        self,
        titre: str = "Sujet",
        *,
        parent: Optional[Sujet] = None,
        created_at: Optional[datetime] = None,
        **extra,
    ) -> Sujet:
        created_at = created_at or self._next_created()
        sujet = Sujet(
            titre=titre,
            parent_sujet_id=parent.id if parent else None,
            created_at=created_at,
            updated_at=created_at,
            **extra,
        )
        self.session.add(sujet)
        await self.session.commit()
        return sujet

    async def action(
        self,
        sujet: Sujet,
        titre: str = "Action",
        *,
        status: str = "nouveau",
        ordre: int = 0,
        parent: Optional[Action] = None,
        created_at: Optional[datetime] = None,
        **extra,
    ) -> Action:
        created_at = created_at or self._next_created()
        action = Action(
            sujet_id=sujet.id,
            parent_action_id=parent.id if parent else None,
            titre=titre,
            status=status,
            ordre=ordre,
            created_at=created_at,
            updated_at=created_at,
            **extra,
        )
        self.session.add(action)
        await self.session.commit()
        return action


@pytest_asyncio.fixture
async def engine():
    engine = make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def gateway(engine) -> QueryGateway:
    return QueryGateway(engine)


@pytest_asyncio.fixture
async def factory(engine):
    maker = async_sessionmaker(engine, expire_on_commit=False)
    async with maker() as session:
        yield Factory(session)


@pytest_asyncio.fixture
async def client(gateway):
    app = create_app()
    app.dependency_overrides[get_gateway] = lambda: gateway
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

import pytest

from app.db.gateway import QueryError, QueryGateway
from app.db.queries import ACTIONS_DU_SUJET, SUJET_PAR_ID, SUJETS_AVEC_STATS
from conftest import make_engine


async def test_fetch_all_returns_row_mappings(gateway, factory):
    sujet = await factory.sujet("Qualité", auteur="C. Martin")

    rows = await gateway.fetch_all(SUJETS_AVEC_STATS)

    assert len(rows) == 1
    row = rows[0]
    assert isinstance(row, dict)
    assert row["id"] == sujet.id
    assert row["titre"] == "Qualité"
    assert row["auteur"] == "C. Martin"
    assert row["total_actions"] == 0


async def test_fetch_one_returns_none_when_absent(gateway):
    assert await gateway.fetch_one(SUJET_PAR_ID, "99999") is None


async def test_fetch_all_empty_listing(gateway):
    assert await gateway.fetch_all(ACTIONS_DU_SUJET, 1) == []


async def test_invalid_identifier_becomes_query_error(gateway):
    with pytest.raises(QueryError) as exc_info:
        await gateway.fetch_one(SUJET_PAR_ID, "pas-un-id")
    assert exc_info.value.query_name == "sujet_par_id"
    assert exc_info.value.__cause__ is not None


async def test_database_error_becomes_query_error():
    # Base vide : les tables n’existent pas
    engine = make_engine()
    gateway = QueryGateway(engine)
    try:
        with pytest.raises(QueryError) as exc_info:
            await gateway.fetch_all(SUJETS_AVEC_STATS)
        assert "récupération des sujets" in str(exc_info.value)
    finally:
        await gateway.dispose()


async def test_ping_success(gateway, caplog):
    caplog.set_level("INFO", logger="app.db")
    assert await gateway.ping() is True
    assert "Connexion à PostgreSQL réussie" in caplog.text


async def test_ping_failure_is_logged_not_raised(tmp_path, caplog):
    from sqlalchemy.ext.asyncio import create_async_engine

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/absent/dir/db.sqlite")
    gateway = QueryGateway(engine)
    try:
        assert await gateway.ping() is False
        assert any(r.levelname == "ERROR" for r in caplog.records if r.name == "app.db")
    finally:
        await gateway.dispose()

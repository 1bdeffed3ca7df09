from app.models import ACTION_STATUSES


async def test_statistiques_empty_database(client):
    r = await client.get("/api/statistiques")
    assert r.status_code == 200
    assert r.json() == {
        "total_sujets": 0,
        "total_actions": 0,
        "actions_completed": 0,
        "actions_overdue": 0,
        "actions_in_progress": 0,
        "actions_nouveau": 0,
    }


async def test_statistiques_counts_every_status_bucket(client, factory):
    s1 = await factory.sujet("S1")
    s2 = await factory.sujet("S2", parent=s1)
    await factory.sujet("S3")
    for status in ACTION_STATUSES:
        await factory.action(s1, status=status)
    parent = await factory.action(s2, status="completed")
    await factory.action(s2, status="overdue", parent=parent)

    body = (await client.get("/api/statistiques")).json()

    assert body["total_sujets"] == 3
    assert body["total_actions"] == 6
    assert body["actions_completed"] == 2
    assert body["actions_overdue"] == 2
    assert body["actions_in_progress"] == 1
    assert body["actions_nouveau"] == 1


async def test_statistiques_ignore_unknown_status(client, factory):
    sujet = await factory.sujet()
    await factory.action(sujet, status="archived")

    body = (await client.get("/api/statistiques")).json()

    assert body["total_actions"] == 1
    assert sum(body[f"actions_{s}"] for s in ACTION_STATUSES) == 0


async def test_statistiques_idempotent(client, factory):
    sujet = await factory.sujet()
    await factory.action(sujet, status="in_progress")

    first = await client.get("/api/statistiques")
    second = await client.get("/api/statistiques")

    assert first.json() == second.json()

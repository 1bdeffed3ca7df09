from datetime import timedelta

from conftest import T0


async def test_list_sujets_empty(client):
    r = await client.get("/api/sujets")
    assert r.status_code == 200
    assert r.json() == []


async def test_sujet_without_actions_has_zero_counts(client, factory):
    await factory.sujet("Vide")

    r = await client.get("/api/sujets")

    (row,) = r.json()
    assert row["total_actions"] == 0
    assert row["completed_actions"] == 0
    assert row["overdue_actions"] == 0


async def test_counts_include_nested_actions_of_the_subject(client, factory):
    sujet = await factory.sujet("Sécurité")
    parent = await factory.action(sujet, status="completed", ordre=1)
    await factory.action(sujet, status="overdue", parent=parent)
    await factory.action(sujet, status="nouveau", ordre=2)

    other = await factory.sujet("Autre")
    await factory.action(other, status="completed")

    r = await client.get("/api/sujets")

    rows = {row["id"]: row for row in r.json()}
    assert rows[sujet.id]["total_actions"] == 3
    assert rows[sujet.id]["completed_actions"] == 1
    assert rows[sujet.id]["overdue_actions"] == 1
    assert rows[other.id]["total_actions"] == 1


async def test_list_sujets_newest_first_with_all_columns(client, factory):
    old = await factory.sujet("Ancien", created_at=T0, description="d1", auteur="A. Bernard")
    new = await factory.sujet("Récent", created_at=T0 + timedelta(days=1))

    r = await client.get("/api/sujets")

    rows = r.json()
    assert [row["id"] for row in rows] == [new.id, old.id]
    assert rows[1]["titre"] == "Ancien"
    assert rows[1]["auteur"] == "A. Bernard"
    assert rows[1]["description"] == "d1"
    assert rows[1]["parent_sujet_id"] is None


async def test_get_sujet(client, factory):
    sujet = await factory.sujet("Qualité", auteur="S. Dubois")

    r = await client.get(f"/api/sujets/{sujet.id}")

    assert r.status_code == 200
    body = r.json()
    assert body["id"] == sujet.id
    assert body["titre"] == "Qualité"
    assert body["auteur"] == "S. Dubois"
    assert "total_actions" not in body


async def test_get_sujet_not_found(client):
    r = await client.get("/api/sujets/99999")
    assert r.status_code == 404
    assert r.json() == {"error": "Sujet non trouvé"}


async def test_get_sujet_invalid_id_is_server_error(client):
    r = await client.get("/api/sujets/abc")
    assert r.status_code == 500
    assert r.json() == {"error": "Erreur serveur"}


async def test_sous_sujets_only_direct_children(client, factory):
    racine = await factory.sujet("Racine")
    enfant_1 = await factory.sujet("Enfant 1", parent=racine, created_at=T0 + timedelta(hours=1))
    enfant_2 = await factory.sujet("Enfant 2", parent=racine, created_at=T0 + timedelta(hours=2))
    await factory.sujet("Petit-enfant", parent=enfant_1)
    await factory.action(enfant_1, status="completed")
    await factory.action(enfant_1, status="overdue")

    r = await client.get(f"/api/sujets/{racine.id}/sous-sujets")

    rows = r.json()
    assert [row["id"] for row in rows] == [enfant_2.id, enfant_1.id]
    assert rows[1]["total_actions"] == 2
    assert rows[1]["completed_actions"] == 1
    assert "overdue_actions" not in rows[1]
    assert rows[0]["total_actions"] == 0
    assert rows[0]["completed_actions"] == 0


async def test_sous_sujets_of_unknown_parent_is_empty(client):
    r = await client.get("/api/sujets/424242/sous-sujets")
    assert r.status_code == 200
    assert r.json() == []


async def test_sujets_racines_newest_first(client, factory):
    a = await factory.sujet("A", created_at=T0)
    b = await factory.sujet("B", created_at=T0 + timedelta(minutes=5))
    await factory.sujet("Enfant de A", parent=a)

    r = await client.get("/api/sujets-racines")

    rows = r.json()
    assert [row["id"] for row in rows] == [b.id, a.id]
    assert rows[1]["total_sous_sujets"] == 1
    assert rows[0]["total_sous_sujets"] == 0


async def test_sujets_racines_counts_are_not_multiplied_by_joins(client, factory):
    racine = await factory.sujet("Racine")
    for i in range(3):
        await factory.sujet(f"Enfant {i}", parent=racine)
    for i in range(2):
        await factory.action(racine, ordre=i)

    r = await client.get("/api/sujets-racines")

    (row,) = r.json()
    assert row["total_sous_sujets"] == 3
    assert row["total_actions"] == 2


async def test_actions_of_subject_excludes_sub_actions(client, factory):
    sujet = await factory.sujet()
    top = await factory.action(sujet, "Premier niveau", ordre=1)
    await factory.action(sujet, "Sous-action", parent=top)

    r = await client.get(f"/api/sujets/{sujet.id}/actions")

    rows = r.json()
    assert [row["id"] for row in rows] == [top.id]
    assert rows[0]["parent_action_id"] is None


async def test_actions_of_subject_ordered_by_ordre_then_newest(client, factory):
    sujet = await factory.sujet()
    second = await factory.action(sujet, ordre=2, created_at=T0)
    first_old = await factory.action(sujet, ordre=1, created_at=T0 + timedelta(hours=1))
    first_new = await factory.action(sujet, ordre=1, created_at=T0 + timedelta(hours=2))

    r = await client.get(f"/api/sujets/{sujet.id}/actions")

    assert [row["id"] for row in r.json()] == [first_new.id, first_old.id, second.id]


async def test_actions_of_subject_empty(client, factory):
    sujet = await factory.sujet()
    r = await client.get(f"/api/sujets/{sujet.id}/actions")
    assert r.status_code == 200
    assert r.json() == []


async def test_hierarchy_scenario(client, factory):
    s1 = await factory.sujet("S1")
    s2 = await factory.sujet("S2", parent=s1)
    a1 = await factory.action(s1, "A1", status="completed")

    racines = (await client.get("/api/sujets-racines")).json()
    assert [r["id"] for r in racines] == [s1.id]
    assert racines[0]["total_sous_sujets"] == 1
    assert racines[0]["total_actions"] == 1

    sous = (await client.get(f"/api/sujets/{s1.id}/sous-sujets")).json()
    assert [r["id"] for r in sous] == [s2.id]

    actions = (await client.get(f"/api/sujets/{s1.id}/actions")).json()
    assert [r["id"] for r in actions] == [a1.id]

    stats = (await client.get("/api/statistiques")).json()
    assert stats == {
        "total_sujets": 2,
        "total_actions": 1,
        "actions_completed": 1,
        "actions_overdue": 0,
        "actions_in_progress": 0,
        "actions_nouveau": 0,
    }

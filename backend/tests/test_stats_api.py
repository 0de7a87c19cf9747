from dashboard.db.models.user import Role


def test_stats_requires_session(client):
    assert client.get("/stats").status_code == 401

def test_stats_for_any_user(login_as, make_user):
    admin = make_user(role=Role.admin)
    client = login_as(admin)
    client.post("/projects", json={"name": "Portal", "description": "Client portal system", "client": "Acme", "techStack": ["Python"]})

    client = login_as(make_user(role=Role.designer))
    r = client.get("/stats")
    assert r.status_code == 200
    body = r.json()
    assert body["kpis"]["totalProjects"] == 1
    assert body["kpis"]["totalClients"] == 1
    assert body["kpis"]["totalUsers"] == 2
    assert body["charts"]["techStackUsage"] == [{"tech": "Python", "count": 1}]
    assert len(body["charts"]["monthlyProjects"]) == 12

def test_health_is_public_but_minimal(client, store):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["database"] == {"usersCount": 0, "projectsCount": 0}
    assert "details" not in body

def test_health_details_for_admin(login_as, make_user):
    client = login_as(make_user(role=Role.admin))
    body = client.get("/health").json()
    assert body["database"]["usersCount"] == 1
    assert body["details"]["datastore"]["exists"] is True
    assert "rss" in body["details"]["memory"]

def test_health_hides_details_from_non_admins(login_as, make_user):
    client = login_as(make_user(role=Role.manager))
    assert "details" not in client.get("/health").json()

def test_health_unreadable_datastore(client, store):
    store.path.write_text("{broken")
    r = client.get("/health")
    assert r.status_code == 500
    assert r.json()["status"] == "unhealthy"

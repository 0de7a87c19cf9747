import random

from dashboard.crud.projects import create_project, get_project, list_projects
from dashboard.crud.users import delete_user, get_user, list_users, update_user
from dashboard.crud.projects import delete_project, update_project
from dashboard.schemas.project import ProjectCreate
from dashboard.services.assignments import (
    assign_users,
    detach_project,
    detach_user,
    sync_project_users,
    sync_user_projects,
)


def _project(store, name="Portal", **kw):
    return create_project(store, ProjectCreate(name=name, description="Client portal system", client="Acme", **kw))

def assert_mirrored(store):
    users = {u.id: u for u in list_users(store)}
    projects = {p.id: p for p in list_projects(store)}
    for p in projects.values():
        for u in users.values():
            assert (u.id in p.assigned_users) == (p.id in u.assigned_projects), (u.id, p.id)


def test_assign_then_reassign(store, make_user):
    u1, u2 = make_user(), make_user()
    p = _project(store)

    assign_users(store, p.id, [u1.id, u2.id])
    assert get_project(store, p.id).assigned_users == [u1.id, u2.id]
    assert p.id in get_user(store, u1.id).assigned_projects
    assert p.id in get_user(store, u2.id).assigned_projects

    assign_users(store, p.id, [u2.id])
    assert p.id not in get_user(store, u1.id).assigned_projects
    assert p.id in get_user(store, u2.id).assigned_projects
    assert_mirrored(store)

def test_assign_is_idempotent(store, make_user):
    u1, u2 = make_user(), make_user()
    p = _project(store)
    assign_users(store, p.id, [u1.id, u2.id])
    before = (get_project(store, p.id).assigned_users, get_user(store, u1.id).assigned_projects, get_user(store, u2.id).assigned_projects)
    assign_users(store, p.id, [u1.id, u2.id])
    after = (get_project(store, p.id).assigned_users, get_user(store, u1.id).assigned_projects, get_user(store, u2.id).assigned_projects)
    assert before == after

def test_assign_unknown_project(store):
    assert assign_users(store, "project-missing", []) is None

def test_unknown_user_id_does_not_break_sync(store, make_user):
    u = make_user()
    p = _project(store)
    assign_users(store, p.id, ["user-ghost", u.id])
    assert get_project(store, p.id).assigned_users == ["user-ghost", u.id]
    assert get_user(store, u.id).assigned_projects == [p.id]

def test_project_diff_sync(store, make_user):
    u1, u2, u3 = make_user(), make_user(), make_user()
    p = _project(store, assigned_users=[u1.id, u2.id])
    sync_project_users(store, p.id, [], p.assigned_users)

    update_project(store, p.id, {"assigned_users": [u2.id, u3.id]})
    sync_project_users(store, p.id, [u1.id, u2.id], [u2.id, u3.id])
    assert get_user(store, u1.id).assigned_projects == []
    assert get_user(store, u2.id).assigned_projects == [p.id]
    assert get_user(store, u3.id).assigned_projects == [p.id]
    assert_mirrored(store)

def test_user_diff_sync(store, make_user):
    u = make_user()
    p1, p2 = _project(store, "One"), _project(store, "Two")
    update_user(store, u.id, {"assigned_projects": [p1.id, p2.id]})
    sync_user_projects(store, u.id, [], [p1.id, p2.id])
    assert get_project(store, p1.id).assigned_users == [u.id]

    update_user(store, u.id, {"assigned_projects": [p2.id]})
    sync_user_projects(store, u.id, [p1.id, p2.id], [p2.id])
    assert get_project(store, p1.id).assigned_users == []
    assert get_project(store, p2.id).assigned_users == [u.id]
    assert get_user(store, u.id).projects_count == 1

def test_detach_on_delete(store, make_user):
    u1, u2 = make_user(), make_user()
    p1, p2 = _project(store, "One"), _project(store, "Two")
    assign_users(store, p1.id, [u1.id, u2.id])
    assign_users(store, p2.id, [u1.id])

    detach_project(store, get_project(store, p1.id))
    delete_project(store, p1.id)
    assert get_user(store, u1.id).assigned_projects == [p2.id]
    assert get_user(store, u2.id).assigned_projects == []

    detach_user(store, get_user(store, u1.id))
    delete_user(store, u1.id)
    assert get_project(store, p2.id).assigned_users == []
    assert_mirrored(store)

def test_sync_failure_is_swallowed(store, make_user, monkeypatch):
    u = make_user()
    p = _project(store)

    def boom(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr("dashboard.crud.users.update_user", boom)
    project = assign_users(store, p.id, [u.id])
    assert project.assigned_users == [u.id]
    assert get_user(store, u.id).assigned_projects == []

def test_random_sequence_keeps_mirror(store, make_user):
    rnd = random.Random(7)
    users = [make_user() for _ in range(4)]
    projects = [_project(store, f"P{i}") for i in range(4)]
    for _ in range(25):
        live_users = list_users(store)
        live_projects = list_projects(store)
        op = rnd.choice(["assign", "assign", "assign", "del_user", "del_project", "new_project"])
        if op == "assign" and live_projects:
            p = rnd.choice(live_projects)
            ids = [u.id for u in live_users if rnd.random() < 0.5]
            assign_users(store, p.id, ids)
        elif op == "del_user" and len(live_users) > 1:
            u = rnd.choice(live_users)
            detach_user(store, u)
            delete_user(store, u.id)
        elif op == "del_project" and live_projects:
            p = rnd.choice(live_projects)
            detach_project(store, p)
            delete_project(store, p.id)
        elif op == "new_project":
            projects.append(_project(store, f"P{len(projects)}"))
        assert_mirrored(store)

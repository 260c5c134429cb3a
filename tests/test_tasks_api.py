from datetime import date, timedelta


def add_task(client, title, due_date, description=""):
    response = client.post("/tasks/", json={
        "title": title,
        "description": description,
        "due_date": due_date,
    })
    assert response.status_code == 201
    return response.json()


def test_new_tasks_start_pending(client):
    task = add_task(client, "Review charts", "2026-10-20")

    assert task["completed"] is False


def test_blank_title_is_rejected(client):
    assert client.post("/tasks/", json={"title": "", "due_date": "2026-10-20"}).status_code == 422


def test_status_filter_and_search(client):
    done = add_task(client, "Prepare presentation", "2026-10-25", "Conference slides")
    add_task(client, "Update protocols", "2026-10-22", "Clinic procedures")
    client.patch(f"/tasks/{done['id']}", json={"completed": True})

    completed = client.get("/tasks/", params={"status": "completed"}).json()
    pending = client.get("/tasks/", params={"status": "pending"}).json()
    search = client.get("/tasks/", params={"search": "CLINIC"}).json()

    assert [t["title"] for t in completed["data"]] == ["Prepare presentation"]
    assert [t["title"] for t in pending["data"]] == ["Update protocols"]
    assert [t["title"] for t in search["data"]] == ["Update protocols"]


def test_sort_by_title_ignores_case(client):
    add_task(client, "beta", "2026-10-20")
    add_task(client, "Alpha", "2026-10-21")
    add_task(client, "Gamma", "2026-10-19")

    by_title = client.get("/tasks/", params={"sort_by": "title"}).json()["data"]
    by_due_desc = client.get("/tasks/", params={"sort_by": "due_date", "sort_order": "desc"}).json()["data"]

    assert [t["title"] for t in by_title] == ["Alpha", "beta", "Gamma"]
    assert [t["title"] for t in by_due_desc] == ["Alpha", "beta", "Gamma"]


def test_stats_count_overdue_pending_tasks(client):
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    next_week = (date.today() + timedelta(days=7)).isoformat()
    add_task(client, "Follow up with discharged patients", yesterday)
    finished = add_task(client, "Old paperwork", yesterday)
    add_task(client, "Order supplies", next_week)
    client.patch(f"/tasks/{finished['id']}", json={"completed": True})

    stats = client.get("/tasks/stats").json()

    assert stats == {"total": 3, "completed": 1, "pending": 2, "overdue": 1}


def test_delete_task(client):
    task = add_task(client, "Call lab", "2026-10-20")

    assert client.delete(f"/tasks/{task['id']}").status_code == 204
    assert client.get("/tasks/").json()["total"] == 0
    assert client.patch(f"/tasks/{task['id']}", json={"completed": True}).status_code == 404


def test_update_ignores_explicit_nulls(client):
    task = add_task(client, "Call lab", "2026-10-25")

    response = client.patch(f"/tasks/{task['id']}", json={"title": None, "completed": True})

    assert response.status_code == 200
    assert response.json()["title"] == "Call lab"
    assert response.json()["completed"] is True

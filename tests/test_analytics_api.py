from datetime import date, timedelta


def test_empty_summary(client):
    summary = client.get("/analytics/summary", params={"reference_date": "2026-10-19"}).json()

    assert summary["total_patients"] == 0
    assert summary["patient_growth"] == 0
    assert len(summary["appointment_trends"]) == 30
    assert summary["appointment_trends"][0] == {"date": "2026-09-20", "count": 0}
    assert summary["appointment_trends"][-1] == {"date": "2026-10-19", "count": 0}


def test_summary_reflects_stored_collections(client, patient, doctor):
    for day, status in [("2026-10-19", "completed"), ("2026-10-19", "scheduled"),
                        ("2026-10-10", "cancelled"), ("2026-09-30", "completed")]:
        client.post("/appointments/", json={
            "patient_id": patient["id"], "doctor_id": doctor["id"],
            "date": day, "time": "10:00", "status": status,
        })
    for _ in range(3):
        client.post("/consultations/", json={"patient_id": patient["id"], "doctor_id": doctor["id"]})

    summary = client.get("/analytics/summary", params={"reference_date": "2026-10-19"}).json()

    assert summary["total_patients"] == 1
    assert summary["total_appointments"] == 4
    assert summary["completed_appointments"] == 2
    assert summary["pending_appointments"] == 1
    assert summary["total_revenue"] == 150
    assert summary["monthly_revenue"] == 50
    assert summary["appointment_trends"][-1]["count"] == 2
    assert summary["appointment_trends"][-10]["count"] == 1


def test_summary_defaults_to_today(client):
    trends = client.get("/analytics/summary").json()["appointment_trends"]

    assert trends[-1]["date"] == date.today().isoformat()
    assert trends[0]["date"] == (date.today() - timedelta(days=29)).isoformat()


def test_bad_reference_date_is_rejected(client):
    assert client.get("/analytics/summary", params={"reference_date": "yesterday"}).status_code == 422

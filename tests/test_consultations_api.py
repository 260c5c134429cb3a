def record(client, patient, doctor, **fields):
    payload = {"patient_id": patient["id"], "doctor_id": doctor["id"]}
    payload.update(fields)
    return client.post("/consultations/", json=payload)


def test_record_consultation(client, patient, doctor):
    response = record(
        client, patient, doctor,
        symptoms="Fever and cough",
        diagnosis="Viral infection",
        prescription=["Paracetamol 500mg", "Montelukast 10mg"],
    )

    assert response.status_code == 201
    data = response.json()
    assert data["prescription"] == ["Paracetamol 500mg", "Montelukast 10mg"]
    assert data["patient_name"] == "Asha Verma"


def test_unknown_references_are_404(client, patient, doctor):
    assert record(client, {"id": 999}, doctor).status_code == 404
    assert record(client, patient, {"id": 999}).status_code == 404
    assert record(client, patient, doctor, appointment_id=999).status_code == 404


def test_search_symptoms_and_diagnosis(client, patient, doctor):
    record(client, patient, doctor, symptoms="Headache", diagnosis="Migraine")
    record(client, patient, doctor, symptoms="Rash", diagnosis="Eczema")

    migraine = client.get("/consultations/", params={"search": "MIGR"}).json()
    by_patient = client.get("/consultations/", params={"search": "verma"}).json()

    assert [c["symptoms"] for c in migraine["data"]] == ["Headache"]
    assert by_patient["total"] == 2


def test_filter_by_doctor(client, patient, doctor):
    record(client, patient, doctor, symptoms="Palpitations")

    assert client.get("/consultations/", params={"doctor_id": doctor["id"]}).json()["total"] == 1
    assert client.get("/consultations/", params={"doctor_id": 999}).json()["total"] == 0


def test_read_consultation(client, patient, doctor):
    created = record(client, patient, doctor, notes="Follow up in a week").json()

    fetched = client.get(f"/consultations/{created['id']}").json()
    assert fetched["notes"] == "Follow up in a week"
    assert fetched["patient_name"] == "Asha Verma"
    assert fetched["doctor_name"] == "Dr. Sarah Johnson"
    assert client.get("/consultations/999").status_code == 404

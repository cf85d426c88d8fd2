import pytest


def add_record(client, roll_no, branch="CSE", year="2", name=None):
    return client.post("/teacher/records", json={
        "roll_no": roll_no, "name": name or roll_no, "branch": branch, "year": year
    })


def submit_marks(client, roll_no, subject, sems, mark_type="theory"):
    return client.post("/teacher/marks", json={
        "roll_no": roll_no, "subject": subject, "type": mark_type, "sems": sems
    })


def test_teacher_routes_require_login(client):
    assert client.get("/teacher/class-stats?branch=CSE&year=2&semester=1").status_code == 401


def test_teacher_login_rejects_bad_password(client):
    client.post("/teacher/signup", json={"name": "A", "email": "a@college.edu", "password": "pw"})
    response = client.post("/teacher/login", json={"email": "a@college.edu", "password": "nope"})
    assert response.status_code == 401


def test_duplicate_teacher_signup(client):
    payload = {"name": "A", "email": "a@college.edu", "password": "pw"}
    assert client.post("/teacher/signup", json=payload).status_code == 201
    response = client.post("/teacher/signup", json=payload)
    assert response.status_code == 409
    assert response.get_json()["error"] == "Email already exists"


def test_student_cannot_use_teacher_routes(client):
    client.post("/student/signup", json={"roll_no": "S1", "name": "Kiran", "password": "pw"})
    client.post("/student/login", json={"roll_no": "S1", "password": "pw"})
    assert client.get("/teacher/subjects").status_code == 403


def test_submit_marks_returns_computed_entry(teacher_client):
    add_record(teacher_client, "S1")
    response = submit_marks(teacher_client, "S1", "Math", {"sem1": {"mid1": 30, "mid2": 0, "exam": 70}})

    assert response.status_code == 200
    entry = response.get_json()["entry"]
    assert entry["id"] == "S1_Math"
    assert entry["sem1_result"]["grade"] == "O"
    assert entry["sem1_result"]["total"] == pytest.approx(94)
    assert entry["sem2_result"] == {"internal": 0, "total": 0, "grade": "F"}


@pytest.mark.parametrize("payload", [
    {"subject": "Math", "sems": {}},
    {"roll_no": "S1", "sems": {}},
    {"roll_no": "S1", "subject": "Math", "type": "seminar"},
    {"roll_no": "S1", "subject": "Math", "sems": {"sem1": [1, 2, 3]}},
])
def test_submit_marks_validation(teacher_client, payload):
    assert teacher_client.post("/teacher/marks", json=payload).status_code == 400


def test_class_stats_flow(teacher_client):
    for roll_no in ("S1", "S2", "S3"):
        add_record(teacher_client, roll_no)
    submit_marks(teacher_client, "S1", "Math", {"sem1": {"mid1": 30, "mid2": 0, "exam": 70}})
    submit_marks(teacher_client, "S2", "Math", {"sem1": {"mid1": 20, "mid2": 25, "exam": 40}})
    submit_marks(teacher_client, "S3", "Math", {"sem2": {"mid1": 10, "mid2": 10, "exam": 10}})

    response = teacher_client.get("/teacher/class-stats?branch=CSE&year=2&semester=1")

    assert response.status_code == 200
    assert response.get_json() == {"average": 52.67, "count": 3}


def test_class_stats_no_data_and_bad_semester(teacher_client):
    add_record(teacher_client, "S1")
    assert teacher_client.get("/teacher/class-stats?branch=CSE&year=2&semester=1").status_code == 404
    assert teacher_client.get("/teacher/class-stats?branch=CSE&year=2&semester=5").status_code == 400
    assert teacher_client.get("/teacher/class-stats?branch=CSE").status_code == 400


def test_duplicate_record_then_overwrite(teacher_client):
    assert add_record(teacher_client, "S1", name="Kiran").status_code == 201
    submit_marks(teacher_client, "S1", "Math", {"sem1": {"exam": 50}})

    response = add_record(teacher_client, "S1", name="Kiran K")
    assert response.status_code == 409
    assert response.get_json()["exists"] is True

    response = teacher_client.put("/teacher/records/S1", json={"name": "Kiran K", "branch": "ECE", "year": "3"})
    assert response.status_code == 200

    data = teacher_client.get("/teacher/students/S1").get_json()
    assert data["record"]["branch"] == "ECE"
    assert data["marks"] == []


def test_overwrite_unknown_record(teacher_client):
    response = teacher_client.put("/teacher/records/S9", json={"name": "X", "branch": "CSE", "year": "1"})
    assert response.status_code == 404


def test_class_report_download(teacher_client):
    add_record(teacher_client, "S1")
    submit_marks(teacher_client, "S1", "Math", {"sem1": {"mid1": 30, "mid2": 0, "exam": 70}})

    response = teacher_client.get("/teacher/class-report?branch=CSE&year=2&semester=1&format=csv")
    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert b"S1,S1,Math,theory" in response.data

    assert teacher_client.get("/teacher/class-report?branch=ECE&year=2&semester=1").status_code == 404
    assert teacher_client.get("/teacher/class-report?branch=CSE&year=2&semester=1&format=doc").status_code == 400


def test_subjects_endpoints(teacher_client):
    response = teacher_client.post("/teacher/subjects", json={"subject_name": "Physics Lab", "kind": "lab"})
    assert response.status_code == 201
    assert teacher_client.post("/teacher/subjects", json={"subject_name": "Physics Lab", "kind": "lab"}).status_code == 409

    subjects = teacher_client.get("/teacher/subjects?kind=lab").get_json()["subjects"]
    assert [s["subject_name"] for s in subjects] == ["Physics Lab"]

    dashboard = teacher_client.get("/teacher/dashboard-data").get_json()
    assert dashboard["teacher_name"] == "Asha Rao"
    assert len(dashboard["subjects"]) == 1


def test_student_sees_own_marks(teacher_client):
    add_record(teacher_client, "S1", name="Kiran")
    submit_marks(teacher_client, "S1", "Math", {"sem1": {"mid1": 20, "mid2": 25, "exam": 40}})
    teacher_client.get("/logout")

    teacher_client.post("/student/signup", json={"roll_no": "S1", "name": "Kiran", "password": "pw"})
    assert teacher_client.post("/student/login", json={"roll_no": "S1", "password": "pw"}).status_code == 200

    data = teacher_client.get("/student/my-data").get_json()
    assert data["record"]["name"] == "Kiran"
    assert data["marks"][0]["sem1_result"]["grade"] == "B"

    pdf = teacher_client.get("/student/marksheet-pdf")
    assert pdf.status_code == 200
    assert pdf.data.startswith(b"%PDF")


def test_injected_store_is_used(memory_store):
    from app import create_app
    from config.config import TestConfig
    from extensions import db
    from services.mark_store import get_mark_store

    app = create_app(TestConfig, mark_store=memory_store)
    with app.app_context():
        db.create_all()
        assert get_mark_store() is memory_store
        db.drop_all()


def test_numeric_credentials_are_accepted(client):
    response = client.post("/student/signup", json={"roll_no": 123, "name": "Kiran", "password": 4567})
    assert response.status_code == 201
    assert response.get_json()["user"]["roll_no"] == "123"
    assert client.post("/student/login", json={"roll_no": 123, "password": 4567}).status_code == 200

    response = client.post("/teacher/signup", json={"name": "A", "email": 5, "password": "pw"})
    assert response.status_code == 201
    assert client.post("/teacher/login", json={"email": 5, "password": "pw"}).status_code == 200


def test_negative_marks_are_rejected(teacher_client):
    add_record(teacher_client, "S1")
    response = submit_marks(teacher_client, "S1", "Math", {"sem1": {"mid1": -5, "mid2": 20, "exam": 40}})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Marks cannot be negative"
    assert teacher_client.get("/teacher/students/S1").get_json()["marks"] == []


def test_infinite_marks_are_stored_as_zero(teacher_client):
    add_record(teacher_client, "S1")
    response = teacher_client.post(
        "/teacher/marks",
        data='{"roll_no": "S1", "subject": "Math", "sems": {"sem1": {"mid1": Infinity, "exam": 10}}}',
        content_type="application/json",
    )
    assert response.status_code == 200
    result = response.get_json()["entry"]["sem1_result"]
    assert result == {"internal": 0, "total": 10, "grade": "F"}

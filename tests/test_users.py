"""
tests/test_users.py - user endpoints
"""


def _payload(**overrides):
    payload = {
        "email": "jane@example.com",
        "first_name": "Jane",
        "last_name": "Doe",
        "role": "Employee",
        "department": "Engineering",
        "manager_id": None,
        "profile_picture": None,
    }
    payload.update(overrides)
    return payload


class TestCreateUser:

    def test_create_user(self, client):
        response = client.post("/api/v1/users", json=_payload())
        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        assert body["email"] == "jane@example.com"
        assert body["role"] == "Employee"
        assert body["department"] == "Engineering"
        assert body["created_at"] is not None

    def test_create_user_with_manager(self, client, make_user):
        for role in ("Manager", "HR_Admin", "System_Admin"):
            manager = make_user(role=role)
            response = client.post(
                "/api/v1/users",
                json=_payload(email=f"report-of-{manager.id}@example.com", manager_id=manager.id),
            )
            assert response.status_code == 201
            assert response.json()["manager_id"] == manager.id

    def test_duplicate_email(self, client):
        client.post("/api/v1/users", json=_payload())
        response = client.post("/api/v1/users", json=_payload(first_name="Other"))
        assert response.status_code == 409
        assert response.json()["detail"] == "User with email jane@example.com already exists"

    def test_missing_manager(self, client):
        response = client.post("/api/v1/users", json=_payload(manager_id=999))
        assert response.status_code == 404
        assert response.json()["detail"] == "Manager with id 999 does not exist"

    def test_employee_cannot_be_manager(self, client, make_user):
        employee = make_user(role="Employee")
        response = client.post("/api/v1/users", json=_payload(manager_id=employee.id))
        assert response.status_code == 400
        assert response.json()["detail"] == f"User with id {employee.id} cannot be a manager (role: Employee)"

    def test_invalid_role_and_email(self, client):
        assert client.post("/api/v1/users", json=_payload(role="CEO")).status_code == 422
        assert client.post("/api/v1/users", json=_payload(email="not-an-email")).status_code == 422
        assert client.post("/api/v1/users", json=_payload(first_name="")).status_code == 422


class TestReadUsers:

    def test_empty(self, client):
        response = client.get("/api/v1/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_and_get(self, client, make_user):
        manager = make_user(role="Manager")
        report = make_user(manager_id=manager.id)

        users = client.get("/api/v1/users").json()
        assert [u["id"] for u in users] == [manager.id, report.id]

        response = client.get(f"/api/v1/users/{report.id}")
        assert response.status_code == 200
        assert response.json()["manager_id"] == manager.id

    def test_get_missing(self, client):
        response = client.get("/api/v1/users/404")
        assert response.status_code == 404
        assert response.json()["detail"] == "User with id 404 not found"


class TestUpdateUser:

    def test_partial_update(self, client, make_user):
        user = make_user(department="Sales")
        response = client.put(f"/api/v1/users/{user.id}", json={"first_name": "Renamed"})
        assert response.status_code == 200
        body = response.json()
        assert body["first_name"] == "Renamed"
        assert body["department"] == "Sales"

    def test_null_values(self, client, make_user):
        manager = make_user(role="Manager")
        user = make_user(manager_id=manager.id, department="Sales")

        response = client.put(f"/api/v1/users/{user.id}", json={"manager_id": None, "department": None})
        assert response.status_code == 200
        assert response.json()["manager_id"] is None
        assert response.json()["department"] is None

    def test_required_field_cannot_be_nulled(self, client, make_user):
        user = make_user()
        assert client.put(f"/api/v1/users/{user.id}", json={"first_name": None}).status_code == 422

    def test_role_change(self, client, make_user):
        user = make_user()
        response = client.put(f"/api/v1/users/{user.id}", json={"role": "HR_Admin"})
        assert response.json()["role"] == "HR_Admin"

    def test_missing_user(self, client):
        response = client.put("/api/v1/users/99999", json={"first_name": "X"})
        assert response.status_code == 404
        assert response.json()["detail"] == "User with id 99999 not found"

    def test_missing_manager(self, client, make_user):
        user = make_user()
        response = client.put(f"/api/v1/users/{user.id}", json={"manager_id": 99999})
        assert response.status_code == 404
        assert response.json()["detail"] == "Manager with id 99999 not found"

    def test_own_manager_rejected(self, client, make_user):
        user = make_user(role="Manager")
        response = client.put(f"/api/v1/users/{user.id}", json={"manager_id": user.id})
        assert response.status_code == 400

    def test_email_collision(self, client, make_user):
        make_user(email="taken@example.com")
        user = make_user()
        response = client.put(f"/api/v1/users/{user.id}", json={"email": "taken@example.com"})
        assert response.status_code == 409

    def test_empty_update(self, client, make_user):
        user = make_user()
        response = client.put(f"/api/v1/users/{user.id}", json={})
        assert response.status_code == 200
        assert response.json()["email"] == user.email

"""API tests for the category and user routers."""


def _create_user(api_client, username="alice"):
    response = api_client.post(
        "/users/",
        json={"username": username, "email": f"{username}@example.com", "description": "tester"},
    )
    assert response.status_code == 201
    return response.json()["id"]


def _create_category(api_client, user_id, name):
    return api_client.post("/categories/", json={"name": name}, headers={"X-User-Id": str(user_id)})


class TestUserRouter:

    def test_create_and_read_user(self, api_client):
        user_id = _create_user(api_client)

        response = api_client.get(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_duplicate_user(self, api_client):
        _create_user(api_client)

        response = api_client.post("/users/", json={"username": "alice", "email": "other@example.com"})

        assert response.status_code == 409
        assert response.json()["error"] == "ALREADY_EXISTS"
        assert "username" in response.json()["detail"]

    def test_missing_user(self, api_client):
        response = api_client.get("/users/404")

        assert response.status_code == 404
        assert response.json()["detail"] == "User with id 404 not found"


class TestCategoryRouter:

    def test_create_category(self, api_client):
        user_id = _create_user(api_client)

        response = _create_category(api_client, user_id, "Books")

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Books"
        assert body["creator_id"] == user_id
        assert body["is_deleted"] is False

    def test_create_duplicate_category(self, api_client):
        user_id = _create_user(api_client)
        _create_category(api_client, user_id, "Books")

        response = _create_category(api_client, user_id, "Books")

        assert response.status_code == 409
        assert response.json() == {
            "error": "ALREADY_EXISTS",
            "detail": "Duplicate Key Error: Category with name already exists",
        }

    def test_create_with_unknown_creator(self, api_client):
        response = _create_category(api_client, 77, "Books")

        assert response.status_code == 404
        assert response.json()["detail"] == "User with id 77 not found"

    def test_create_requires_user_header(self, api_client):
        response = api_client.post("/categories/", json={"name": "Books"})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID"
        assert "X-User-Id" in response.json()["detail"]

    def test_create_blank_name(self, api_client):
        user_id = _create_user(api_client)

        response = _create_category(api_client, user_id, "   ")

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID"
        assert response.json()["detail"].startswith("Validation Error: body.name")

    def test_create_name_too_long(self, api_client):
        user_id = _create_user(api_client)

        response = _create_category(api_client, user_id, "x" * 101)

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID"

    def test_list_categories_by_name(self, api_client):
        user_id = _create_user(api_client)
        for name in ("Foo", "seafood", "Bar"):
            _create_category(api_client, user_id, name)

        response = api_client.get("/categories/", params={"name": "FOO", "sort_by": "name", "order": "asc"})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [c["name"] for c in body["items"]] == ["Foo", "seafood"]
        assert body["items"][0]["creator"]["username"] == "alice"

    def test_category_ids_by_names(self, api_client):
        user_id = _create_user(api_client)
        first = _create_category(api_client, user_id, "a").json()["id"]
        second = _create_category(api_client, user_id, "b").json()["id"]

        response = api_client.post("/categories/by-names", json={"names": ["b", "a"]})
        assert response.json() == {"ids": [second, first]}

        response = api_client.post("/categories/by-names", json={"names": ["a", "zzz"]})
        assert response.status_code == 404

    def test_check_duplicate(self, api_client):
        user_id = _create_user(api_client)
        _create_category(api_client, user_id, "Books")

        found = api_client.get("/categories/check-duplicate", params={"value": "Books"}).json()
        missing = api_client.get("/categories/check-duplicate", params={"value": "Games"}).json()

        assert found["exists"] is True
        assert found["category"]["name"] == "Books"
        assert missing == {"exists": False, "category": None}

    def test_update_and_delete_category(self, api_client):
        alice = _create_user(api_client, "alice")
        bob = _create_user(api_client, "bob")
        category_id = _create_category(api_client, alice, "Books").json()["id"]

        updated = api_client.put(
            f"/categories/{category_id}", json={"name": "Novels"}, headers={"X-User-Id": str(bob)}
        )
        assert updated.status_code == 200
        assert updated.json()["name"] == "Novels"
        assert updated.json()["updater"]["username"] == "bob"

        deleted = api_client.delete(f"/categories/{category_id}", headers={"X-User-Id": str(bob)})
        assert deleted.status_code == 200
        assert deleted.json()["is_deleted"] is True

        listed = api_client.get("/categories/").json()
        assert listed["items"][0]["is_deleted"] is True

    def test_update_malformed_id(self, api_client):
        user_id = _create_user(api_client)

        response = api_client.put(
            "/categories/not-an-id", json={"name": "x"}, headers={"X-User-Id": str(user_id)}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_ID"
        assert "not-an-id" in response.json()["detail"]

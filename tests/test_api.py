# tests/test_api.py
"""
Contract tests for API responses.
"""

from app.models import UserRole


class TestHealthEndpoints:
    """Test health check endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "content-platform-api"

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["service"] == "Content Platform API"
        assert "/auth" in data["endpoints"]

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"


class TestAuthEndpoints:
    """Test sign-up, login and profile contract."""

    def test_signup_hides_password(self, client):
        response = client.post(
            "/auth/signup",
            json={"name": "alice", "password": "secret123", "email": "alice@example.com"},
        )
        assert response.status_code == 201

        data = response.json()
        assert data["role"] == "USER"
        assert data["email"] == "alice@example.com"
        assert "password" not in data
        assert "password_hash" not in data

    def test_signup_duplicate_email(self, client, make_account):
        make_account(email="alice@example.com")

        response = client.post(
            "/auth/signup",
            json={"name": "alice2", "password": "secret123", "email": "alice@example.com"},
        )
        assert response.status_code == 409
        assert response.json()["detail"] == "Email is already registered"

    def test_signup_rejects_short_password(self, client):
        response = client.post(
            "/auth/signup",
            json={"name": "bob", "password": "123", "email": "bob@example.com"},
        )
        assert response.status_code == 422

    def test_login_and_profile(self, client, make_account):
        account = make_account(email="carol@example.com", password="hunter22")

        response = client.post("/auth/login", json={"email": "carol@example.com", "password": "hunter22"})
        assert response.status_code == 200
        token = response.json()["access_token"]
        assert response.json()["token_type"] == "bearer"

        profile = client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
        assert profile.status_code == 200
        assert profile.json()["id"] == account.id

    def test_login_wrong_password(self, client, make_account):
        make_account(email="carol@example.com", password="hunter22")

        response = client.post("/auth/login", json={"email": "carol@example.com", "password": "wrong123"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_profile_requires_token(self, client):
        response = client.get("/auth/profile")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_profile_rejects_bad_token(self, client):
        response = client.get("/auth/profile", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401

    def test_deleted_account_token_stops_working(self, client, make_account, auth_headers):
        account = make_account()
        headers = auth_headers(account)

        response = client.delete("/auth/account-deletion", headers=headers)
        assert response.status_code == 204

        response = client.get("/auth/profile", headers=headers)
        assert response.status_code == 401
        assert response.json()["detail"] == "Account no longer exists"


class TestRoleEndpoints:
    """Test admin role transitions."""

    def test_admin_upgrades_user(self, client, make_account, auth_headers):
        admin = make_account(role=UserRole.ADMIN)
        user = make_account()

        response = client.patch(f"/auth/upgrade-role/{user.id}", headers=auth_headers(admin))
        assert response.status_code == 200
        assert response.json()["role"] == "EDITOR"

        response = client.patch(f"/auth/upgrade-role/{user.id}", headers=auth_headers(admin))
        assert response.status_code == 409

    def test_non_admin_forbidden(self, client, make_account, auth_headers):
        editor = make_account(role=UserRole.EDITOR)
        user = make_account()

        response = client.patch(f"/auth/upgrade-role/{user.id}", headers=auth_headers(editor))
        assert response.status_code == 403

    def test_upgrade_takes_effect_with_existing_token(self, client, make_account, auth_headers):
        admin = make_account(role=UserRole.ADMIN)
        user = make_account()
        headers = auth_headers(user)

        response = client.post("/magazine", json={"title": "Issue", "detail": "Body"}, headers=headers)
        assert response.status_code == 403

        client.patch(f"/auth/upgrade-role/{user.id}", headers=auth_headers(admin))

        response = client.post("/magazine", json={"title": "Issue", "detail": "Body"}, headers=headers)
        assert response.status_code == 201

    def test_admin_lists_accounts(self, client, make_account, auth_headers):
        admin = make_account(role=UserRole.ADMIN)
        author = make_account()
        client.post("/post", json={"title": "Hi", "detail": "There"}, headers=auth_headers(author))

        response = client.get("/auth/accounts", headers=auth_headers(admin))
        assert response.status_code == 200

        entries = {entry["id"]: entry for entry in response.json()}
        assert len(entries[author.id]["posts"]) == 1
        assert "password_hash" not in entries[author.id]


class TestPostEndpoints:
    """Test post CRUD contract."""

    def test_create_list_get(self, client, make_account, auth_headers):
        author = make_account()

        response = client.post(
            "/post",
            json={"title": "First", "detail": "Body", "tags": ["tea"]},
            headers=auth_headers(author),
        )
        assert response.status_code == 201
        post = response.json()
        assert post["author"] == {"id": author.id, "name": author.name}
        assert post["status"] == "draft"

        listing = client.get("/post", params={"page": 1, "limit": 10})
        assert [p["id"] for p in listing.json()] == [post["id"]]

        detail = client.get(f"/post/{post['id']}")
        assert detail.status_code == 200

    def test_create_requires_auth(self, client):
        response = client.post("/post", json={"title": "First", "detail": "Body"})
        assert response.status_code == 401

    def test_only_author_can_update(self, client, make_account, auth_headers):
        author = make_account()
        intruder = make_account()
        post_id = client.post(
            "/post", json={"title": "First", "detail": "Body"}, headers=auth_headers(author)
        ).json()["id"]

        response = client.patch(f"/post/{post_id}", json={"title": "Mine"}, headers=auth_headers(intruder))
        assert response.status_code == 403

        response = client.patch(f"/post/{post_id}", json={"title": "Edited"}, headers=auth_headers(author))
        assert response.status_code == 200
        assert response.json()["title"] == "Edited"

    def test_delete_then_not_found(self, client, make_account, auth_headers):
        author = make_account()
        post_id = client.post(
            "/post", json={"title": "First", "detail": "Body"}, headers=auth_headers(author)
        ).json()["id"]

        response = client.delete(f"/post/{post_id}", headers=auth_headers(author))
        assert response.status_code == 204

        assert client.get(f"/post/{post_id}").status_code == 404

    def test_invalid_pagination(self, client):
        assert client.get("/post", params={"page": 0}).status_code == 422
        assert client.get("/post", params={"limit": 500}).status_code == 422


class TestTeaRatingEndpoints:
    def test_admin_removes_rating(self, client, make_account, auth_headers):
        editor = make_account(role=UserRole.EDITOR)
        admin = make_account(role=UserRole.ADMIN)
        rating_id = client.post(
            "/tea-rating",
            json={"rating": 5, "location": "Insadong", "review": "Great"},
            headers=auth_headers(editor),
        ).json()["id"]

        response = client.delete(f"/tea-rating/{rating_id}/admin", headers=auth_headers(editor))
        assert response.status_code == 403

        response = client.delete(f"/tea-rating/{rating_id}/admin", headers=auth_headers(admin))
        assert response.status_code == 204
        assert client.get(f"/tea-rating/{rating_id}").status_code == 404

    def test_rating_out_of_range(self, client, make_account, auth_headers):
        editor = make_account(role=UserRole.EDITOR)

        response = client.post(
            "/tea-rating",
            json={"rating": 6, "location": "Insadong", "review": "Great"},
            headers=auth_headers(editor),
        )
        assert response.status_code == 422


class TestJobPostingEndpoints:
    def _setup(self, client, admin_headers):
        location = client.post("/job-posting/location", json={"name": "Seoul"}, headers=admin_headers)
        employment_type = client.post(
            "/job-posting/employment-type", json={"name": "Full-time"}, headers=admin_headers
        )
        return location.json()["id"], employment_type.json()["id"]

    def test_posting_flow(self, client, make_account, auth_headers):
        admin = make_account(role=UserRole.ADMIN)
        editor = make_account(role=UserRole.EDITOR)
        location_id, employment_type_id = self._setup(client, auth_headers(admin))

        response = client.post(
            "/job-posting",
            json={
                "title": "Tea Sommelier",
                "company_name": "Green Leaf",
                "location_id": location_id,
                "detail_location": "Gangnam-gu 12",
                "description": "Curate the tea menu",
                "recruitment_start_date": "2026-03-01",
                "recruitment_end_date": "2026-03-31",
                "job_title": "Sommelier",
                "employment_type_id": employment_type_id,
                "annual_salary": 42000,
            },
            headers=auth_headers(editor),
        )
        assert response.status_code == 201
        posting = response.json()
        assert posting["location"] == "Seoul"
        assert posting["employment_type"] == "Full-time"
        assert posting["recruitment_period"] == {"start": "2026-03-01", "end": "2026-03-31"}
        assert posting["author"]["email"] == editor.email

        listing = client.get("/job-posting", params={"search": "sommelier"}).json()
        assert listing["total"] == 1

        detail = client.get(f"/job-posting/{posting['id']}").json()
        assert detail["views"] == 1

        response = client.delete(f"/job-posting/location/{location_id}", headers=auth_headers(admin))
        assert response.status_code == 409

    def test_inverted_period_rejected(self, client, make_account, auth_headers):
        admin = make_account(role=UserRole.ADMIN)
        editor = make_account(role=UserRole.EDITOR)
        location_id, employment_type_id = self._setup(client, auth_headers(admin))

        response = client.post(
            "/job-posting",
            json={
                "title": "Tea Sommelier",
                "company_name": "Green Leaf",
                "location_id": location_id,
                "detail_location": "Gangnam-gu 12",
                "description": "Curate the tea menu",
                "recruitment_start_date": "2026-03-31",
                "recruitment_end_date": "2026-03-01",
                "job_title": "Sommelier",
                "employment_type_id": employment_type_id,
                "annual_salary": 42000,
            },
            headers=auth_headers(editor),
        )
        assert response.status_code == 422

    def test_taxonomy_requires_admin(self, client, make_account, auth_headers):
        editor = make_account(role=UserRole.EDITOR)

        response = client.post("/job-posting/location", json={"name": "Seoul"}, headers=auth_headers(editor))
        assert response.status_code == 403

        assert client.get("/job-posting/location").json() == []


class TestRetentionEndpoints:
    def test_purge_requires_confirm(self, client, make_account, auth_headers):
        admin = make_account(role=UserRole.ADMIN)

        response = client.post("/v1/admin/retention/purge", json={}, headers=auth_headers(admin))
        assert response.status_code == 400

        response = client.post("/v1/admin/retention/purge", json={"confirm": True}, headers=auth_headers(admin))
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["retention_months"] == 3
        assert data["state"] == "purged"

    def test_preview_and_dry_run(self, client, make_account, auth_headers):
        admin = make_account(role=UserRole.ADMIN)

        preview = client.get("/v1/admin/retention/preview", headers=auth_headers(admin))
        assert preview.status_code == 200
        assert preview.json()["total_pending"] == 0

        dry_run = client.post("/v1/admin/retention/dry-run", headers=auth_headers(admin))
        assert dry_run.status_code == 200
        assert dry_run.json()["dry_run"] is True
        assert dry_run.json()["state"] == "soft_deleted"

    def test_non_admin_forbidden(self, client, make_account, auth_headers):
        editor = make_account(role=UserRole.EDITOR)

        response = client.get("/v1/admin/retention/preview", headers=auth_headers(editor))
        assert response.status_code == 403

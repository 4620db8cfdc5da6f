"""End-to-end tests for the post endpoints."""

from uuid import uuid4

from article.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import VALID_CONTENT, post_body, register_and_login


def create(client, headers, **overrides) -> dict:
    response = client.post("/api/posts", json=post_body(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreatePost:
    """End-to-end tests for POST /api/posts."""

    def test_create_and_fetch_round_trips_tags(self, client):
        # Arrange
        headers = register_and_login(client)

        # Act
        created = create(client, headers, tags=["go", "backend"])
        response = client.get(f"/api/posts/{created['id']}")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Post retrieved successfully"
        assert sorted(tag["name"] for tag in body["data"]["tags"]) == ["backend", "go"]
        assert body["data"]["author"]["email"] == "author@mail.com"

    def test_tag_rows_are_shared_between_posts(self, client):
        headers = register_and_login(client)

        first = create(client, headers, tags=["go"])
        second = create(client, headers, tags=["go"])

        assert first["tags"][0]["id"] == second["tags"][0]["id"]

    def test_content_length_boundary(self, client):
        headers = register_and_login(client)

        too_short = client.post(
            "/api/posts", json=post_body(content="x" * 199), headers=headers
        )
        just_right = client.post(
            "/api/posts", json=post_body(content="x" * 200), headers=headers
        )

        assert too_short.status_code == 400
        assert too_short.json()["status"] == "error"
        assert just_right.status_code == 201

    def test_invalid_status_is_rejected(self, client):
        headers = register_and_login(client)

        response = client.post(
            "/api/posts", json=post_body(status="archived"), headers=headers
        )

        assert response.status_code == 400

    def test_requires_authentication(self, client):
        response = client.post("/api/posts", json=post_body())

        assert response.status_code == 401
        assert response.json()["message"] == "missing authorization header"


class TestReadPosts:
    """End-to-end tests for the read endpoints."""

    def test_unknown_post_is_404(self, client):
        response = client.get(f"/api/posts/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["message"] == "post not found"

    def test_malformed_id_is_400(self, client):
        response = client.get("/api/posts/not-a-uuid")

        assert response.status_code == 400

    def test_unknown_api_route(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {
            "status": "error",
            "message": "API endpoint not found",
            "error": None,
        }

    def test_pagination_with_total(self, client):
        # Arrange
        headers = register_and_login(client)
        for _ in range(25):
            create(client, headers, tags=[])

        # Act
        response = client.get("/api/posts?limit=10&offset=20")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 5
        assert body["meta"] == {"total": 25, "limit": 10, "offset": 20}

    def test_default_page_and_order(self, client):
        headers = register_and_login(client)
        ids = [create(client, headers, tags=[])["id"] for _ in range(3)]

        body = client.get("/api/posts").json()

        assert body["meta"]["limit"] == 10
        assert [post["id"] for post in body["data"]] == list(reversed(ids))

    def test_out_of_range_limit_is_400(self, client):
        response = client.get("/api/posts?limit=1000")

        assert response.status_code == 400
        assert response.json()["message"] == "invalid pagination"

    def test_status_filter(self, client):
        headers = register_and_login(client)
        create(client, headers, status="publish")
        draft = create(client, headers, status="draft")

        body = client.get("/api/posts?status=draft").json()

        assert [post["id"] for post in body["data"]] == [draft["id"]]
        assert body["meta"]["total"] == 1

    def test_my_posts_only_lists_caller(self, client):
        # Arrange
        mine = register_and_login(client)
        theirs = register_and_login(client, email="other@mail.com")
        own = create(client, mine, status="draft")
        create(client, theirs)

        # Act
        response = client.get("/api/posts/my", headers=mine)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [post["id"] for post in body["data"]] == [own["id"]]
        assert body["meta"]["total"] == 1

    def test_my_posts_requires_authentication(self, client):
        response = client.get("/api/posts/my")

        assert response.status_code == 401


class TestUpdatePost:
    """End-to-end tests for PUT /api/posts/{id}."""

    def test_author_can_update(self, client):
        headers = register_and_login(client)
        post = create(client, headers, tags=["go", "backend"])

        response = client.put(
            f"/api/posts/{post['id']}",
            json=post_body(title="Completely rewritten title", tags=["rust"]),
            headers=headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Completely rewritten title"
        assert [tag["name"] for tag in data["tags"]] == ["rust"]

    def test_non_author_gets_403_and_post_is_unchanged(self, client):
        # Arrange
        author = register_and_login(client)
        intruder = register_and_login(client, email="intruder@mail.com")
        post = create(client, author, tags=["go"])

        # Act
        response = client.put(
            f"/api/posts/{post['id']}",
            json=post_body(title="Hijacked title for the post", tags=["spam"]),
            headers=intruder,
        )

        # Assert
        assert response.status_code == 403
        after = client.get(f"/api/posts/{post['id']}").json()["data"]
        assert after["title"] == post["title"]
        assert [tag["name"] for tag in after["tags"]] == ["go"]

    def test_failed_tag_write_leaves_post_unchanged(self, client, monkeypatch):
        """An update that fails midway is rolled back as a whole."""
        # Arrange
        headers = register_and_login(client)
        post = create(client, headers, tags=["go"])

        async def broken_replace(self, post_id, tag_ids):
            raise RuntimeError("storage went away")

        monkeypatch.setattr(InMemoryPostRepository, "replace_tags", broken_replace)

        # Act
        response = client.put(
            f"/api/posts/{post['id']}",
            json=post_body(
                title="Title that must not persist",
                content=VALID_CONTENT + "!",
                tags=["rust"],
            ),
            headers=headers,
        )

        # Assert
        assert response.status_code == 500
        assert response.json()["message"] == "failed to update post"
        assert response.json()["error"] is None
        after = client.get(f"/api/posts/{post['id']}").json()["data"]
        assert after["title"] == post["title"]
        assert after["content"] == post["content"]
        assert [tag["name"] for tag in after["tags"]] == ["go"]

    def test_unknown_post_with_invalid_body_is_404(self, client):
        headers = register_and_login(client)

        response = client.put(
            f"/api/posts/{uuid4()}", json=post_body(title="too short"), headers=headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "post not found"

    def test_non_author_with_invalid_body_is_403(self, client):
        author = register_and_login(client)
        intruder = register_and_login(client, email="intruder@mail.com")
        post = create(client, author)

        response = client.put(
            f"/api/posts/{post['id']}",
            json=post_body(title="too short"),
            headers=intruder,
        )

        assert response.status_code == 403

    def test_update_unknown_post_is_404(self, client):
        headers = register_and_login(client)

        response = client.put(f"/api/posts/{uuid4()}", json=post_body(), headers=headers)

        assert response.status_code == 404


class TestDeletePost:
    """End-to-end tests for DELETE /api/posts/{id} and the admin listing."""

    def test_soft_delete_hides_post(self, client):
        headers = register_and_login(client)
        post = create(client, headers)

        response = client.delete(f"/api/posts/{post['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "message": "Post deleted successfully",
        }
        assert client.get(f"/api/posts/{post['id']}").status_code == 404
        assert client.get("/api/posts").json()["meta"]["total"] == 0

    def test_non_author_cannot_delete(self, client):
        author = register_and_login(client)
        intruder = register_and_login(client, email="intruder@mail.com")
        post = create(client, author)

        response = client.delete(f"/api/posts/{post['id']}", headers=intruder)

        assert response.status_code == 403
        assert client.get(f"/api/posts/{post['id']}").status_code == 200

    def test_admin_listing_includes_deleted(self, client):
        # Arrange
        headers = register_and_login(client)
        kept = create(client, headers, status="thrash")
        deleted = create(client, headers)
        client.delete(f"/api/posts/{deleted['id']}", headers=headers)

        # Act
        response = client.get("/api/admin/posts", headers=headers)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["meta"]["total"] == 2
        by_id = {post["id"]: post for post in body["data"]}
        assert by_id[deleted["id"]]["deleted_at"] is not None
        assert by_id[kept["id"]]["deleted_at"] is None

    def test_admin_listing_requires_authentication(self, client):
        assert client.get("/api/admin/posts").status_code == 401

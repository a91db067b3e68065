"""End-to-end tests for the post endpoints."""

from blog.util import frontmatter


def _create(client, auth_headers, **fields):
    body = {
        "title": "Hello World",
        "content": "# Hello\n\nFirst post.\n",
        "category": "tech",
        "subCategory": "backend",
        "tags": ["Python"],
    }
    body.update(fields)
    return client.post("/posts", json=body, headers=auth_headers)


class TestCreatePost:
    """POST /posts."""

    def test_create_writes_markdown_file(self, client, auth_headers, content_root):
        # Act
        response = _create(client, auth_headers)

        # Assert
        assert response.status_code == 201
        assert response.json() == {"slug": "hello-world"}
        path = content_root / "tech/backend/hello-world.md"
        meta, body = frontmatter.split(path.read_text(encoding="utf-8"))
        assert meta["title"] == "Hello World"
        assert meta["subCategory"] == "backend"
        assert body == "# Hello\n\nFirst post.\n"

    def test_create_requires_token(self, client):
        response = client.post(
            "/posts", json={"title": "x", "content": "y", "category": "life"}
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_duplicate_title_conflicts(self, client, auth_headers):
        _create(client, auth_headers)

        response = _create(client, auth_headers, content="Overwrite?")

        assert response.status_code == 409

    def test_invalid_category_is_rejected(self, client, auth_headers):
        response = _create(client, auth_headers, category="music")

        assert response.status_code == 422

    def test_path_traversal_in_sub_category_is_rejected(
        self, client, auth_headers, content_root
    ):
        response = _create(client, auth_headers, subCategory="../../etc")

        assert response.status_code == 422
        assert not (content_root.parent / "etc").exists()


class TestReadPosts:
    """GET /posts and GET /posts/{slug}."""

    def test_list_and_filter(self, client, auth_headers):
        # Arrange
        _create(client, auth_headers)
        _create(
            client,
            auth_headers,
            title="Morning Walk",
            category="life",
            subCategory=None,
            tags=["daily"],
        )

        # Act
        everything = client.get("/posts").json()["posts"]
        life = client.get("/posts", params={"category": "life"}).json()["posts"]
        backend = client.get("/posts", params={"subCategory": "backend"}).json()
        searched = client.get("/posts", params={"q": "DAILY"}).json()["posts"]

        # Assert
        assert {p["slug"] for p in everything} == {"hello-world", "morning-walk"}
        assert [p["slug"] for p in life] == ["morning-walk"]
        assert [p["slug"] for p in backend["posts"]] == ["hello-world"]
        assert [p["slug"] for p in searched] == ["morning-walk"]
        assert "content" not in everything[0]
        assert "readingTime" in everything[0]

    def test_get_post(self, client, auth_headers):
        _create(client, auth_headers)

        response = client.get("/posts/hello-world")

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "# Hello\n\nFirst post.\n"
        assert data["subCategory"] == "backend"
        assert data["readingTime"] == 1

    def test_get_missing_post(self, client):
        response = client.get("/posts/nope")

        assert response.status_code == 404

    def test_files_added_by_hand_are_served(self, client, content_root):
        """Posts dropped into the content directory appear without a restart."""
        path = content_root / "tools/manual.md"
        path.write_text("---\ntitle: Manual\n---\nBy hand\n", encoding="utf-8")

        response = client.get("/posts/manual")

        assert response.status_code == 200
        assert response.json()["category"] == "tools"


class TestUpdatePost:
    """PUT /posts/{slug}."""

    def test_update_moves_post(self, client, auth_headers, content_root):
        # Arrange
        _create(client, auth_headers, title="Trip", category="life", subCategory=None)

        # Act
        response = client.put(
            "/posts/trip",
            json={"category": "tech", "subCategory": "backend"},
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "slug": "trip",
            "category": "tech",
            "subCategory": "backend",
        }
        assert not (content_root / "life/trip.md").exists()
        assert (content_root / "tech/backend/trip.md").exists()
        assert client.get("/posts/trip").json()["tags"] == ["Python"]

    def test_update_missing_post(self, client, auth_headers):
        response = client.put("/posts/nope", json={"title": "x"}, headers=auth_headers)

        assert response.status_code == 404

    def test_update_requires_token(self, client):
        response = client.put("/posts/anything", json={"title": "x"})

        assert response.status_code == 401


class TestDeletePost:
    """DELETE /posts/{slug}."""

    def test_delete_post(self, client, auth_headers, content_root):
        _create(client, auth_headers)

        response = client.delete("/posts/hello-world", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert not (content_root / "tech/backend/hello-world.md").exists()
        assert client.get("/posts/hello-world").status_code == 404

    def test_delete_missing_post(self, client, auth_headers):
        response = client.delete("/posts/nope", headers=auth_headers)

        assert response.status_code == 404

from portfolio_api.db.seed import PROJECT_CATALOGUE

PROJECT_KEYS = {
    "id", "title", "description", "imageUrl", "liveLink",
    "githubLink", "tags", "category", "featured",
}


def test_list_projects_returns_catalogue(client):
    response = client.get("/projects")

    assert response.status_code == 200
    projects = response.json()
    assert len(projects) == len(PROJECT_CATALOGUE) == 4
    for project in projects:
        assert set(project) == PROJECT_KEYS
        for key in ("title", "description", "imageUrl", "category"):
            assert project[key]
        assert project["tags"]
        assert all(isinstance(tag, str) for tag in project["tags"])


def test_projects_keep_catalogue_order_and_fields(client):
    projects = client.get("/projects").json()

    assert [p["title"] for p in projects] == [p["title"] for p in PROJECT_CATALOGUE]
    first = projects[0]
    assert first["liveLink"] == "https://example.com"
    assert first["githubLink"] is None
    assert first["tags"] == ["Shopify", "Liquid", "JavaScript"]
    assert first["featured"] is True
    assert projects[-1]["featured"] is False


def test_get_each_project_by_id(client):
    for project in client.get("/projects").json():
        response = client.get(f"/projects/{project['id']}")
        assert response.status_code == 200
        assert response.json() == project


def test_get_missing_project(client):
    response = client.get("/projects/9999")

    assert response.status_code == 404
    assert response.json() == {"message": "Project not found"}


def test_get_project_beyond_id_range(client):
    response = client.get("/projects/99999999999999999999")

    assert response.status_code == 404
    assert response.json() == {"message": "Project not found"}


def test_non_numeric_project_id_is_routing_miss(client):
    for path in ("/projects/abc", "/projects/-1", "/projects/1.5"):
        response = client.get(path)
        assert response.status_code == 404
        assert response.json() == {"message": "Not found"}

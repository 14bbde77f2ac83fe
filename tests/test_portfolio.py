from portfolio import FILTERS, PROJECTS, filter_projects


def titles(projects):
    return [p.title for p in projects]


def test_all_returns_every_project_in_order():
    assert filter_projects(PROJECTS, "All") == PROJECTS
    assert filter_projects(PROJECTS) == PROJECTS


def test_single_tag():
    assert titles(filter_projects(PROJECTS, "Java")) == ["InchWorm", "Nutrition Tracker"]
    assert titles(filter_projects(PROJECTS, "React")) == ["Portfolio Website", "Air Movies"]


def test_tag_match_is_exact():
    assert filter_projects(PROJECTS, "java") == []
    assert filter_projects(PROJECTS, "Rust") == []


def test_projects_endpoint(client):
    res = client.get("/api/projects", params={"tag": "Python"})

    assert res.status_code == 200
    body = res.json()
    assert body["filters"] == FILTERS
    assert [p["title"] for p in body["projects"]] == ["Air Movies", "FTCScouter"]


def test_projects_endpoint_defaults_to_all(client):
    res = client.get("/api/projects")
    assert len(res.json()["projects"]) == len(PROJECTS)

from drf_spectacular.generators import SchemaGenerator


def _first_tags(paths, path):
    first_op = next(iter(paths[path].values()))
    return first_op.get("tags")


def test_schema_tag_grouping(db):
    generator = SchemaGenerator()
    schema = generator.get_schema(request=None, public=True)
    paths = schema["paths"]

    assert _first_tags(paths, "/api/auth/login") == ["Authentication"]
    assert _first_tags(paths, "/api/events") == ["Events"]
    assert _first_tags(paths, "/api/registrations") == ["Registrations"]
    assert _first_tags(paths, "/api/organizer/registrations") == ["Registrations"]
    assert _first_tags(paths, "/api/organizers") == ["Users"]
    assert _first_tags(paths, "/api/health") == ["Service"]

    register_paths = [p for p in paths if p.endswith("/register") and "events" in p]
    assert register_paths
    assert _first_tags(paths, register_paths[0]) == ["Registrations"]


def test_schema_endpoint_served(client, db):
    r = client.get("/api/schema/")
    assert r.status_code == 200  # noqa: PLR2004


def test_bearer_scheme_documented(db):
    schema = SchemaGenerator().get_schema(request=None, public=True)
    scheme = schema["components"]["securitySchemes"]["jwtAuth"]
    assert scheme["type"] == "http"
    assert scheme["scheme"] == "bearer"
    assert {"jwtAuth": []} in schema["paths"]["/api/registrations"]["get"]["security"]

from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest

from film_catalog.errors import ResourceNotFound


def add_failing_route(app, exc):
    def fail():
        raise exc
    app.add_url_rule("/api/fail", "fail", fail)


def test_unexpected_error_hides_details(app, client):
    add_failing_route(app, RuntimeError("secret connection string"))

    response = client.get("/api/fail")

    assert response.status_code == 500
    body = response.get_json()
    assert body["code"] == "INTERNAL_ERROR"
    assert "secret" not in body["message"]


def test_integrity_error_maps_to_conflict(app, client):
    add_failing_route(app, IntegrityError("DELETE ...", {}, Exception("FOREIGN KEY constraint failed")))

    response = client.get("/api/fail")

    assert response.status_code == 409
    assert response.get_json()["code"] == "DATA_INTEGRITY_ERROR"


def test_not_found_factories():
    assert ResourceNotFound.for_film(7).message == "Film with ID '7' not found"
    assert ResourceNotFound.for_actor(3).resource == "Actor"
    assert ResourceNotFound.for_multiple("Actor", {9, 8}).message == "2 actor(s) not found: 8, 9"
    assert "Film (ID: 1)" in ResourceNotFound.for_relationship("Film", 1, "Actor", 2).message


def test_method_not_allowed_keeps_status(client):
    response = client.post("/api/glumci/most-active")
    assert response.status_code == 405
    assert response.get_json()["code"] == "METHOD_NOT_ALLOWED"


def test_other_bad_requests_are_not_reported_as_json_errors(app, client):
    add_failing_route(app, BadRequest("Missing header"))

    response = client.get("/api/fail")

    assert response.status_code == 400
    assert response.get_json()["code"] == "BAD_REQUEST"


def test_non_numeric_path_ids_are_type_mismatches(client, catalog):
    response = client.get("/api/filmovi/abc")
    assert response.status_code == 400
    body = response.get_json()
    assert body["code"] == "TYPE_MISMATCH"
    assert "'abc'" in body["message"]

    assert client.put("/api/filmovi/abc", json={"name": "x"}).status_code == 400
    assert client.delete("/api/glumci/abc").status_code == 400
    assert client.get("/api/glumci/abc/filmovi").status_code == 400

    film_id = catalog["nobody"]["id"]
    response = client.post(f"/api/glumci/x/filmovi/{film_id}")
    assert response.status_code == 400
    assert "'actorId'" in response.get_json()["message"]

    response = client.delete(f"/api/glumci/{catalog['a']['id']}/filmovi/y")
    assert response.status_code == 400
    assert "'filmId'" in response.get_json()["message"]

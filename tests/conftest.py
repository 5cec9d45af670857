import pytest

from film_catalog import create_app
from film_catalog.config import TestConfig
from film_catalog.models import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_film(client):
    def make(name, actor_ids=None):
        body = {"name": name}
        if actor_ids is not None:
            body["actorIds"] = actor_ids
        response = client.post("/api/filmovi", json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return make


@pytest.fixture
def make_actor(client):
    def make(description, film_ids=None):
        body = {"description": description}
        if film_ids is not None:
            body["filmIds"] = film_ids
        response = client.post("/api/glumci", json=body)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return make


@pytest.fixture
def catalog(make_film, make_actor):
    """Three actors and four films.

    Film ``Both`` has actors a and b, ``Only A`` has a, ``Only B`` has b and
    ``Nobody`` has no actors. Actor c plays in nothing.
    """
    a = make_actor("Robert Downey Jr. - American actor")
    b = make_actor("Scarlett Johansson - American actress")
    c = make_actor("Unknown extra")
    films = {
        "both": make_film("Avengers: Endgame", [a["id"], b["id"]]),
        "only_a": make_film("Iron Man", [a["id"]]),
        "only_b": make_film("Lost in Translation", [b["id"]]),
        "nobody": make_film("The Room"),
    }
    return {"a": a, "b": b, "c": c, **films}

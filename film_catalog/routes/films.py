from flask import Blueprint, current_app, request

from film_catalog.repositories import PageRequest
from film_catalog.routes.pages import page_to_hateoas, path_id, request_json
from film_catalog.schemas.actor import actors_schema
from film_catalog.schemas.film import film_schema, films_schema, film_stats_schema
from film_catalog.schemas.params import film_filter_args, film_page_args, limit_args
from film_catalog.services import film_service

# Blueprint gets inserted into flask app
films_router = Blueprint('films', __name__, url_prefix='/filmovi')


def film_to_hateoas(film):
    return {
        **film_schema.dump(film),
        "_links": {
            "self": f"/api/filmovi/{film.id}",
            "actors": f"/api/filmovi/{film.id}/glumci",
            "update": f"/api/filmovi/{film.id}",
            "delete": f"/api/filmovi/{film.id}"
        }
    }


@films_router.post("")
def create_film():
    film_data = film_schema.load(request_json())
    film = film_service.create(film_data)
    return film_to_hateoas(film), 201


@films_router.get("/<film_id>")
def read_film(film_id):
    return film_to_hateoas(film_service.get(path_id(film_id, "id")))


@films_router.get("")
def read_all_films():
    return films_schema.dump(film_service.list_all())


@films_router.get("/filter")
def filter_films():
    criteria = film_filter_args.load_args(request.args)
    return films_schema.dump(film_service.filter(**criteria))


@films_router.get("/paginated")
def read_films_paginated():
    args = film_page_args.load_args(request.args)
    page_request = PageRequest(
        page=args.pop("page"),
        size=args.pop("size") or current_app.config["DEFAULT_PAGE_SIZE"],
        sort_by=args.pop("sort_by"),
        sort_dir=args.pop("sort_dir")
    )
    page = film_service.paginated(page_request, **args)
    return page_to_hateoas(page, [film_to_hateoas(f) for f in page.items])


@films_router.get("/<film_id>/glumci")
def read_film_actors(film_id):
    return actors_schema.dump(film_service.actors_of(path_id(film_id, "id"))), 200


def update_film_helper(film_id, partial):
    film_id = path_id(film_id, "id")
    film_data = film_schema.load(request_json(), partial=partial)
    film = film_service.update(film_id, film_data)
    return film_to_hateoas(film), 200


@films_router.put("/<film_id>")
def update_film(film_id):
    return update_film_helper(film_id, partial=False)


@films_router.patch("/<film_id>")
def partial_update_film(film_id):
    return update_film_helper(film_id, partial=True)


@films_router.delete("/<film_id>")
def delete_film(film_id):
    film_service.delete(path_id(film_id, "id"))
    return "", 204


@films_router.get("/latest")
def read_latest_films():
    limit = limit_args.load_args(request.args)["limit"]
    return films_schema.dump(film_service.latest(limit))


@films_router.get("/stats")
def read_film_stats():
    stats = film_service.stats(current_app.config["STATS_LIMIT"])
    return film_stats_schema.dump(stats)

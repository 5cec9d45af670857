from flask import Blueprint, current_app, request

from film_catalog.repositories import PageRequest
from film_catalog.routes.pages import page_to_hateoas, path_id, request_json
from film_catalog.schemas.actor import actor_schema, actors_schema, actor_stats_schema
from film_catalog.schemas.film import films_schema
from film_catalog.schemas.params import actor_filter_args, actor_page_args, limit_args
from film_catalog.services import actor_service

# Blueprint gets inserted into flask app
actors_router = Blueprint('actors', __name__, url_prefix='/glumci')


def actor_to_hateoas(actor):
    return {
        **actor_schema.dump(actor),
        "_links": {
            "self": f"/api/glumci/{actor.id}",
            "update": f"/api/glumci/{actor.id}",
            "delete": f"/api/glumci/{actor.id}",
            "films": f"/api/glumci/{actor.id}/filmovi"
        }
    }


@actors_router.post("")
def create_actor():
    actor_data = actor_schema.load(request_json())
    actor = actor_service.create(actor_data)
    return actor_to_hateoas(actor), 201


@actors_router.get("/<actor_id>")
def read_actor(actor_id):
    return actor_to_hateoas(actor_service.get(path_id(actor_id, "id")))


@actors_router.get("")
def read_all_actors():
    return actors_schema.dump(actor_service.list_all())


@actors_router.get("/filter")
def filter_actors():
    criteria = actor_filter_args.load_args(request.args)
    return actors_schema.dump(actor_service.filter(**criteria))


@actors_router.get("/paginated")
def read_actors_paginated():
    args = actor_page_args.load_args(request.args)
    page_request = PageRequest(
        page=args.pop("page"),
        size=args.pop("size") or current_app.config["DEFAULT_PAGE_SIZE"],
        sort_by=args.pop("sort_by"),
        sort_dir=args.pop("sort_dir")
    )
    page = actor_service.paginated(page_request, **args)
    return page_to_hateoas(page, [actor_to_hateoas(a) for a in page.items])


@actors_router.put("/<actor_id>")
def update_actor(actor_id):
    actor_id = path_id(actor_id, "id")
    # full object required
    actor_data = actor_schema.load(request_json(), partial=False)
    return actor_to_hateoas(actor_service.update(actor_id, actor_data)), 200


@actors_router.patch("/<actor_id>")
def partial_update_actor(actor_id):
    actor_id = path_id(actor_id, "id")
    actor_data = actor_schema.load(request_json(), partial=True)
    return actor_to_hateoas(actor_service.update(actor_id, actor_data)), 200


@actors_router.delete("/<actor_id>")
def delete_actor(actor_id):
    actor_service.delete(path_id(actor_id, "id"))
    return "", 204


@actors_router.get("/<actor_id>/filmovi")
def read_actor_films(actor_id):
    return films_schema.dump(actor_service.films_of(path_id(actor_id, "id"))), 200


@actors_router.post("/<actor_id>/filmovi/<film_id>")
def assign_actor_to_film(actor_id, film_id):
    actor = actor_service.assign_to_film(path_id(actor_id, "actorId"), path_id(film_id, "filmId"))
    return actor_to_hateoas(actor), 200


@actors_router.delete("/<actor_id>/filmovi/<film_id>")
def remove_actor_from_film(actor_id, film_id):
    actor = actor_service.remove_from_film(path_id(actor_id, "actorId"), path_id(film_id, "filmId"))
    return actor_to_hateoas(actor), 200


@actors_router.get("/most-active")
def read_most_active_actors():
    limit = limit_args.load_args(request.args)["limit"]
    return actors_schema.dump(actor_service.most_active(limit))


@actors_router.get("/without-films")
def read_actors_without_films():
    return actors_schema.dump(actor_service.without_films())


@actors_router.get("/stats")
def read_actor_stats():
    stats = actor_service.stats(current_app.config["STATS_LIMIT"])
    return actor_stats_schema.dump(stats)

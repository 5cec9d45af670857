import logging

from film_catalog.errors import DuplicateResource, ResourceNotFound
from film_catalog.models import Actor, transactional
from film_catalog.repositories import actor_repository, film_repository
from film_catalog.specifications import actor_filter

logger = logging.getLogger(__name__)


class ActorService:
    def __init__(self, actors=actor_repository, films=film_repository):
        self.actors = actors
        self.films = films

    @transactional
    def create(self, data):
        description = data["description"]
        logger.info("Creating new actor: %s", description)

        if self.actors.exists_by_natural_key(description):
            raise DuplicateResource(f"Actor with description '{description}' already exists")

        actor = Actor(description=description)
        if data.get("film_ids"):
            self._replace_films(actor, self.films.resolve_ids(data["film_ids"]))

        self.actors.save(actor)
        logger.info("Actor created successfully with ID: %s", actor.id)
        return actor

    def get(self, actor_id):
        logger.debug("Fetching actor with ID: %s", actor_id)
        actor = self.actors.get_with_related(actor_id)
        if actor is None:
            raise ResourceNotFound.for_actor(actor_id)
        return actor

    def list_all(self):
        logger.debug("Fetching all actors")
        return self.actors.find_all_with_related()

    @transactional
    def update(self, actor_id, data):
        logger.info("Updating actor with ID: %s", actor_id)

        actor = self._require(actor_id)

        description = data.get("description")
        if description is not None:
            if self.actors.exists_by_natural_key(description, exclude_id=actor.id):
                raise DuplicateResource(f"Actor with description '{description}' already exists")
            actor.description = description

        if data.get("film_ids") is not None:
            self._replace_films(actor, self.films.resolve_ids(data["film_ids"]))

        self.actors.save(actor)
        logger.info("Actor updated successfully: %s", actor.id)
        return actor

    @transactional
    def delete(self, actor_id):
        logger.info("Deleting actor with ID: %s", actor_id)

        actor = self._require(actor_id)
        if actor.films:
            logger.warning("Actor %s still has %d films, unlinking them", actor_id, len(actor.films))
            for film in list(actor.films):
                actor.remove_film(film)

        self.actors.delete(actor)
        logger.info("Actor deleted successfully: %s", actor_id)

    @transactional
    def assign_to_film(self, actor_id, film_id):
        logger.info("Assigning actor %s to film %s", actor_id, film_id)

        actor = self._require(actor_id)
        film = self.films.get(film_id)
        if film is None:
            raise ResourceNotFound.for_film(film_id)

        actor.add_film(film)
        self.actors.save(actor)
        logger.info("Actor %s successfully assigned to film %s", actor_id, film_id)
        return actor

    @transactional
    def remove_from_film(self, actor_id, film_id):
        logger.info("Removing actor %s from film %s", actor_id, film_id)

        actor = self._require(actor_id)
        film = self.films.get(film_id)
        if film is None:
            raise ResourceNotFound.for_film(film_id)

        actor.remove_film(film)
        self.actors.save(actor)
        logger.info("Actor %s successfully removed from film %s", actor_id, film_id)
        return actor

    def filter(self, **criteria):
        logger.debug("Filtering actors with %s", criteria)
        return self.actors.find_all(actor_filter(**criteria))

    def paginated(self, page_request, **criteria):
        logger.debug("Fetching paginated actors - %r, filters %s", page_request, criteria)
        return self.actors.find_page(actor_filter(**criteria), page_request)

    def films_of(self, actor_id):
        return self.get(actor_id).films

    def count(self):
        return self.actors.count()

    def most_active(self, limit):
        logger.debug("Fetching most active actors, limit: %s", limit)
        return self.actors.find_most_active(limit)

    def without_films(self):
        logger.debug("Fetching actors without films")
        return self.actors.find_without_films()

    def stats(self, limit):
        logger.debug("Fetching actor statistics")
        return {
            "total_count": self.count(),
            "most_active_actors": self.most_active(limit),
            "actors_without_films_count": len(self.without_films()),
        }

    def _require(self, actor_id):
        actor = self.actors.get(actor_id)
        if actor is None:
            raise ResourceNotFound.for_actor(actor_id)
        return actor

    def _replace_films(self, actor, films):
        for film in list(actor.films):
            if film not in films:
                actor.remove_film(film)
        for film in films:
            actor.add_film(film)


actor_service = ActorService()

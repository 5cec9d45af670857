import logging

from film_catalog.errors import DuplicateResource, ResourceNotFound
from film_catalog.models import Film, transactional
from film_catalog.repositories import actor_repository, film_repository
from film_catalog.specifications import film_filter

logger = logging.getLogger(__name__)


class FilmService:
    def __init__(self, films=film_repository, actors=actor_repository):
        self.films = films
        self.actors = actors

    @transactional
    def create(self, data):
        name = data["name"]
        logger.info("Creating new film: %s", name)

        if self.films.exists_by_natural_key(name):
            raise DuplicateResource(f"Film with name '{name}' already exists")

        film = Film(name=name)
        if data.get("actor_ids"):
            self._replace_actors(film, self.actors.resolve_ids(data["actor_ids"]))

        self.films.save(film)
        logger.info("Film created successfully with ID: %s", film.id)
        return film

    def get(self, film_id):
        logger.debug("Fetching film with ID: %s", film_id)
        film = self.films.get_with_related(film_id)
        if film is None:
            raise ResourceNotFound.for_film(film_id)
        return film

    def list_all(self):
        logger.debug("Fetching all films")
        return self.films.find_all_with_related()

    @transactional
    def update(self, film_id, data):
        """Apply ``data`` to a film; keys missing from ``data`` are left as they are."""
        logger.info("Updating film with ID: %s", film_id)

        film = self.films.get(film_id)
        if film is None:
            raise ResourceNotFound.for_film(film_id)

        name = data.get("name")
        if name is not None:
            if self.films.exists_by_natural_key(name, exclude_id=film.id):
                raise DuplicateResource(f"Film with name '{name}' already exists")
            film.name = name

        if data.get("actor_ids") is not None:
            self._replace_actors(film, self.actors.resolve_ids(data["actor_ids"]))

        self.films.save(film)
        logger.info("Film updated successfully: %s", film.id)
        return film

    @transactional
    def delete(self, film_id):
        logger.info("Deleting film with ID: %s", film_id)

        film = self.films.get(film_id)
        if film is None:
            raise ResourceNotFound.for_film(film_id)

        if film.actors:
            logger.warning("Film %s still has %d actors, unlinking them", film_id, len(film.actors))
            for actor in list(film.actors):
                film.remove_actor(actor)

        self.films.delete(film)
        logger.info("Film deleted successfully: %s", film_id)

    def filter(self, **criteria):
        logger.debug("Filtering films with %s", criteria)
        return self.films.find_all(film_filter(**criteria))

    def paginated(self, page_request, **criteria):
        logger.debug("Fetching paginated films - %r, filters %s", page_request, criteria)
        return self.films.find_page(film_filter(**criteria), page_request)

    def actors_of(self, film_id):
        return self.get(film_id).actors

    def count(self):
        return self.films.count()

    def latest(self, limit):
        return self.films.find_latest(limit)

    def stats(self, limit):
        logger.debug("Fetching film statistics")
        return {
            "total_count": self.count(),
            "latest_films": self.latest(limit),
        }

    def _replace_actors(self, film, actors):
        for actor in list(film.actors):
            if actor not in actors:
                film.remove_actor(actor)
        for actor in actors:
            film.add_actor(actor)


film_service = FilmService()

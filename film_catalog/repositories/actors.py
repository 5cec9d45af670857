from film_catalog.models import Actor
from film_catalog.repositories.base import Repository
from film_catalog.specifications.actors import without_films


class ActorRepository(Repository):
    model = Actor
    related = "films"
    natural_key = "description"

    def find_most_active(self, limit):
        """Actors ordered by how many films they appear in, most first."""
        return (
            self.query
            .order_by(Actor.film_count().desc(), Actor.id)
            .limit(limit)
            .all()
        )

    def find_without_films(self):
        return self.find_all(without_films())


actor_repository = ActorRepository()

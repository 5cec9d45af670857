from film_catalog.models import Film
from film_catalog.repositories.base import Repository


class FilmRepository(Repository):
    model = Film
    related = "actors"
    natural_key = "name"

    def find_latest(self, limit):
        return (
            self.query
            .order_by(Film.created_at.desc(), Film.id.desc())
            .limit(limit)
            .all()
        )


film_repository = FilmRepository()

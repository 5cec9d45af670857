from film_catalog.services.actor_service import actor_service, ActorService
from film_catalog.services.film_service import film_service, FilmService

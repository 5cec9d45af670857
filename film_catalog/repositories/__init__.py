from film_catalog.repositories.base import Page, PageRequest, Repository
from film_catalog.repositories.actors import actor_repository
from film_catalog.repositories.films import film_repository

from film_catalog.specifications.base import Specification, all_of, any_of
from film_catalog.specifications.actors import actor_filter
from film_catalog.specifications.films import film_filter

from film_catalog.models import Film
from film_catalog.specifications.base import (
    Specification,
    all_of,
    count_equals,
    count_greater_than,
    count_less_than,
    created_between,
    field_contains,
    field_equals_ignore_case,
    is_blank,
    keywords_in,
)


def has_description(description):
    return field_contains("description", description)


def has_exact_description(description):
    return field_equals_ignore_case("description", description)


def has_film(film_id):
    """Actors appearing in the given film."""
    def build(model):
        if film_id is None:
            return None
        return model.films.any(Film.id == film_id)
    return Specification(build)


def has_all_films(film_ids):
    return all_of(*(has_film(film_id) for film_id in film_ids or ()))


def has_film_with_name(name):
    def build(model):
        if is_blank(name):
            return None
        return model.films.any(field_contains("name", name).to_clause(Film))
    return Specification(build)


def has_more_than_films(minimum):
    return count_greater_than(lambda model: model.film_count(), minimum)


def has_fewer_than_films(maximum):
    return count_less_than(lambda model: model.film_count(), maximum)


def has_exact_film_count(count):
    return count_equals(lambda model: model.film_count(), count)


def without_films():
    return Specification(lambda model: ~model.films.any())


def with_films():
    return Specification(lambda model: model.films.any())


def search_by_keywords(keywords):
    return keywords_in("description", keywords)


def has_description_and_film(description, film_id):
    return Specification.where(has_description(description)) & has_film(film_id)


def actor_filter(description=None, film_ids=None, film_name=None, min_films=None,
                 max_films=None, keywords=None, created_after=None, created_before=None):
    return all_of(
        has_description(description),
        has_all_films(film_ids),
        has_film_with_name(film_name),
        has_more_than_films(min_films),
        has_fewer_than_films(max_films),
        search_by_keywords(keywords),
        created_between(created_after, created_before),
    )

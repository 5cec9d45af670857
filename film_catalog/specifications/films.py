from film_catalog.models import Actor
from film_catalog.specifications.base import (
    Specification,
    all_of,
    count_greater_than,
    count_less_than,
    created_between,
    field_contains,
    field_equals_ignore_case,
    is_blank,
)


def has_name(name):
    return field_contains("name", name)


def has_exact_name(name):
    return field_equals_ignore_case("name", name)


def has_actor(actor_id):
    """Films in which the given actor appears."""
    def build(model):
        if actor_id is None:
            return None
        return model.actors.any(Actor.id == actor_id)
    return Specification(build)


def has_all_actors(actor_ids):
    """One ``has_actor`` per id, AND-ed: a film must feature every listed actor."""
    return all_of(*(has_actor(actor_id) for actor_id in actor_ids or ()))


def has_actor_with_description(description):
    def build(model):
        if is_blank(description):
            return None
        return model.actors.any(field_contains("description", description).to_clause(Actor))
    return Specification(build)


def has_more_than_actors(minimum):
    return count_greater_than(lambda model: model.actor_count(), minimum)


def has_fewer_than_actors(maximum):
    return count_less_than(lambda model: model.actor_count(), maximum)


def without_actors():
    return Specification(lambda model: ~model.actors.any())


def with_actors():
    return Specification(lambda model: model.actors.any())


def has_name_and_actor(name, actor_id):
    return Specification.where(has_name(name)) & has_actor(actor_id)


def film_filter(name=None, actor_ids=None, actor_description=None,
                min_actors=None, max_actors=None, created_after=None, created_before=None):
    """Build the specification for the film list endpoints."""
    return all_of(
        has_name(name),
        has_all_actors(actor_ids),
        has_actor_with_description(actor_description),
        has_more_than_actors(min_actors),
        has_fewer_than_actors(max_actors),
        created_between(created_after, created_before),
    )

from film_catalog.models import Actor, Film, utcnow
from film_catalog.specifications import Specification, actor_filter, all_of, any_of, film_filter
from film_catalog.specifications import actors as actor_specs
from film_catalog.specifications import films as film_specs
from film_catalog.specifications.base import (
    created_after,
    created_before,
    created_between,
    has_id,
    has_id_in,
    updated_after,
)


def names(films):
    return sorted(f.name for f in films)


def run(spec, model=Film):
    return spec.apply(model.query, model).all()


def test_absent_filters_return_unfiltered_result(catalog):
    unfiltered = Film.query.all()

    assert names(run(film_filter())) == names(unfiltered)
    assert names(run(film_filter(name="   ", actor_ids=[], actor_description=""))) == names(unfiltered)
    assert film_filter(name=None, actor_ids=None).to_clause(Film) is None


def test_empty_specification_composes_as_identity(catalog):
    spec = Specification.where(None) & film_specs.has_name(None)
    assert spec.to_clause(Film) is None
    assert len(run(spec)) == 4


def test_name_filter_is_case_insensitive_substring(catalog):
    result = run(film_specs.has_name("  IRON  "))
    assert names(result) == ["Iron Man"]

    for film in run(film_specs.has_name("an")):
        assert "an" in film.name.lower()


def test_name_filter_treats_like_wildcards_literally(catalog):
    assert run(film_specs.has_name("%")) == []


def test_exact_name_ignores_case(catalog):
    assert names(run(film_specs.has_exact_name("iron man"))) == ["Iron Man"]
    assert run(film_specs.has_exact_name("iron")) == []


def test_multiple_actor_ids_require_every_actor(catalog):
    a, b = catalog["a"]["id"], catalog["b"]["id"]

    assert names(run(film_filter(actor_ids=[a]))) == ["Avengers: Endgame", "Iron Man"]
    assert names(run(film_filter(actor_ids=[a, b]))) == ["Avengers: Endgame"]
    assert names(run(film_filter(actor_ids=[b, a]))) == ["Avengers: Endgame"]


def test_any_of_gives_or_semantics(catalog):
    a, b = catalog["a"]["id"], catalog["b"]["id"]
    spec = any_of(film_specs.has_actor(a), film_specs.has_actor(b))
    assert names(run(spec)) == ["Avengers: Endgame", "Iron Man", "Lost in Translation"]


def test_any_of_ignores_absent_parts(catalog):
    spec = any_of(film_specs.has_name(""), film_specs.has_name("room"))
    assert names(run(spec)) == ["The Room"]


def test_composition_order_does_not_matter(catalog):
    a = catalog["a"]["id"]
    left = all_of(film_specs.has_name("man"), film_specs.has_actor(a))
    right = film_specs.has_actor(a) & film_specs.has_name("man")
    assert names(run(left)) == names(run(right)) == ["Iron Man"]


def test_actor_description_and_counts(catalog):
    assert names(run(film_specs.has_actor_with_description("scarlett"))) == [
        "Avengers: Endgame", "Lost in Translation"
    ]
    assert names(run(film_specs.has_more_than_actors(1))) == ["Avengers: Endgame"]
    assert names(run(film_specs.has_fewer_than_actors(1))) == ["The Room"]
    assert names(run(film_specs.without_actors())) == ["The Room"]
    assert len(run(film_specs.with_actors())) == 3
    # negative counts mean "not specified"
    assert len(run(film_specs.has_more_than_actors(-1))) == 4


def test_actor_specifications(catalog):
    avengers = catalog["both"]["id"]
    iron_man = catalog["only_a"]["id"]

    def descriptions(spec):
        return sorted(a.description for a in run(spec, Actor))

    assert descriptions(actor_filter(film_ids=[avengers, iron_man])) == ["Robert Downey Jr. - American actor"]
    assert descriptions(actor_specs.without_films()) == ["Unknown extra"]
    assert descriptions(actor_specs.has_exact_film_count(2)) == [
        "Robert Downey Jr. - American actor", "Scarlett Johansson - American actress"
    ]
    assert descriptions(actor_specs.has_film_with_name("translation")) == ["Scarlett Johansson - American actress"]
    assert descriptions(actor_specs.search_by_keywords("american ACTRESS")) == ["Scarlett Johansson - American actress"]
    assert len(run(actor_filter(), Actor)) == 3


def test_id_specifications(catalog):
    a = catalog["a"]["id"]

    assert [actor.id for actor in run(has_id(a), Actor)] == [a]
    assert has_id(None).to_clause(Actor) is None

    wanted = [catalog["both"]["id"], catalog["nobody"]["id"]]
    assert names(run(has_id_in(wanted))) == ["Avengers: Endgame", "The Room"]
    assert len(run(has_id_in([]))) == 4


def test_creation_time_bounds(catalog):
    iron_man = Film.query.filter_by(name="Iron Man").one().created_at
    translation = Film.query.filter_by(name="Lost in Translation").one().created_at

    assert names(run(created_after(translation))) == ["Lost in Translation", "The Room"]
    assert names(run(created_before(iron_man))) == ["Avengers: Endgame", "Iron Man"]
    assert names(run(created_between(iron_man, translation))) == ["Iron Man", "Lost in Translation"]
    # one-sided ranges
    assert names(run(created_between(translation, None))) == ["Lost in Translation", "The Room"]
    assert names(run(created_between(None, iron_man))) == ["Avengers: Endgame", "Iron Man"]
    assert created_between(None, None).to_clause(Film) is None
    assert created_after(None).to_clause(Film) is None


def test_updated_after(client, catalog):
    moment = utcnow()
    client.patch(f"/api/filmovi/{catalog['only_a']['id']}", json={"name": "Iron Man 2"})

    assert names(run(updated_after(moment))) == ["Iron Man 2"]
    assert len(run(updated_after(None))) == 4


def test_name_and_actor(catalog):
    a, b = catalog["a"]["id"], catalog["b"]["id"]

    assert names(run(film_specs.has_name_and_actor("avengers", a))) == ["Avengers: Endgame"]
    assert run(film_specs.has_name_and_actor("room", a)) == []
    # a missing name leaves only the actor constraint
    assert names(run(film_specs.has_name_and_actor(None, b))) == ["Avengers: Endgame", "Lost in Translation"]


def test_remaining_actor_specifications(catalog):
    def descriptions(spec):
        return sorted(a.description for a in run(spec, Actor))

    assert descriptions(actor_specs.has_exact_description("unknown EXTRA")) == ["Unknown extra"]
    assert descriptions(actor_specs.has_exact_description("unknown")) == []
    assert descriptions(actor_specs.with_films()) == [
        "Robert Downey Jr. - American actor", "Scarlett Johansson - American actress"
    ]
    assert descriptions(actor_specs.has_description_and_film("american", catalog["only_b"]["id"])) == [
        "Scarlett Johansson - American actress"
    ]
    assert descriptions(actor_specs.has_description_and_film("american", catalog["nobody"]["id"])) == []

from marshmallow import EXCLUDE, fields, validate

from film_catalog.models import Film
from film_catalog.schemas import ma, validate_ids, validate_not_blank


class FilmSchema(ma.SQLAlchemySchema):
    class Meta:
        model = Film
        unknown = EXCLUDE   # clients may send back id, createdAt, _links...

    id = ma.auto_field(dump_only=True)
    name = fields.String(
        required=True,
        validate=[validate_not_blank, validate.Length(max=255, error="Name cannot be longer than 255 characters.")]
    )

    # loaded as a list of ids, dumped from the related actors
    actor_ids = fields.Method("dump_actor_ids", deserialize="load_actor_ids", data_key="actorIds")
    actor_descriptions = fields.Method("dump_actor_descriptions", dump_only=True, data_key="actorDescriptions")

    created_at = ma.auto_field(dump_only=True, data_key="createdAt")
    updated_at = ma.auto_field(dump_only=True, data_key="updatedAt")

    def dump_actor_ids(self, film):
        return [actor.id for actor in film.actors]

    def dump_actor_descriptions(self, film):
        return [actor.description for actor in film.actors]

    def load_actor_ids(self, value):
        return validate_ids(value)


class FilmStatsSchema(ma.Schema):
    total_count = fields.Int(data_key="totalCount")
    latest_films = fields.List(fields.Nested(FilmSchema), data_key="latestFilms")


film_schema = FilmSchema()
films_schema = FilmSchema(many=True)
film_stats_schema = FilmStatsSchema()

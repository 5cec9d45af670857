from marshmallow import EXCLUDE, fields, validate

from film_catalog.models import Actor
from film_catalog.schemas import ma, validate_ids, validate_not_blank


class ActorSchema(ma.SQLAlchemySchema):
    class Meta:
        model = Actor
        unknown = EXCLUDE

    id = ma.auto_field(dump_only=True)
    description = fields.String(
        required=True,
        validate=[
            validate_not_blank,
            validate.Length(max=500, error="Description cannot be longer than 500 characters.")
        ]
    )

    film_ids = fields.Method("dump_film_ids", deserialize="load_film_ids", data_key="filmIds")
    film_names = fields.Method("dump_film_names", dump_only=True, data_key="filmNames")

    created_at = ma.auto_field(dump_only=True, data_key="createdAt")
    updated_at = ma.auto_field(dump_only=True, data_key="updatedAt")

    def dump_film_ids(self, actor):
        return [film.id for film in actor.films]

    def dump_film_names(self, actor):
        return [film.name for film in actor.films]

    def load_film_ids(self, value):
        return validate_ids(value)


class ActorStatsSchema(ma.Schema):
    total_count = fields.Int(data_key="totalCount")
    most_active_actors = fields.List(fields.Nested(ActorSchema), data_key="mostActiveActors")
    actors_without_films_count = fields.Int(data_key="actorsWithoutFilmsCount")


# instantiate
actor_schema = ActorSchema()
actors_schema = ActorSchema(many=True)
actor_stats_schema = ActorStatsSchema()

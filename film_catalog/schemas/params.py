from marshmallow import EXCLUDE, ValidationError, fields, validate

from film_catalog.schemas import ma


class IdList(fields.Field):
    """Ids from repeated query params (``?ids=1&ids=2``) or a comma list (``?ids=1,2``)."""

    def _deserialize(self, value, attr, data, **kwargs):
        raw = value if isinstance(value, list) else [value]
        ids = []
        for item in raw:
            for part in str(item).split(","):
                part = part.strip()
                if not part:
                    continue
                try:
                    entity_id = int(part)
                except ValueError as err:
                    raise ValidationError(f"'{part}' is not a valid id.") from err
                if entity_id < 1:
                    raise ValidationError(f"'{part}' is not a valid id.")
                ids.append(entity_id)
        return ids


class QueryArgsSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    def load_args(self, args):
        """Load a werkzeug MultiDict, keeping repeated keys as lists."""
        data = {}
        for key in args:
            values = args.getlist(key)
            data[key] = values if len(values) > 1 else values[0]
        return self.load(data)


class PageArgsSchema(QueryArgsSchema):
    page = fields.Int(load_default=0, validate=validate.Range(min=0))
    size = fields.Int(load_default=None, validate=validate.Range(min=1))
    sort_by = fields.String(load_default="id", data_key="sortBy")
    sort_dir = fields.String(load_default="asc", data_key="sortDir")


class FilmFilterArgsSchema(QueryArgsSchema):
    name = fields.String(load_default=None)
    actor_ids = IdList(load_default=None, data_key="actorIds")
    actor_description = fields.String(load_default=None, data_key="actorDescription")
    min_actors = fields.Int(load_default=None, data_key="minActors")
    max_actors = fields.Int(load_default=None, data_key="maxActors")
    created_after = fields.DateTime(load_default=None, data_key="createdAfter")
    created_before = fields.DateTime(load_default=None, data_key="createdBefore")


class FilmPageArgsSchema(FilmFilterArgsSchema, PageArgsSchema):
    pass


class ActorFilterArgsSchema(QueryArgsSchema):
    description = fields.String(load_default=None)
    film_ids = IdList(load_default=None, data_key="filmIds")
    film_name = fields.String(load_default=None, data_key="filmName")
    min_films = fields.Int(load_default=None, data_key="minFilms")
    max_films = fields.Int(load_default=None, data_key="maxFilms")
    keywords = fields.String(load_default=None)
    created_after = fields.DateTime(load_default=None, data_key="createdAfter")
    created_before = fields.DateTime(load_default=None, data_key="createdBefore")


class ActorPageArgsSchema(ActorFilterArgsSchema, PageArgsSchema):
    pass


class LimitArgsSchema(QueryArgsSchema):
    limit = fields.Int(load_default=10, validate=validate.Range(min=0))


film_filter_args = FilmFilterArgsSchema()
film_page_args = FilmPageArgsSchema()
actor_filter_args = ActorFilterArgsSchema()
actor_page_args = ActorPageArgsSchema()
limit_args = LimitArgsSchema()

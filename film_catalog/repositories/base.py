import math

from sqlalchemy.orm import selectinload

from film_catalog.errors import InvalidArgument, ResourceNotFound
from film_catalog.models import db


class PageRequest:
    """Zero-based page index, page size and sort order."""

    def __init__(self, page=0, size=10, sort_by="id", sort_dir="asc"):
        if page < 0:
            raise InvalidArgument("Page index must not be negative")
        if size < 1:
            raise InvalidArgument("Page size must be at least 1")
        self.page = page
        self.size = size
        self.sort_by = sort_by or "id"
        self.sort_dir = "desc" if (sort_dir or "").lower() == "desc" else "asc"

    @property
    def offset(self):
        return self.page * self.size

    def __repr__(self):
        return f"<PageRequest page={self.page} size={self.size} sort={self.sort_by},{self.sort_dir}>"


class Page:
    def __init__(self, items, request, total_elements):
        self.items = items
        self.request = request
        self.total_elements = total_elements

    @property
    def page(self):
        return self.request.page

    @property
    def size(self):
        return self.request.size

    @property
    def total_pages(self):
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self):
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self):
        return self.page > 0


class Repository:
    """Data access for one mapped entity.

    Subclasses set ``model``, the name of its related collection and the
    natural-key attribute that must be unique ignoring case.
    """
    model = None
    related = None
    natural_key = None

    @property
    def query(self):
        return self.model.query

    def get(self, entity_id):
        return db.session.get(self.model, entity_id)

    def get_with_related(self, entity_id):
        return db.session.get(
            self.model,
            entity_id,
            options=[selectinload(getattr(self.model, self.related))]
        )

    def find_all(self, spec=None):
        query = self.query
        if spec is not None:
            query = spec.apply(query, self.model)
        return query.order_by(self.model.id).all()

    def find_all_with_related(self):
        return (
            self.query
            .options(selectinload(getattr(self.model, self.related)))
            .order_by(self.model.id)
            .all()
        )

    def find_all_by_id(self, ids):
        if not ids:
            return []
        return self.query.filter(self.model.id.in_(ids)).all()

    def resolve_ids(self, ids):
        """Load every entity in ``ids`` or fail naming the ids that do not exist."""
        wanted = set(ids)
        found = self.find_all_by_id(wanted)
        if len(found) != len(wanted):
            missing = wanted - {entity.id for entity in found}
            raise ResourceNotFound.for_multiple(self.model.__name__, missing)
        return found

    def find_page(self, spec, page_request):
        query = self.query
        if spec is not None:
            query = spec.apply(query, self.model)

        total = query.count()
        items = (
            query.order_by(*self._ordering(page_request))
            .limit(page_request.size)
            .offset(page_request.offset)
            .all()
        )
        return Page(items, page_request, total)

    def _ordering(self, page_request):
        attr = self.model.SORT_FIELDS.get(page_request.sort_by)
        if attr is None:
            raise InvalidArgument(
                f"Cannot sort by '{page_request.sort_by}'. "
                f"Allowed: {', '.join(sorted(self.model.SORT_FIELDS))}"
            )
        column = getattr(self.model, attr)
        # id breaks ties so asc and desc are exact mirrors
        if page_request.sort_dir == "desc":
            return [column.desc(), self.model.id.desc()]
        return [column.asc(), self.model.id.asc()]

    def exists_by_natural_key(self, value, exclude_id=None):
        column = getattr(self.model, self.natural_key)
        query = self.query.filter(db.func.lower(column) == db.func.lower(value))
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.with_entities(self.model.id).first() is not None

    def count(self):
        return self.query.count()

    def save(self, entity):
        db.session.add(entity)
        db.session.flush()
        return entity

    def delete(self, entity):
        db.session.delete(entity)
        db.session.flush()

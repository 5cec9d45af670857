"""Composable, optional query constraints.

A ``Specification`` wraps a function that takes the mapped entity class and
returns either a SQL clause or ``None``. ``None`` means "no constraint": it is
dropped when specifications are combined, and a query filtered by an empty
specification is the unfiltered query.
"""
from sqlalchemy import and_, or_, func


class Specification:
    def __init__(self, build=None):
        self._build = build

    @classmethod
    def where(cls, spec=None):
        if spec is None:
            return cls()
        return spec

    def to_clause(self, model):
        if self._build is None:
            return None
        return self._build(model)

    def and_(self, other):
        return all_of(self, other)

    def or_(self, other):
        return any_of(self, other)

    __and__ = and_
    __or__ = or_

    def apply(self, query, model):
        clause = self.to_clause(model)
        if clause is None:
            return query
        return query.filter(clause)


def _combine(operator, specs):
    specs = [s for s in specs if s is not None]

    def build(model):
        clauses = [c for c in (s.to_clause(model) for s in specs) if c is not None]
        if not clauses:
            return None
        if len(clauses) == 1:
            return clauses[0]
        return operator(*clauses)

    return Specification(build)


def all_of(*specs):
    """Conjunction; absent parts are ignored."""
    return _combine(and_, specs)


def any_of(*specs):
    """Disjunction; absent parts are ignored, like an unspecified filter."""
    return _combine(or_, specs)


def is_blank(value):
    return value is None or not str(value).strip()


def _normalize(value):
    return value.strip().lower()


# field factories

def field_contains(attr, value):
    """Case-insensitive substring match on ``attr``."""
    def build(model):
        if is_blank(value):
            return None
        return func.lower(getattr(model, attr)).contains(_normalize(value), autoescape=True)
    return Specification(build)


def field_equals_ignore_case(attr, value):
    def build(model):
        if is_blank(value):
            return None
        return func.lower(getattr(model, attr)) == _normalize(value)
    return Specification(build)


def keywords_in(attr, keywords):
    """Every whitespace-separated word must occur in ``attr``."""
    if is_blank(keywords):
        return Specification()
    return all_of(*(field_contains(attr, word) for word in keywords.split()))


def has_id(entity_id):
    def build(model):
        if entity_id is None:
            return None
        return model.id == entity_id
    return Specification(build)


def has_id_in(ids):
    def build(model):
        if not ids:
            return None
        return model.id.in_(list(ids))
    return Specification(build)


def created_after(moment):
    def build(model):
        if moment is None:
            return None
        return model.created_at >= moment
    return Specification(build)


def created_before(moment):
    def build(model):
        if moment is None:
            return None
        return model.created_at <= moment
    return Specification(build)


def created_between(start, end):
    def build(model):
        if start is None and end is None:
            return None
        if start is None:
            return model.created_at <= end
        if end is None:
            return model.created_at >= start
        return model.created_at.between(start, end)
    return Specification(build)


def updated_after(moment):
    def build(model):
        if moment is None:
            return None
        return model.updated_at >= moment
    return Specification(build)


def count_greater_than(count_expr, minimum):
    """``count_expr`` maps the model to a scalar relation-count subquery."""
    def build(model):
        if minimum is None or minimum < 0:
            return None
        return count_expr(model) > minimum
    return Specification(build)


def count_less_than(count_expr, maximum):
    def build(model):
        if maximum is None or maximum < 0:
            return None
        return count_expr(model) < maximum
    return Specification(build)


def count_equals(count_expr, count):
    def build(model):
        if count is None or count < 0:
            return None
        return count_expr(model) == count
    return Specification(build)

from film_catalog.models import db, film_actor, IdentityMixin, TimestampMixin


class Film(IdentityMixin, TimestampMixin, db.Model):
    __tablename__ = "filmovi"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column("naziv", db.String(255), nullable=False)

    actors = db.relationship(
        "Actor",
        secondary=film_actor,
        back_populates="films",
        order_by="Actor.id",
        passive_deletes=True
    )

    # public sort key -> mapped attribute
    SORT_FIELDS = {
        "id": "id",
        "name": "name",
        "createdAt": "created_at",
        "created_at": "created_at",
        "updatedAt": "updated_at",
        "updated_at": "updated_at",
    }

    @classmethod
    def actor_count(cls):
        return (
            db.select(db.func.count(film_actor.c.glumac_id))
            .where(film_actor.c.film_id == cls.id)
            .scalar_subquery()
        )

    def add_actor(self, actor):
        if actor not in self.actors:
            self.actors.append(actor)   # back_populates updates actor.films
            self.touch()
            actor.touch()

    def remove_actor(self, actor):
        if actor in self.actors:
            self.actors.remove(actor)
            self.touch()
            actor.touch()

    def __repr__(self):
        return f"<Film {self.id}:{self.name}>"


# case-insensitive uniqueness of the title
db.Index("ux_filmovi_naziv_lower", db.func.lower(Film.name), unique=True)

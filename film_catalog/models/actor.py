from film_catalog.models import db, film_actor, IdentityMixin, TimestampMixin


class Actor(IdentityMixin, TimestampMixin, db.Model):
    __tablename__ = "glumci"

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column("opis", db.String(500), nullable=False)

    films = db.relationship(
        "Film",
        secondary=film_actor,
        back_populates="actors",
        order_by="Film.id",
        passive_deletes=True
    )

    SORT_FIELDS = {
        "id": "id",
        "description": "description",
        "createdAt": "created_at",
        "created_at": "created_at",
        "updatedAt": "updated_at",
        "updated_at": "updated_at",
    }

    @classmethod
    def film_count(cls):
        return (
            db.select(db.func.count(film_actor.c.film_id))
            .where(film_actor.c.glumac_id == cls.id)
            .scalar_subquery()
        )

    def add_film(self, film):
        film.add_actor(self)

    def remove_film(self, film):
        film.remove_actor(self)

    def __repr__(self):
        return f"<Actor {self.id}:{self.description}>"


db.Index("ux_glumci_opis_lower", db.func.lower(Actor.description), unique=True)

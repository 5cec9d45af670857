# film_catalog/models/film_actor.py
from film_catalog.models import db

# composite key keeps a film/actor pair from being linked twice
film_actor = db.Table(
    "film_glumac",
    db.Column("film_id", db.Integer, db.ForeignKey("filmovi.id", ondelete="CASCADE"), primary_key=True),
    db.Column("glumac_id", db.Integer, db.ForeignKey("glumci.id", ondelete="CASCADE"), primary_key=True),
)

import logging

import click
from flask import Flask
from flask.cli import with_appcontext

from film_catalog.config import config
from film_catalog.errors import register_error_handlers
from film_catalog.models import db
from film_catalog.routes import routes
from film_catalog.schemas import ma


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or config)
    app.json.sort_keys = False

    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger(__name__).setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    ma.init_app(app)

    app.register_blueprint(routes)
    register_error_handlers(app)
    app.cli.add_command(init_db_command)

    return app


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop existing tables first.")
@with_appcontext
def init_db_command(drop):
    """Create the catalog tables."""
    if drop:
        db.drop_all()
    db.create_all()
    click.echo("Initialized the database.")

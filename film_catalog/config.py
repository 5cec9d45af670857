import os

from dotenv import load_dotenv

load_dotenv()


class Config(object):
    TESTING = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # paginated endpoints
    DEFAULT_PAGE_SIZE = 10
    # number of entries shown in /stats
    STATS_LIMIT = 5


class ProdConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('PROD_DATABASE_URI')


class DevConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DEV_DATABASE_URI', 'sqlite:///film_catalog.db')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    LOG_LEVEL = 'WARNING'


def config_for_env(env=None):
    match env if env is not None else os.getenv('ENV'):
        case 'PRODUCTION':
            return ProdConfig
        case 'TESTING':
            return TestConfig
        case _:
            return DevConfig


config = config_for_env()

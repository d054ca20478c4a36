# config.py - application settings read from the environment
# values can be kept in a .env file next to app.py

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'boutique-dev-key')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///boutique.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')  # console only when unset

    # optional demo account created by `python app.py --demo`
    DEMO_EMAIL = os.environ.get('DEMO_EMAIL', 'demo@boutique.local')
    DEMO_PASSWORD = os.environ.get('DEMO_PASSWORD', 'demo1234')

    TESTING = False


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    LOG_LEVEL = 'DEBUG'
    LOG_FILE = None

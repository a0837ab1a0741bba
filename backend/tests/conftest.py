import os, sys, pytest
# Ensure the backend directory is on path so 'routedoc' and 'scripts' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from flask import Flask
from routedoc import OpenApiGenerator, OpenApiSettings
from routedoc.web import register_openapi_route
from tests.api_fixtures import build_document


@pytest.fixture()
def settings():
    return OpenApiSettings()


@pytest.fixture()
def generator(settings):
    # fresh build-phase state per test
    return OpenApiGenerator(settings)


@pytest.fixture()
def app_instance():
    app = Flask(__name__)
    app.config.update({'OPENAPI_JSON_PATH': '/openapi.json'})
    register_openapi_route(app, build_document())
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()

import json

import pytest

from backend.app import create_app
from backend.config import Settings
from backend.facts_store import FactStore

TOKEN = "s3cret"


def write_facts(path, facts):
    path.write_text(json.dumps([{"fact": f} for f in facts]), encoding="utf-8")


@pytest.fixture
def facts_path(tmp_path):
    p = tmp_path / "facts.json"
    write_facts(p, ["Dogs have three eyelids", "Puppies are born deaf", "Basenjis do not bark"])
    return p


@pytest.fixture
def store(facts_path):
    return FactStore(facts_path)


@pytest.fixture
def app(facts_path):
    settings = Settings(facts_path=facts_path, x_token=TOKEN, allowed_origins=["http://localhost:3000"])
    return create_app(settings)


@pytest.fixture
def client(app):
    return app.test_client()

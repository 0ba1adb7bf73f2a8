import pytest

from lang_translation_lib.config import ServiceConfig

from tests.helpers import ENDPOINT


@pytest.fixture
def config():
    return ServiceConfig(endpoint_url=ENDPOINT, username="user", password="secret")

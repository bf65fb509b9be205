import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트의 모듈을 import 할 수 있도록 경로 추가
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from editor_events import EventLoop, EventRouter  # noqa: E402
from dom_utils import parse_html  # noqa: E402


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_router(clock):
    def factory(markup):
        document = parse_html(markup)
        return EventRouter(document, loop=EventLoop(clock=clock))
    return factory


@pytest.fixture
def translations_file(tmp_path):
    return str(tmp_path / 'translations.json')


@pytest.fixture
def client(translations_file):
    from app import app

    app.config['TESTING'] = True
    previous = app.config['TRANSLATIONS_FILE']
    app.config['TRANSLATIONS_FILE'] = translations_file
    with app.test_client() as test_client:
        yield test_client
    app.config['TRANSLATIONS_FILE'] = previous

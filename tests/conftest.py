"""Shared fixtures for fhe_rps tests."""

import logging

import pytest
from phe import paillier

from fhe_rps._fhe.paillier import PaillierBackend
from fhe_rps._fhe.shadow import PlaintextShadowBackend
from fhe_rps._game.controller import GameController
from fhe_rps._game.events import EventBus


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() side effects between tests."""
    yield
    pkg_logger = logging.getLogger("fhe_rps")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def shadow():
    return PlaintextShadowBackend()


@pytest.fixture(scope="session")
def paillier_keypair():
    return paillier.generate_paillier_keypair(n_length=512)


@pytest.fixture
def paillier_backend(paillier_keypair):
    return PaillierBackend(keypair=paillier_keypair)


class EventRecorder:
    """Subscriber that keeps every (event, payload) it receives."""

    def __init__(self):
        self.received = []

    def __call__(self, event, payload):
        self.received.append((event, dict(payload)))

    @property
    def events(self):
        return [event for event, _ in self.received]


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def game(shadow, recorder):
    bus = EventBus()
    bus.subscribe_all(recorder)
    return GameController(shadow, events=bus)


@pytest.fixture
def joined_game(game):
    """Alice started, Bob joined, nobody submitted."""
    game.start("alice")
    game.join("bob")
    return game

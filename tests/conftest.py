"""Shared fixtures: an offline backend wired through the real client and controller."""

import pytest

from landmark_lens.adapters.genai.mock_backend import MockBackend
from landmark_lens.orchestrator.contracts import SelectedFile
from landmark_lens.orchestrator.state_machine import ViewController
from landmark_lens.services.recognition import RecognitionClient
from landmark_lens.services.status_store import StatusStore


@pytest.fixture
def status():
    return StatusStore()


@pytest.fixture
def backend(status):
    return MockBackend(status)


@pytest.fixture
def client(backend, status):
    return RecognitionClient(backend, status)


@pytest.fixture
def controller(client, status):
    return ViewController(client, status)


@pytest.fixture
def transitions(controller):
    """Every state the controller publishes, in order."""
    seen = []
    controller.subscribe(seen.append)
    return seen


@pytest.fixture
def jpeg_file():
    return SelectedFile(name="tower.jpg", content_type="image/jpeg", data=b"\xff\xd8\xff\xe0fake-jpeg")

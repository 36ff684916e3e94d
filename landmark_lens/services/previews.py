"""
Preview handles for uploaded images, served at /preview/<token>.

The page shows the photo it just uploaded from here instead of receiving the
bytes back inline. Handles live until released; the API releases the current
one on reset and when a new photo replaces it.
"""
import uuid

from landmark_lens.orchestrator.contracts import SelectedFile
from landmark_lens.orchestrator.state_machine import transmit_mime

PREFIX = "/preview/"


class PreviewRegistry:
    def __init__(self, status_store):
        self.status = status_store
        self._items: dict[str, tuple[bytes, str]] = {}

    def create(self, file: SelectedFile) -> str:
        token = uuid.uuid4().hex
        self._items[token] = (file.data, transmit_mime(file))
        self.status.log(f"preview: created {token[:8]} ({len(file.data)} bytes)")
        return PREFIX + token

    def get(self, token: str) -> tuple[bytes, str] | None:
        return self._items.get(token)

    def release(self, uri: str | None):
        if not uri or not uri.startswith(PREFIX):
            return
        token = uri[len(PREFIX):]
        if self._items.pop(token, None) is not None:
            self.status.log(f"preview: released {token[:8]}")

    def __len__(self):
        return len(self._items)

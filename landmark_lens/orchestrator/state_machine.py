import base64
from dataclasses import asdict
from typing import Callable

from landmark_lens.orchestrator.contracts import (
    LANGUAGES, ApplicationState, DirectionsState, Error, Initial, Loading, Result, SelectedFile,
)
from landmark_lens.orchestrator.errors import DirectionsFailure, InvalidInput, LensError
from landmark_lens.orchestrator.ui_strings import UI_STRINGS

RAW_EXTENSIONS = frozenset({"dng", "cr2", "cr3", "nef", "arw", "heic"})
FALLBACK_MIME = "image/jpeg"


def is_accepted(file: SelectedFile) -> bool:
    if not file.data:
        return False
    if (file.content_type or "").startswith("image/"):
        return True
    name = file.name or ""
    ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
    return ext in RAW_EXTENSIONS


def transmit_mime(file: SelectedFile) -> str:
    ct = file.content_type or ""
    return ct if ct.startswith("image/") else FALLBACK_MIME


def encode_image(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def data_uri(file: SelectedFile) -> str:
    return f"data:{transmit_mime(file)};base64,{encode_image(file.data)}"


class ViewController:
    """
    Owns the page state machine:

      Initial -> Loading(analyzing) -> Loading(retrieving history) -> Result | Error
      Result  -> set_language()     -> Result (re-fetched) | Error
      Result  -> submit_directions() -> directions stored, or logged failure (non-fatal)
      any     -> reset()            -> Initial

    State objects are replaced wholesale; every replacement is pushed to the
    subscribed observers. A result that resolves after reset() or after a newer
    upload is dropped.
    """

    def __init__(self, client, status_store, language: str = "en",
                 preview_factory: Callable[[SelectedFile], str] | None = None):
        if language not in LANGUAGES:
            raise InvalidInput(f"unsupported language {language!r}")
        self.client = client
        self.status = status_store
        self.preview_factory = preview_factory or data_uri
        self.language = language
        self.translating = False
        self.directions = DirectionsState()
        self.file_input: SelectedFile | None = None
        self._state: ApplicationState = Initial()
        self._observers: list[Callable[[ApplicationState], None]] = []
        self._generation = 0

    # ---- observation ----

    @property
    def state(self) -> ApplicationState:
        return self._state

    @property
    def ui_text(self) -> dict:
        return UI_STRINGS[self.language]

    def subscribe(self, callback: Callable[[ApplicationState], None]) -> Callable[[], None]:
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)
        return unsubscribe

    def _set_state(self, new_state: ApplicationState):
        self._state = new_state
        self.status.log(f"state -> {new_state.status}")
        for cb in list(self._observers):
            cb(new_state)

    def snapshot(self) -> dict:
        return {
            "language": self.language,
            "translating": self.translating,
            "state": asdict(self._state),
            "directions": asdict(self.directions),
        }

    # ---- landmark flow ----

    async def on_file_selected(self, file: SelectedFile | None,
                               preview_factory: Callable[[SelectedFile], str] | None = None):
        if file is None:
            return

        self._generation += 1
        generation = self._generation
        self.directions = DirectionsState()

        if not is_accepted(file):
            self.status.log(f"upload rejected: name={file.name!r} type={file.content_type!r}")
            self._set_state(Error(message=self.ui_text["error"]["invalidFile"]))
            return

        self.file_input = file
        mime_type = transmit_mime(file)
        image_encoded = encode_image(file.data)
        image_uri = (preview_factory or self.preview_factory)(file)
        self.status.log(f"upload accepted: name={file.name!r} mime={mime_type} bytes={len(file.data)}")

        self._set_state(Loading(message=self.ui_text["loading"]["analyzing"]))
        self.status.set_busy(True)
        try:
            self._set_state(Loading(message=self.ui_text["loading"]["generatingInfo"]))
            landmark = await self.client.get_landmark_info(image_encoded, mime_type, self.language)
        except LensError:
            if generation == self._generation:
                self._set_state(Error(message=self.ui_text["error"]["recognitionFailed"]))
            return
        finally:
            self.status.set_busy(False)

        if generation != self._generation:
            self.status.log("landmark result dropped: superseded")
            return
        self._set_state(Result(landmark=landmark, image_uri=image_uri,
                               image_encoded=image_encoded, mime_type=mime_type))

    # ---- language ----

    async def set_language(self, language: str):
        if language not in LANGUAGES:
            raise InvalidInput(f"unsupported language {language!r}")
        if language == self.language:
            return

        self.language = language
        self.status.log(f"language -> {language}")

        current = self._state
        if not isinstance(current, Result):
            return

        generation = self._generation
        self.translating = True
        try:
            landmark = await self.client.get_landmark_info(current.image_encoded, current.mime_type, language)
            if generation != self._generation:
                self.status.log("translation dropped: superseded")
                return
            self._set_state(Result(landmark=landmark, image_uri=current.image_uri,
                                   image_encoded=current.image_encoded, mime_type=current.mime_type))

            origin = self.directions.full_address.strip()
            if self.directions.info is not None and origin:
                info = await self.client.get_directions(landmark.name, origin, language)
                if generation == self._generation:
                    self.directions.info = info
        except LensError:
            if generation == self._generation:
                self._set_state(Error(message=self.ui_text["error"]["translationFailed"]))
        finally:
            self.translating = False

    # ---- directions flow ----

    def show_directions_form(self):
        self.directions.form_visible = True

    def hide_directions_form(self):
        self.directions.form_visible = False

    def clear_directions(self):
        self.directions.info = None

    async def submit_directions(self, full_address: str | None = None):
        if full_address is not None:
            self.directions.full_address = full_address

        current = self._state
        origin = self.directions.full_address.strip()
        if not origin or not isinstance(current, Result):
            self.status.log("directions: ignored (no result or empty address)")
            return

        generation = self._generation
        self.directions.loading = True
        self.directions.info = None
        try:
            info = await self.client.get_directions(current.landmark.name, origin, self.language)
        except DirectionsFailure as e:
            # non-fatal: main result stays on screen, form stays open for a re-submit
            self.status.log(f"directions: could not get directions: {e}")
            return
        finally:
            self.directions.loading = False

        if generation != self._generation:
            self.status.log("directions dropped: superseded")
            return
        self.directions.info = info
        self.directions.form_visible = False

    # ---- reset ----

    def reset(self):
        self._generation += 1
        self.directions = DirectionsState()
        self.file_input = None
        self.translating = False
        self._set_state(Initial())

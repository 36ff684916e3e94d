import base64
import binascii

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from landmark_lens.services.models import (
    UploadRequest, LanguageRequest, DirectionsRequest, DirectionsFormRequest,
    SnapshotResponse, StatusResponse, HealthResponse,
)
from landmark_lens.services.config import Settings, load_settings
from landmark_lens.services.status_store import StatusStore
from landmark_lens.services.previews import PreviewRegistry
from landmark_lens.services.recognition import RecognitionClient
from landmark_lens.orchestrator.contracts import LANGUAGES, Result, SelectedFile
from landmark_lens.orchestrator.state_machine import ViewController
from landmark_lens.orchestrator.ui_strings import UI_STRINGS


def build_backend(settings: Settings, status: StatusStore):
    # GENAI_ADAPTER: gemini | mock  (default: gemini)
    if settings.genai_adapter == "mock":
        from landmark_lens.adapters.genai.mock_backend import MockBackend
        return MockBackend(status)
    from landmark_lens.adapters.genai.gemini_backend import GeminiBackend
    return GeminiBackend(status, api_key=settings.api_key, model=settings.gemini_model)


def create_app(settings: Settings | None = None, backend=None, status: StatusStore | None = None) -> FastAPI:
    """Wire settings -> backend -> recognition client -> controller behind a FastAPI app.

    Raises InitializationFailure when no API key is configured.
    """
    settings = settings or load_settings()
    status = status or StatusStore()
    backend = backend or build_backend(settings, status)
    status.log(f"genai adapter: {type(backend).__name__}")

    previews = PreviewRegistry(status)
    client = RecognitionClient(backend, status)
    controller = ViewController(client, status, language=settings.default_language,
                                preview_factory=previews.create)

    app = FastAPI(title="landmark-lens api")
    app.state.controller = controller
    app.state.previews = previews
    app.state.status = status
    app.state.backend = backend

    def snapshot() -> SnapshotResponse:
        return SnapshotResponse(**controller.snapshot())

    def release_current_preview():
        current = controller.state
        if isinstance(current, Result):
            previews.release(current.image_uri)

    @app.get("/state", response_model=SnapshotResponse)
    async def get_state():
        return snapshot()

    @app.post("/upload", response_model=SnapshotResponse)
    async def upload(req: UploadRequest):
        try:
            data = base64.b64decode(req.data, validate=True)
        except (binascii.Error, ValueError) as e:
            status.log(f"UPLOAD decode error: {e}")
            data = b""
        # an empty payload is rejected by the controller with the invalid-file message
        file = SelectedFile(name=req.filename, content_type=req.content_type, data=data)
        release_current_preview()
        status.log(f"UPLOAD {req.filename!r} type={req.content_type!r}")

        created: list[str] = []

        def create_preview(f: SelectedFile) -> str:
            uri = previews.create(f)
            created.append(uri)
            return uri

        await controller.on_file_selected(file, preview_factory=create_preview)
        # a preview only outlives this request if its result is what the page now shows
        current = controller.state
        for uri in created:
            if not (isinstance(current, Result) and current.image_uri == uri):
                previews.release(uri)
        return snapshot()

    @app.post("/language", response_model=SnapshotResponse)
    async def set_language(req: LanguageRequest):
        await controller.set_language(req.language)
        return snapshot()

    @app.post("/directions/form", response_model=SnapshotResponse)
    async def directions_form(req: DirectionsFormRequest):
        if req.visible:
            controller.show_directions_form()
        else:
            controller.hide_directions_form()
        return snapshot()

    @app.post("/directions", response_model=SnapshotResponse)
    async def submit_directions(req: DirectionsRequest):
        await controller.submit_directions(req.full_address)
        return snapshot()

    @app.delete("/directions", response_model=SnapshotResponse)
    async def clear_directions():
        controller.clear_directions()
        return snapshot()

    @app.post("/reset", response_model=SnapshotResponse)
    async def reset():
        release_current_preview()
        controller.reset()
        return snapshot()

    @app.get("/strings/{language}")
    async def strings(language: str):
        if language not in LANGUAGES:
            raise HTTPException(status_code=404, detail=f"unknown language {language!r}")
        return UI_STRINGS[language]

    @app.get("/preview/{token}")
    async def preview(token: str):
        item = previews.get(token)
        if item is None:
            raise HTTPException(status_code=404, detail="preview released or unknown")
        data, mime_type = item
        return Response(content=data, media_type=mime_type)

    @app.get("/status", response_model=StatusResponse)
    async def get_status():
        return StatusResponse(busy=status.busy, last_error=status.last_error, logs=status.logs)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(
            ok=True,
            genai_adapter=getattr(backend, "name", type(backend).__name__),
            model=getattr(backend, "model", ""),
            language=controller.language,
        )

    return app

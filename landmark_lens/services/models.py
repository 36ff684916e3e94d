from pydantic import BaseModel, Field
from typing import Literal, Optional

class UploadRequest(BaseModel):
    filename: str
    content_type: str = ""
    data: str  # base64 file bytes, as read by the browser

class LanguageRequest(BaseModel):
    language: Literal["en", "id"]

class DirectionsRequest(BaseModel):
    full_address: str = Field(min_length=1)

class DirectionsFormRequest(BaseModel):
    visible: bool

class SourceOut(BaseModel):
    title: str
    uri: str

class LandmarkOut(BaseModel):
    name: str
    history: str
    sources: list[SourceOut] = []

class StateOut(BaseModel):
    status: Literal["initial", "loading", "result", "error"]
    message: Optional[str] = None          # loading / error
    landmark: Optional[LandmarkOut] = None  # result
    image_uri: Optional[str] = None
    mime_type: Optional[str] = None
    # image_encoded stays server-side; the page shows the preview via image_uri

class DirectionsOut(BaseModel):
    directions: str
    map_url: str

class DirectionsStateOut(BaseModel):
    info: Optional[DirectionsOut] = None
    form_visible: bool = False
    loading: bool = False
    full_address: str = ""

class SnapshotResponse(BaseModel):
    language: Literal["en", "id"]
    translating: bool
    state: StateOut
    directions: DirectionsStateOut

class StatusResponse(BaseModel):
    busy: bool
    last_error: Optional[str] = None
    logs: list[str]

class HealthResponse(BaseModel):
    ok: bool
    genai_adapter: str
    model: str
    language: Literal["en", "id"]

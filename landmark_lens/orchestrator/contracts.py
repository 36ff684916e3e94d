from dataclasses import dataclass, field
from typing import Optional, Literal, Union

Language = Literal["en", "id"]
LANGUAGES: tuple[str, ...] = ("en", "id")


@dataclass(frozen=True)
class Source:
    title: str
    uri: str


@dataclass(frozen=True)
class LandmarkInfo:
    name: str
    history: str
    sources: tuple[Source, ...] = ()


@dataclass(frozen=True)
class DirectionsInfo:
    directions: str            # numbered steps, may span several lines
    map_url: str


@dataclass(frozen=True)
class SelectedFile:
    name: str
    content_type: str
    data: bytes


@dataclass
class GenerationReply:
    text: str
    # raw {"title": ..., "uri": ...} records from grounding metadata; may be incomplete
    citations: list[dict] = field(default_factory=list)


# ---- application state: exactly one variant is active ----

@dataclass(frozen=True)
class Initial:
    status: Literal["initial"] = "initial"


@dataclass(frozen=True)
class Loading:
    message: str
    status: Literal["loading"] = "loading"


@dataclass(frozen=True)
class Result:
    landmark: LandmarkInfo
    image_uri: str             # preview handle shown by the page
    image_encoded: str         # base64 of the original bytes, kept for re-recognition
    mime_type: str
    status: Literal["result"] = "result"


@dataclass(frozen=True)
class Error:
    message: str
    status: Literal["error"] = "error"


ApplicationState = Union[Initial, Loading, Result, Error]


@dataclass
class DirectionsState:
    info: Optional[DirectionsInfo] = None
    form_visible: bool = False
    loading: bool = False
    full_address: str = ""     # the single bound form field (origin)

"""
Recognition client: turns the two domain requests (identify a landmark, route to it)
into prompts for a generation backend and parses the free-text replies.

The model is asked for a fixed plain-text layout:

    NAME: <landmark name>
    HISTORY: <summary, may span lines>

    DIRECTIONS:
    <numbered list>

    MAP_URL: <url>

Callers only ever see RecognitionFailure / DirectionsFailure; the underlying cause
goes to the status log.
"""
import re

from landmark_lens.orchestrator.contracts import DirectionsInfo, LandmarkInfo, Source
from landmark_lens.orchestrator.errors import DirectionsFailure, ParseError, RecognitionFailure

_LANDMARK_PROMPT = {
    "en": (
        "Identify the name of the landmark in this image and provide a historical summary. "
        "Format your response exactly as follows, with no additional text:\n"
        "NAME: [The identified name of the landmark]\n"
        "HISTORY: [A historical summary of the landmark]"
    ),
    "id": (
        "Identifikasi nama landmark dalam gambar ini dan berikan ringkasan sejarahnya. "
        "Format respons Anda secara tepat sebagai berikut, tanpa teks tambahan:\n"
        "NAME: [Nama landmark yang diidentifikasi]\n"
        "HISTORY: [Ringkasan sejarah landmark]"
    ),
}

_DIRECTIONS_PROMPT = {
    "en": (
        "Provide detailed, turn-by-turn driving directions from {origin} to {destination}. "
        "At the end, provide a Google Maps URL for the route. "
        "Format your response exactly as follows:\n"
        "DIRECTIONS:\n"
        "[Numbered list of directions]\n"
        "\n"
        "MAP_URL: [The Google Maps URL]"
    ),
    "id": (
        "Berikan petunjuk arah mengemudi yang detail, belokan demi belokan dari {origin} ke {destination}. "
        "Di akhir, berikan URL Google Maps untuk rute tersebut. "
        "Format respons Anda secara tepat sebagai berikut:\n"
        "DIRECTIONS:\n"
        "[Daftar arah bernomor]\n"
        "\n"
        "MAP_URL: [URL Google Maps]"
    ),
}

# the name may sit on the line after the marker, but never on the HISTORY line
_NAME_RE = re.compile(r"^NAME:\s*(?!HISTORY:)(\S.*)$", re.MULTILINE)
_HISTORY_RE = re.compile(r"^HISTORY:[ \t]*(.*)", re.MULTILINE | re.DOTALL)
# stops at the blank line before MAP_URL (or at MAP_URL itself when the model skips the blank line)
_DIRECTIONS_RE = re.compile(
    r"^DIRECTIONS:[ \t]*\n?(.*?)(?=\n[ \t]*\n[ \t]*MAP_URL:|\n[ \t]*MAP_URL:|\Z)",
    re.MULTILINE | re.DOTALL,
)
_MAP_URL_RE = re.compile(r"^[ \t]*MAP_URL:[ \t]*(.*)$", re.MULTILINE)


def landmark_prompt(language: str) -> str:
    return _LANDMARK_PROMPT.get(language, _LANDMARK_PROMPT["en"])


def directions_prompt(destination: str, origin: str, language: str) -> str:
    template = _DIRECTIONS_PROMPT.get(language, _DIRECTIONS_PROMPT["en"])
    return template.format(origin=origin, destination=destination)


def parse_landmark_text(text: str) -> tuple[str, str]:
    name_match = _NAME_RE.search(text)
    history_match = _HISTORY_RE.search(text)
    if not name_match or not history_match:
        raise ParseError("Could not parse the landmark information from the response.")
    name, history = name_match.group(1).strip(), history_match.group(1).strip()
    if not name or not history:
        raise ParseError("Landmark name or history is empty.")
    return name, history


def parse_directions_text(text: str) -> DirectionsInfo:
    directions_match = _DIRECTIONS_RE.search(text)
    map_url_match = _MAP_URL_RE.search(text)
    if not directions_match or not map_url_match:
        raise ParseError("Could not parse the directions from the response.")
    return DirectionsInfo(
        directions=directions_match.group(1).strip(),
        map_url=map_url_match.group(1).strip(),
    )


def dedupe_sources(citations) -> tuple[Source, ...]:
    """Keep citations with both uri and title; first occurrence of each uri wins."""
    seen = set()
    out = []
    for c in citations or []:
        uri, title = c.get("uri"), c.get("title")
        if not uri or not title or uri in seen:
            continue
        seen.add(uri)
        out.append(Source(title=title, uri=uri))
    return tuple(out)


class RecognitionClient:
    def __init__(self, backend, status_store):
        self.backend = backend
        self.status = status_store

    async def get_landmark_info(self, image_encoded: str, mime_type: str, language: str) -> LandmarkInfo:
        try:
            if not image_encoded:
                raise ValueError("empty image payload")
            reply = await self.backend.generate_landmark(
                image_encoded, mime_type, landmark_prompt(language), enable_search_grounding=True
            )
            name, history = parse_landmark_text(reply.text)
            sources = dedupe_sources(reply.citations)
        except Exception as e:
            self._record(f"recognition: error getting landmark info: {type(e).__name__}: {e}")
            raise RecognitionFailure() from e

        self.status.log(f"recognition: {name!r} lang={language} sources={len(sources)}")
        return LandmarkInfo(name=name, history=history, sources=sources)

    async def get_directions(self, destination: str, origin: str, language: str) -> DirectionsInfo:
        try:
            if not destination.strip() or not origin.strip():
                raise ValueError("destination and origin are required")
            text = await self.backend.generate_directions(directions_prompt(destination, origin, language))
            info = parse_directions_text(text)
        except Exception as e:
            self._record(f"recognition: error fetching directions: {type(e).__name__}: {e}")
            raise DirectionsFailure() from e

        self.status.log(f"recognition: directions to {destination!r} lang={language}")
        return info

    def _record(self, msg: str):
        self.status.last_error = msg
        self.status.log(msg)

"""
Gemini backend on the google-genai SDK.

Landmark requests send the photo inline together with the instruction and turn on
the Google Search tool, so the reply may carry grounding metadata (web citations).
Directions requests are plain text prompts.

Requires API_KEY (or GEMINI_API_KEY) — see landmark_lens/services/config.py.
"""
import base64
import binascii

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from landmark_lens.adapters.genai.base import GenerationBackend
from landmark_lens.orchestrator.contracts import GenerationReply
from landmark_lens.orchestrator.errors import TransportFailure

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiBackend(GenerationBackend):
    name = "gemini"

    def __init__(self, status_store, api_key: str, model: str = DEFAULT_MODEL, client=None):
        self.status = status_store
        self.model = model
        self._client = client or genai.Client(api_key=api_key)
        self.status.log(f"gemini: ready (model={self.model})")

    async def generate_landmark(
        self, image_encoded: str, mime_type: str, prompt: str, enable_search_grounding: bool = True
    ) -> GenerationReply:
        try:
            image_bytes = base64.b64decode(image_encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise TransportFailure(f"image payload is not valid base64: {e}") from e

        config = None
        if enable_search_grounding:
            config = types.GenerateContentConfig(tools=[types.Tool(google_search=types.GoogleSearch())])

        response = await self._generate(
            contents=[types.Part.from_bytes(data=image_bytes, mime_type=mime_type), prompt],
            config=config,
        )
        return GenerationReply(text=response.text or "", citations=self._citations(response))

    async def generate_directions(self, prompt: str) -> str:
        response = await self._generate(contents=prompt)
        return response.text or ""

    async def _generate(self, contents, config=None):
        self.status.log(f"gemini: generate_content model={self.model}")
        try:
            return await self._client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
        except genai_errors.APIError as e:
            raise TransportFailure(f"gemini API error {e.code}: {e.message}") from e
        except httpx.HTTPError as e:
            raise TransportFailure(f"gemini transport error: {e}") from e

    @staticmethod
    def _citations(response) -> list[dict]:
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return []
        metadata = getattr(candidates[0], "grounding_metadata", None)
        chunks = getattr(metadata, "grounding_chunks", None) or []
        out = []
        for chunk in chunks:
            web = getattr(chunk, "web", None)
            if web is None:
                continue
            out.append({"title": getattr(web, "title", None), "uri": getattr(web, "uri", None)})
        return out

from landmark_lens.adapters.genai.base import GenerationBackend
from landmark_lens.orchestrator.contracts import GenerationReply
from landmark_lens.services.recognition import landmark_prompt

MOCK_LANDMARK_TEXT = {
    "en": (
        "NAME: Eiffel Tower\n"
        "HISTORY: Built in 1889 for the Exposition Universelle, the wrought-iron tower\n"
        "was designed by Gustave Eiffel's company and became the symbol of Paris."
    ),
    "id": (
        "NAME: Menara Eiffel\n"
        "HISTORY: Dibangun pada tahun 1889 untuk Exposition Universelle, menara besi tempa ini\n"
        "dirancang oleh perusahaan Gustave Eiffel dan menjadi simbol kota Paris."
    ),
}

MOCK_CITATIONS = [
    {"title": "Eiffel Tower - Wikipedia", "uri": "https://en.wikipedia.org/wiki/Eiffel_Tower"},
    {"title": "Official site", "uri": "https://www.toureiffel.paris/en"},
    {"title": "Eiffel Tower - Wikipedia", "uri": "https://en.wikipedia.org/wiki/Eiffel_Tower"},
]

MOCK_DIRECTIONS_TEXT = (
    "DIRECTIONS:\n"
    "1. Head north on Avenue de Suffren\n"
    "2. Turn right onto Quai Branly\n"
    "3. Arrive at the Eiffel Tower\n"
    "\n"
    "MAP_URL: https://www.google.com/maps/dir/?api=1&destination=Eiffel+Tower"
)


class MockBackend(GenerationBackend):
    """
    Offline backend. Replies with canned Eiffel Tower text, or with scripted
    replies queued by the caller (tests). A queued Exception instance is raised.
    Every call is recorded in .calls.
    """
    name = "mock"
    model = "mock"

    def __init__(self, status_store=None):
        self.status = status_store
        self.calls: list[tuple] = []
        self.landmark_replies: list = []
        self.directions_replies: list = []

    async def generate_landmark(
        self, image_encoded: str, mime_type: str, prompt: str, enable_search_grounding: bool = True
    ) -> GenerationReply:
        self.calls.append(("landmark", mime_type, prompt, enable_search_grounding))
        self._log(f"mock_genai: landmark mime={mime_type} grounding={enable_search_grounding}")
        if self.landmark_replies:
            return self._unwrap(self.landmark_replies.pop(0))
        lang = "id" if prompt == landmark_prompt("id") else "en"
        return GenerationReply(text=MOCK_LANDMARK_TEXT[lang], citations=list(MOCK_CITATIONS))

    async def generate_directions(self, prompt: str) -> str:
        self.calls.append(("directions", prompt))
        self._log("mock_genai: directions")
        if self.directions_replies:
            return self._unwrap(self.directions_replies.pop(0))
        return MOCK_DIRECTIONS_TEXT

    def _unwrap(self, reply):
        if isinstance(reply, Exception):
            raise reply
        return reply

    def _log(self, msg: str):
        if self.status is not None:
            self.status.log(msg)

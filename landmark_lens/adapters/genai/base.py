from landmark_lens.orchestrator.contracts import GenerationReply


class GenerationBackend:
    name = "base"
    model = ""

    async def generate_landmark(
        self, image_encoded: str, mime_type: str, prompt: str, enable_search_grounding: bool = True
    ) -> GenerationReply:
        """Multimodal call: base64 image + instruction -> free text and citations."""
        raise NotImplementedError

    async def generate_directions(self, prompt: str) -> str:
        """Text-only call: instruction -> free text."""
        raise NotImplementedError

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from landmark_lens.orchestrator.contracts import LANGUAGES
from landmark_lens.orchestrator.errors import InitializationFailure

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True)
class Settings:
    api_key: str
    genai_adapter: str = "gemini"     # gemini | mock
    gemini_model: str = "gemini-2.5-flash"
    default_language: str = "en"


def load_settings(env_path: Path | str | None = ENV_PATH) -> Settings:
    """Read settings from landmark_lens/.env and the process environment (which wins).

    A missing API key is fatal: the app must not come up without it.
    """
    if env_path is not None:
        load_dotenv(dotenv_path=env_path, override=False)

    api_key = os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise InitializationFailure("API_KEY environment variable not set")

    adapter = os.getenv("GENAI_ADAPTER", "gemini").lower()
    if adapter not in ("gemini", "mock"):
        raise InitializationFailure(f"unknown GENAI_ADAPTER {adapter!r} (expected gemini or mock)")

    language = os.getenv("DEFAULT_LANGUAGE", "en").lower()
    if language not in LANGUAGES:
        raise InitializationFailure(f"unsupported DEFAULT_LANGUAGE {language!r}")

    return Settings(
        api_key=api_key,
        genai_adapter=adapter,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        default_language=language,
    )

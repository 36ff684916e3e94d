"""Tests for settings loading and startup wiring."""

import pytest

from landmark_lens.adapters.genai.gemini_backend import GeminiBackend
from landmark_lens.adapters.genai.mock_backend import MockBackend
from landmark_lens.orchestrator.errors import InitializationFailure
from landmark_lens.services.api import build_backend, create_app
from landmark_lens.services.config import Settings, load_settings
from landmark_lens.services.status_store import StatusStore


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("API_KEY", "GEMINI_API_KEY", "GENAI_ADAPTER", "GEMINI_MODEL", "DEFAULT_LANGUAGE"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_missing_key_is_fatal(clean_env):
    with pytest.raises(InitializationFailure, match="API_KEY"):
        load_settings(env_path=None)


def test_app_refuses_to_start_without_key(clean_env):
    with pytest.raises(InitializationFailure):
        create_app()


def test_defaults(clean_env):
    clean_env.setenv("API_KEY", "k")
    assert load_settings(env_path=None) == Settings(api_key="k")


def test_gemini_key_alias_and_overrides(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "k2")
    clean_env.setenv("GENAI_ADAPTER", "MOCK")
    clean_env.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    clean_env.setenv("DEFAULT_LANGUAGE", "id")
    s = load_settings(env_path=None)
    assert (s.api_key, s.genai_adapter, s.gemini_model, s.default_language) == ("k2", "mock", "gemini-2.5-pro", "id")


def test_env_file_does_not_override_environment(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("API_KEY=from-file\nGEMINI_MODEL=from-file-model\n")
    clean_env.setenv("API_KEY", "from-env")
    s = load_settings(env_path=env_file)
    assert s.api_key == "from-env"
    assert s.gemini_model == "from-file-model"


@pytest.mark.parametrize("var,value", [("GENAI_ADAPTER", "openai"), ("DEFAULT_LANGUAGE", "fr")])
def test_bad_values_are_fatal(clean_env, var, value):
    clean_env.setenv("API_KEY", "k")
    clean_env.setenv(var, value)
    with pytest.raises(InitializationFailure):
        load_settings(env_path=None)


def test_build_backend():
    status = StatusStore()
    assert isinstance(build_backend(Settings(api_key="k", genai_adapter="mock"), status), MockBackend)
    gemini = build_backend(Settings(api_key="k", gemini_model="gemini-2.5-flash"), status)
    assert isinstance(gemini, GeminiBackend)
    assert gemini.model == "gemini-2.5-flash"
    assert "gemini: ready (model=gemini-2.5-flash)" in status.logs

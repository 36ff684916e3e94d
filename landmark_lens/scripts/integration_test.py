"""
Integration test script — walks the API of a running server and checks responses.

Usage (offline, no Gemini calls):
    API_KEY=dummy GENAI_ADAPTER=mock uvicorn landmark_lens.web.app:create_web_app --factory
    python -m landmark_lens.scripts.integration_test

Against the real backend, drop GENAI_ADAPTER and pass a real photo:
    python -m landmark_lens.scripts.integration_test path/to/photo.jpg
"""

import base64
import sys
from pathlib import Path

import httpx

BASE = "http://localhost:8000"
TIMEOUT = 90.0
# 1x1 transparent PNG
TINY_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
passed = 0
failed = 0


def check(name: str, method: str, path: str, body: dict | None = None, checks: dict | None = None) -> dict:
    global passed, failed
    url = f"{BASE}{path}"
    checks = checks or {}
    try:
        r = httpx.request(method, url, json=body, timeout=TIMEOUT)
        if r.status_code != 200:
            print(f"  FAIL  {name} — HTTP {r.status_code}")
            failed += 1
            return {}

        data = r.json()
        for dotted, expected in checks.items():
            actual = data
            for part in dotted.split("."):
                actual = actual.get(part) if isinstance(actual, dict) else None
            if actual != expected:
                print(f"  FAIL  {name} — {dotted}: expected {expected!r}, got {actual!r}")
                failed += 1
                return data

        print(f"  OK    {name}")
        passed += 1
        return data

    except httpx.ConnectError:
        print(f"  FAIL  {name} — connection refused (is the server running?)")
        failed += 1
    except Exception as e:
        print(f"  FAIL  {name} — {type(e).__name__}: {e}")
        failed += 1
    return {}


def main():
    photo = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    image = photo.read_bytes() if photo else TINY_PNG
    filename = photo.name if photo else "tiny.png"

    print(f"\nIntegration tests against {BASE}\n")
    print("--- Health & Status ---")
    check("GET /health", "GET", "/health", None, {"ok": True})
    check("GET /status", "GET", "/status")
    check("POST /reset", "POST", "/reset", None, {"state.status": "initial"})

    print("\n--- Upload ---")
    check("POST /upload (pdf rejected)", "POST", "/upload",
          {"filename": "notes.pdf", "content_type": "application/pdf", "data": base64.b64encode(b"%PDF").decode()},
          {"state.status": "error"})
    snap = check("POST /upload (image)", "POST", "/upload",
                 {"filename": filename, "content_type": "image/png" if not photo else "image/jpeg",
                  "data": base64.b64encode(image).decode()},
                 {"state.status": "result"})
    name = (snap.get("state") or {}).get("landmark", {}).get("name")
    print(f"        landmark: {name!r}")

    print("\n--- Directions ---")
    check("POST /directions/form", "POST", "/directions/form", {"visible": True}, {"directions.form_visible": True})
    check("POST /directions", "POST", "/directions", {"full_address": "Champ de Mars, Paris"},
          {"directions.form_visible": False})

    print("\n--- Language ---")
    check("POST /language id", "POST", "/language", {"language": "id"}, {"language": "id", "state.status": "result"})
    check("POST /language id (no-op)", "POST", "/language", {"language": "id"}, {"language": "id"})
    check("POST /language en", "POST", "/language", {"language": "en"}, {"language": "en"})

    check("DELETE /directions", "DELETE", "/directions", None, {"directions.info": None})
    check("POST /reset", "POST", "/reset", None, {"state.status": "initial", "directions.full_address": ""})

    print(f"\n{passed} passed, {failed} failed\n")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()

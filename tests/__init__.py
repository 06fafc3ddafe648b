"""
Test package.

IMPORTANT:
Do not globally monkeypatch sys.modules here. FastAPI/Starlette TestClient relies
on real httpx classes. Prefer per-test monkeypatch/fixtures instead.
"""

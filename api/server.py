"""FastAPI server exposing a read-only view of the configuration store."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config_store.errors import ConfigLoadError
from config_store.runtime import get_store
from config_store.store import ConfigurationStore
from utils.log_utils import tprint


class SettingsResponse(BaseModel):
    items: dict[str, str]


class SettingResponse(BaseModel):
    key: str
    value: str


class ReloadResponse(BaseModel):
    status: str = "ok"
    load_count: int


class HealthResponse(BaseModel):
    status: str = "ok"
    loaded: bool
    load_count: int


def create_app(store: ConfigurationStore | None = None) -> FastAPI:
    """Build the API around ``store`` (the process-wide store when omitted)."""
    store = store or get_store()
    app = FastAPI(title="Configuration Store API", version="0.1.0")

    # Allow local dev origins (browser tools, dashboards).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.get("/settings", response_model=SettingsResponse)
    def list_settings():
        try:
            items = dict(store.get_all_settings())
        except ConfigLoadError as exc:
            raise HTTPException(status_code=503, detail=str(exc))
        return {"items": items}

    @app.get("/settings/{key}", response_model=SettingResponse)
    def read_setting(key: str):
        try:
            value = store.get_setting(key)
        except ConfigLoadError as exc:
            raise HTTPException(status_code=503, detail=str(exc))
        if value is None:
            raise HTTPException(status_code=404, detail=f"Unknown setting '{key}'")
        return {"key": key, "value": value}

    @app.post("/settings/reload", response_model=ReloadResponse)
    def reload_settings():
        try:
            store.reload()
        except ConfigLoadError as exc:
            tprint(f"[API][ERROR] Reload failed: {exc}")
            raise HTTPException(status_code=503, detail=str(exc))
        return {"status": "ok", "load_count": store.load_count}

    @app.get("/health", response_model=HealthResponse)
    def health():
        return {"status": "ok", "loaded": store.is_loaded, "load_count": store.load_count}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.server:create_app", factory=True, host="127.0.0.1", port=8000)

from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
import logging

from fortune_ui.client import Fortune, FortuneClient
from fortune_ui.config import Settings, load_settings


def get_fortune_client(request: Request) -> FortuneClient:
    return request.app.state.fortune_client


def create_app(settings: Optional[Settings] = None, client: Optional[FortuneClient] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()
    if client is None:
        client = FortuneClient(settings.fortune_service_url, timeout=settings.fortune_timeout)

    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="Fortune UI")
    app.state.fortune_client = client

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "ui"}

    @app.get("/greeting", response_class=PlainTextResponse)
    def greeting():
        return settings.greeting

    # failures never reach the caller; the client substitutes the fallback
    @app.get("/random", response_model=Fortune)
    async def random(fortune_client: FortuneClient = Depends(get_fortune_client)):
        return await fortune_client.fetch_random_fortune()

    return app

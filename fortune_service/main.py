from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from sqlalchemy.engine import Engine
from dotenv import load_dotenv
import os
import logging

from fortune_service.db import Fortune, StoreEmptyError, init_db, list_all, make_engine, random_fortune

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///fortunes.db")
SEED_FORTUNES = os.getenv("SEED_FORTUNES", "true").lower() in {"1", "true", "yes"}


def create_app(engine: Optional[Engine] = None, seed: Optional[bool] = None) -> FastAPI:
    if engine is None:
        engine = make_engine(DATABASE_URL)
    if seed is None:
        seed = SEED_FORTUNES

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine, seed=seed)
        yield

    app = FastAPI(title="Fortune Service", lifespan=lifespan)
    app.state.engine = engine

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "fortune"}

    @app.get("/fortunes", response_model=list[Fortune])
    def fortunes(request: Request):
        return list_all(request.app.state.engine)

    @app.get("/random", response_model=Fortune)
    def random(request: Request):
        try:
            return random_fortune(request.app.state.engine)
        except StoreEmptyError as exc:
            logging.warning("Random fortune requested from empty store")
            raise HTTPException(status_code=503, detail=str(exc))

    return app

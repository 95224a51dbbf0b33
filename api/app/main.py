import logging
import re
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .errors import NotFound, RunError
from .schemas import ErrorOut, HealthOut, Run, RunIn
from .settings import Settings, settings as default_settings
from .store import RunStore, get_store

logger = logging.getLogger("running_tracker")

LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_run_id(raw: str) -> int:
    # leading integer, the rest of the segment is ignored
    match = LEADING_INT.match(raw)
    if match is None:
        raise NotFound()
    return int(match.group(1))


def create_app(settings: Settings | None = None, store: RunStore | None = None) -> FastAPI:
    cfg = settings or default_settings
    logger.setLevel(cfg.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.store is None
        if owned:
            app.state.store = RunStore.seeded(id_policy=cfg.run_id_policy)
        logger.info("Running Tracker App listening on port %s", cfg.port)
        yield
        if owned:
            app.state.store.clear()
            app.state.store = None

    app = FastAPI(title="Running Tracker API", version="0.1.0", lifespan=lifespan)
    app.state.settings = cfg
    app.state.store = store

    @app.exception_handler(RunError)
    async def run_error_handler(request: Request, exc: RunError):
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.get("/api/runs", response_model=list[Run])
    async def list_runs(store: RunStore = Depends(get_store)):
        return store.all()

    @app.post(
        "/api/runs",
        response_model=Run,
        status_code=201,
        responses={400: {"model": ErrorOut}},
    )
    async def create_run(payload: RunIn, store: RunStore = Depends(get_store)):
        return store.create(payload)

    @app.delete(
        "/api/runs/{run_id}",
        status_code=204,
        response_class=Response,
        responses={404: {"model": ErrorOut}},
    )
    async def delete_run(run_id: str, store: RunStore = Depends(get_store)):
        store.delete(_parse_run_id(run_id))
        return Response(status_code=204)

    @app.get("/health", response_model=HealthOut)
    async def health():
        ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return {"status": "healthy", "timestamp": ts.replace("+00:00", "Z")}

    public_dir = Path(cfg.public_dir)

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(public_dir / "index.html")

    app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")

    return app


app = create_app()


def main():
    logging.basicConfig(level=default_settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_level=default_settings.log_level)


if __name__ == "__main__":
    main()

from __future__ import annotations

from fastapi import FastAPI


def create_app() -> FastAPI:
    app = FastAPI(title="Wedding Guest API", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    from app.routes import auth, home, search  # noqa: WPS433

    app.include_router(search.router)
    app.include_router(auth.router)
    app.include_router(home.router)
    return app


app = create_app()

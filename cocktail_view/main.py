from fastapi import FastAPI
from cocktail_view.routers import cocktail, home, sidebar
from cocktail_view.routers import health
from cocktail_view.core import config
from cocktail_view.core.logging import setup_logging
from cocktail_view.core.middleware import RequestLoggingMiddleware


def create_app() -> FastAPI:
    app = FastAPI(title="Cocktail View", version=config.APP_VERSION)
    app.include_router(home.router)
    app.include_router(cocktail.router)
    app.include_router(sidebar.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    return app

app = create_app()

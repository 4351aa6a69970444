import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.error import ClientError, client_error_handler
from src.api.middleware import log_requests
from src.api.routes import services, clients, invoices, reports
from src.app.services.invoice_sequencer import InvoiceNumberSequencer
from src.bootstrap import bootstrap
from src.depends import engine, AsyncSessionLocal


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await bootstrap(config, engine, AsyncSessionLocal, app.state.invoice_sequencer)
        yield
        await engine.dispose()

    app = FastAPI(
        title="Carwash POS Invoicing API",
        description="Invoicing with Honduran ISV for a car-wash point of sale",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.invoice_sequencer = InvoiceNumberSequencer.from_config(config)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    app.add_exception_handler(ClientError, client_error_handler)

    for module in (services, clients, invoices, reports):
        app.include_router(module.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app

from contextlib import asynccontextmanager

from fastapi import FastAPI

from articles import router as articles_router
from bookings import router as bookings_router
from catalog import router as catalog_router
from contact import router as contact_router
from core import db, settings
from core.cors import MethodGateMiddleware
from core.errors import register_error_handlers
from core.logging import configure_logging
from health import router as health_router

settings.load_env_file()
configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Every public endpoint gets the same CORS headers and OPTIONS/405 handling;
# only the supported-method list differs per resource.
app.add_middleware(
    MethodGateMiddleware,
    resources=[
        articles_router.resource,
        bookings_router.resource,
        contact_router.resource,
        health_router.resource,
        *catalog_router.resources,
    ],
)
register_error_handlers(app)

app.include_router(articles_router.router, tags=["articles"])
app.include_router(bookings_router.router, tags=["bookings"])
app.include_router(contact_router.router, tags=["contact"])
app.include_router(catalog_router.router, tags=["catalog"])
app.include_router(health_router.router, tags=["health"])

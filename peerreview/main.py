import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from peerreview.config import VERSION, get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.logging.level,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
)

from peerreview.controllers.availability import router as availability_router
from peerreview.controllers.health import router as health_router
from peerreview.errors import register_exception_handlers
from peerreview.middleware import HTTPLogMiddleware

app = FastAPI(title="Peer Review Scheduling API", version=VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_origin_regex=settings.cors.origins_regex or None,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.debug.request:
    logging.getLogger("peerreview.http").setLevel(logging.DEBUG)
    logging.getLogger("peerreview.availability").setLevel(logging.DEBUG)
    app.add_middleware(HTTPLogMiddleware)

register_exception_handlers(app)

app.include_router(health_router)
app.include_router(availability_router)

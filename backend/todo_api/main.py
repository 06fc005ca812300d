from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import settings
from .core.logging_setup import setup_logging
from .db.session import init_db
from .api.v1 import health, rpc

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(rpc.router,    prefix=settings.API_V1_PREFIX)

@app.on_event("startup")
def on_startup():
    init_db()

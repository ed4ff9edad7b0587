import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import bitcoin_router, register_exception_handlers, statistics_router
from .core import get_engine
from .logging_config import configure_logging

configure_logging()
logger = logging.getLogger("btc_stats")

app = FastAPI(
    title="Bitcoin Statistics API",
    version=__version__,
    docs_url="/docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(statistics_router, prefix="/api")
app.include_router(bitcoin_router, prefix="/api")


@app.get("/")
async def root():
    return {
        "name": "Bitcoin Statistics API",
        "version": __version__,
        "docs": "/docs",
    }


@app.get("/health")
def health():
    stats = get_engine().stats()

    return {
        "status": "healthy",
        "engine": {
            "samples_ingested": stats["samples_ingested"],
            "analyses_run": stats["analyses_run"],
            "errors": stats["errors"],
            "symbols": stats["symbols"],
            "uptime_seconds": round(stats["uptime_seconds"], 2)
        }
    }


def run() -> None:
    import uvicorn
    logger.info("Starting Bitcoin Statistics API on port 8000")
    uvicorn.run("btc_stats.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()

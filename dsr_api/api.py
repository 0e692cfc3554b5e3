# This file should only be the FastAPI app entry point and router registration.
import logging

import uvicorn
from fastapi import FastAPI

from dsr_api.routes import process_types
from dsr_api.utils.config import API_HOST, API_PORT, LOG_FILE, LOG_LEVEL, SERVICE_NAME


def build_log_handlers(log_file):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


# Setup logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    handlers=build_log_handlers(LOG_FILE)
)
logger = logging.getLogger(__name__)

app = FastAPI(title="DSR Reference Data Service")

app.include_router(process_types.router)


@app.get("/")
def root():
    return {"service": SERVICE_NAME, "status": "ok"}


@app.get("/health")
def health():
    return {"service": SERVICE_NAME, "status": "ok"}


def main():
    logger.info("Starting %s on %s:%s", SERVICE_NAME, API_HOST, API_PORT)
    uvicorn.run("dsr_api.api:app", host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_costing.api.routes import router as api_router
from recipe_costing.config import settings
from recipe_costing.logging import configure_logging, get_logger
from recipe_costing.storage.db import create_db_and_tables

app = FastAPI(title="Recipe Costing API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def on_startup() -> None:
    configure_logging(settings.log_level)
    logger.info("startup: creating tables")
    create_db_and_tables()


app.include_router(api_router)

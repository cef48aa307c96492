from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

import config
from chances.logic.catalog import load_catalog
from chances.logic.engine import ChanceEngine
from chances.routes import router as chances_router

logging.basicConfig(level=config.LOG_LEVEL)
logging.info("App starting with CATALOG_PATH=%s PRO_MODE=%s", config.CATALOG_PATH, config.PRO_MODE.value)

app = FastAPI(title="Admission Chance API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Catalog is static reference data: loaded once, shared read-only by every request
app.state.engine = ChanceEngine(
    load_catalog(config.CATALOG_PATH),
    pro_mode=config.PRO_MODE,
    default_algorithm=config.DEFAULT_ALGORITHM,
)

app.include_router(chances_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}

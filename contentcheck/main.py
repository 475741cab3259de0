from fastapi import FastAPI
from contentcheck.config import ALLOWED_ORIGINS
from contentcheck.logger import logger
from contentcheck.routers.detection import router as detection_router
from contentcheck.routers.extraction import router as extraction_router

from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="ContentCheck")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(detection_router)
app.include_router(extraction_router)

logger.info("ContentCheck API ready")


@app.get("/health")
async def health():
    return {"status": "healthy"}

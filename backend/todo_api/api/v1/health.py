from fastapi import APIRouter
from pydantic import BaseModel
from ...core.config import settings

router = APIRouter(tags=["system"])

class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = settings.APP_VERSION

@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse()

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger

from apparel_inventory.core.exceptions import StoreUnavailable
from apparel_inventory.db.core import check_connection

router = APIRouter()


@router.get("/", status_code=status.HTTP_200_OK, summary="Service Info")
def index(request: Request):
    return {"name": request.app.title, "status": "running"}


@router.get(
    "/readiness",
    status_code=status.HTTP_200_OK,
    summary="Store Readiness",
    description="Runs the same connectivity check as startup against the live engine."
)
def readiness_check(request: Request):
    engine = request.app.state.engine
    try:
        check_connection(engine)
    except StoreUnavailable as e:
        logger.warning(f"Readiness failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    return {"status": "ready", "backend": engine.url.get_backend_name()}

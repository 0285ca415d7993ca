"""FastAPI web application exposing the Comfort Environment Index."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel
import pytz
import uvicorn

sys.path.insert(0, str(Path(__file__).parent / "src"))

from comfort_index.config import ServiceConfig
from comfort_index.errors import CEIValidationError
from comfort_index.pipelines.cei import LEVELS, SEVERE_LEVEL, compute_cei

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Comfort Environment Index",
    description="Turns weather and air quality readings into a 0-100 comfort score",
    version="2.0.0",
)


class CeiRequest(BaseModel):
    """Body of ``POST /cei``; ``data`` is validated by the scoring core."""

    unit: Optional[str] = None
    data: Dict[str, Any]
    latitude: float
    month: Optional[int] = None
    weather_id: Optional[int] = None


def get_service_config() -> ServiceConfig:
    try:
        config = ServiceConfig.from_env()
        pytz.timezone(config.timezone)
    except (CEIValidationError, pytz.UnknownTimeZoneError) as exc:
        logger.error("Invalid service configuration: %s", exc)
        raise HTTPException(status_code=500, detail=f"Invalid service configuration: {exc}")
    return config


@app.post("/cei")
async def cei(request: CeiRequest):
    """Compute the CEI for one weather sample."""
    config = get_service_config()
    unit = request.unit or config.default_unit.value
    month = request.month if request.month is not None else config.current_month()
    try:
        result = compute_cei(unit, request.data, request.latitude, month, request.weather_id)
    except CEIValidationError as exc:
        logger.info("Rejected CEI request: %s", exc)
        return JSONResponse(status_code=422, content=exc.as_dict())

    return result.to_dict()


@app.get("/levels")
async def levels() -> List[Dict[str, Any]]:
    """CEI level ladder, highest first."""
    ladder: List[Dict[str, Any]] = [{"min": threshold, "level": label} for threshold, label in LEVELS]
    ladder.append({"min": 0, "level": SEVERE_LEVEL})
    return ladder


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    tz = pytz.timezone(get_service_config().timezone)
    return {"status": "healthy", "timestamp": datetime.now(tz).isoformat()}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)

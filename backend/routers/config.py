"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager
from services.logging_utils import configure_logging

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    review: dict | None = None
    logging: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    review: dict
    logging: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config_manager = ConfigManager.get_instance()
    config = config_manager.get_config()

    return ConfigResponse(
        review=config_manager.review_settings(),
        logging=config.get("logging", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.review:
        max_cells = request.review.get("maxDiffCells")
        if max_cells is not None and (
            isinstance(max_cells, bool) or not isinstance(max_cells, int) or max_cells <= 0
        ):
            raise HTTPException(status_code=400, detail="maxDiffCells must be a positive integer")
        current_config["review"] = {**current_config.get("review", {}), **request.review}
    if request.logging:
        current_config["logging"] = {**current_config.get("logging", {}), **request.logging}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if request.logging and "level" in request.logging:
        configure_logging(request.logging["level"])

    return {"status": "success", "message": "Configuration updated"}

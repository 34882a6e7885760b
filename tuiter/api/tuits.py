"""Tuit CRUD endpoints."""

from fastapi import APIRouter, HTTPException, Depends
from typing import List
import logging

from tuiter.interfaces.tuit_repository import ITuitRepository
from tuiter.models.requests import TuitCreateRequest, TuitUpdateRequest
from tuiter.models.responses import TuitResponse, StatusResponse
from tuiter.dependencies import get_tuit_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tuits", tags=["tuits"])


@router.post("", response_model=TuitResponse)
async def create_tuit(
    request: TuitCreateRequest,
    tuits: ITuitRepository = Depends(get_tuit_repository)
):
    try:
        tuit = await tuits.create_tuit(request.model_dump(exclude_none=True))
        return TuitResponse.from_domain(tuit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create tuit: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("", response_model=List[TuitResponse])
async def find_tuits(tuits: ITuitRepository = Depends(get_tuit_repository)):
    try:
        return [TuitResponse.from_domain(t) for t in await tuits.find_all_tuits()]
    except Exception as e:
        logger.error(f"Failed to list tuits: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{tuit_id}", response_model=TuitResponse)
async def find_tuit_by_id(
    tuit_id: str,
    tuits: ITuitRepository = Depends(get_tuit_repository)
):
    try:
        tuit = await tuits.find_tuit_by_id(tuit_id)
        if not tuit:
            raise HTTPException(status_code=404, detail="Tuit not found")
        return TuitResponse.from_domain(tuit)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to get tuit {tuit_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/{tuit_id}", response_model=TuitResponse)
async def update_tuit(
    tuit_id: str,
    request: TuitUpdateRequest,
    tuits: ITuitRepository = Depends(get_tuit_repository)
):
    try:
        tuit = await tuits.update_tuit(tuit_id, request.model_dump(exclude_unset=True))
        if not tuit:
            raise HTTPException(status_code=404, detail="Tuit not found")
        return TuitResponse.from_domain(tuit)
    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to update tuit {tuit_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{tuit_id}", response_model=StatusResponse)
async def delete_tuit(
    tuit_id: str,
    tuits: ITuitRepository = Depends(get_tuit_repository)
):
    try:
        if not await tuits.delete_tuit(tuit_id):
            raise HTTPException(status_code=404, detail="Tuit not found")
        return StatusResponse(status="success", id=tuit_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete tuit {tuit_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

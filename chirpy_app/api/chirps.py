from typing import List

from fastapi import APIRouter, Depends, status

from chirpy_app.dependencies import get_chirp_service
from chirpy_app.schemas.chirp import ChirpCreate, ChirpResponse, ChirpValidate, CleanedChirp
from chirpy_app.schemas.error import ErrorResponse
from chirpy_app.services.chirp_service import ChirpService
from chirpy_app.services.chirp_validator import validate_chirp

router = APIRouter(tags=["chirps"])


@router.post(
    "/validate_chirp",
    response_model=CleanedChirp,
    responses={400: {"model": ErrorResponse}},
)
def validate(chirp: ChirpValidate):
    """
    Check and clean a chirp body without storing it.

    Kept from the first version of the API; POST /chirps runs the same
    validator before saving.
    """
    return CleanedChirp(cleaned_body=validate_chirp(chirp.body))


@router.post(
    "/chirps",
    response_model=ChirpResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_chirp(
    chirp_data: ChirpCreate,
    chirp_service: ChirpService = Depends(get_chirp_service)
):
    """Validate, filter and store a chirp"""
    return chirp_service.create_chirp(chirp_data.body, chirp_data.user_id)


@router.get("/chirps", response_model=List[ChirpResponse])
def list_chirps(chirp_service: ChirpService = Depends(get_chirp_service)):
    """All chirps, oldest first"""
    return chirp_service.get_chirps()


@router.get(
    "/chirps/{chirp_id}",
    response_model=ChirpResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_chirp(
    chirp_id: str,
    chirp_service: ChirpService = Depends(get_chirp_service)
):
    # chirp_id is parsed by the service so a bad id is a 400, not FastAPI's 422
    return chirp_service.get_chirp(chirp_id)

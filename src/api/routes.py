"""
API routes - Registration, seats and admin roster endpoints.

This module defines the HTTP endpoints:
- POST /register - Admit a participant (capacity and duplicate gated)
- GET /remaining-seats - Seats left before the workshop is full
- GET /participants - Admin roster with derived departments
- GET /participants/summary - Admin roster totals per department
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_capacity, get_registration_service, get_roster_query
from src.api.models import (
    ErrorResponse,
    ParticipantsResponse,
    RegisterRequest,
    RegisterResponse,
    RemainingSeatsResponse,
    RosterSummaryResponse,
)
from src.domain.exceptions import PersistenceFailure
from src.domain.models import AdmissionStatus
from src.domain.registration import RegistrationService
from src.domain.roster import RosterQuery

logger = logging.getLogger(__name__)

# Handlers are plain def: store and email calls block, so they run in the threadpool
router = APIRouter()

REGISTERED_MESSAGE = "Registration successful, check your email for more details"
FULL_MESSAGE = "Workshop is full"
DUPLICATE_MESSAGE = "You are already registered, check your email for more details"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Workshop full or already registered"},
        422: {"description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal failure"},
    },
    tags=["registration"],
    summary="Register for the workshop",
    description="Submit participant details. Accepted participants receive a welcome email.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
    capacity: int = Depends(get_capacity),
) -> RegisterResponse | JSONResponse:
    """
    Register a participant.

    - **name**: Full name (minimum 2 characters)
    - **usn**: University Seat Number (uppercased before validation)
    - **email**: Institutional email address
    - **year**: Year of study, 1-4
    - **phone**: 10-digit phone number
    """
    outcome = service.admit(request_data.to_input(), capacity)

    if outcome.status is AdmissionStatus.REJECTED_FULL:
        return _error(status.HTTP_400_BAD_REQUEST, FULL_MESSAGE)
    if outcome.status is AdmissionStatus.REJECTED_DUPLICATE:
        return _error(status.HTTP_400_BAD_REQUEST, DUPLICATE_MESSAGE)
    if outcome.status is AdmissionStatus.FAILED:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    return RegisterResponse(message=REGISTERED_MESSAGE)


@router.get(
    "/remaining-seats",
    response_model=RemainingSeatsResponse,
    responses={500: {"model": ErrorResponse, "description": "Internal failure"}},
    tags=["registration"],
    summary="Remaining seats",
)
def remaining_seats(
    roster: RosterQuery = Depends(get_roster_query),
    capacity: int = Depends(get_capacity),
) -> RemainingSeatsResponse | JSONResponse:
    try:
        seats = roster.remaining_seats(capacity)
    except PersistenceFailure as e:
        logger.error("Error fetching remaining seats: %s", e)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
    return RemainingSeatsResponse(remaining_seats=seats)


@router.get(
    "/participants",
    response_model=ParticipantsResponse,
    responses={500: {"model": ErrorResponse, "description": "Internal failure"}},
    tags=["admin"],
    summary="List participants",
    description="Full roster with derived departments. Optional filters narrow the list.",
)
def list_participants(
    department: str | None = Query(None, description="Exact department label, e.g. CSE"),
    year: str | None = Query(None, description="Year of study, 1-4"),
    search: str | None = Query(None, description="Substring of name or email"),
    roster: RosterQuery = Depends(get_roster_query),
) -> ParticipantsResponse | JSONResponse:
    try:
        entries = roster.list_participants(department=department, year=year, search=search)
    except PersistenceFailure as e:
        logger.error("Error fetching participants: %s", e)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching data")
    return ParticipantsResponse(participants=entries)


@router.get(
    "/participants/summary",
    response_model=RosterSummaryResponse,
    responses={500: {"model": ErrorResponse, "description": "Internal failure"}},
    tags=["admin"],
    summary="Roster summary",
)
def participants_summary(
    roster: RosterQuery = Depends(get_roster_query),
    capacity: int = Depends(get_capacity),
) -> RosterSummaryResponse | JSONResponse:
    try:
        summary = roster.summarize(capacity)
    except PersistenceFailure as e:
        logger.error("Error summarizing participants: %s", e)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching data")
    return RosterSummaryResponse(
        total=summary.total,
        capacity=summary.capacity,
        remaining_seats=summary.remaining_seats,
        departments=summary.departments,
    )

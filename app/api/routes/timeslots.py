import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.deps import get_booking_repository
from app.api.schemas.timeslots import ErrorResponse, TimeslotOut, TimeslotsRequest, TimeslotsResponse
from app.services.booking_repository import BookingRepository
from app.services.slot_service import Err, TimeslotQuery, find_timeslots

logger = logging.getLogger(__name__)

router = APIRouter(tags=["timeslots"])


@router.post(
    "/available-timeslots",
    response_model=TimeslotsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def available_timeslots(
    body: TimeslotsRequest,
    repo: BookingRepository = Depends(get_booking_repository),
):
    """Start times for the requested services on the given day.

    Unavailable slots are included with available=false so the booking form can show
    them disabled. A closed day or a treatment that does not fit returns an empty list.
    """
    result = await find_timeslots(
        repo,
        TimeslotQuery(
            booking_date=body.booking_date,
            service_ids=body.service_ids,
            service_quantities=body.service_quantities,
        ),
    )
    if isinstance(result, Err):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": result.reason},
        )
    return TimeslotsResponse(
        timeslots=[TimeslotOut(time=s.time, available=s.available) for s in result.slots]
    )

from fastapi import APIRouter, Depends, Query

from doctors_portal.api.deps import get_repositories
from doctors_portal.models.treatment import SpecialtyPublic, TreatmentOptionPublic
from doctors_portal.repositories import Repositories
from doctors_portal.services.availability_service import (
    resolve_availability,
    resolve_availability_aggregated,
)

router = APIRouter(tags=["appointment options"])


@router.get("/appointmentOptions", response_model=list[TreatmentOptionPublic])
async def appointment_options(
    appointment_date: str | None = Query(None, alias="date"),
    repos: Repositories = Depends(get_repositories),
) -> list[TreatmentOptionPublic]:
    """Treatment options with the slots still open on `date`."""
    return await resolve_availability(repos.catalog, repos.bookings, appointment_date)


@router.get("/v2/appointmentOptions", response_model=list[TreatmentOptionPublic])
async def appointment_options_v2(
    appointment_date: str | None = Query(None, alias="date"),
    repos: Repositories = Depends(get_repositories),
) -> list[TreatmentOptionPublic]:
    """Same as /appointmentOptions, with the subtraction done by the database."""
    return await resolve_availability_aggregated(repos.catalog, appointment_date)


@router.get("/appointmentSpecialty", response_model=list[SpecialtyPublic])
async def appointment_specialty(
    repos: Repositories = Depends(get_repositories),
) -> list[SpecialtyPublic]:
    names = await repos.catalog.list_names()
    return [SpecialtyPublic(name=n) for n in names]

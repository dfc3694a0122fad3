from fastapi import APIRouter, Depends, HTTPException, status

from doctors_portal.api.deps import get_repositories, verify_admin
from doctors_portal.models.doctor import DoctorCreate, DoctorPublic
from doctors_portal.repositories import Repositories

# Roster management is admin-only, reads included
router = APIRouter(prefix="/doctors", tags=["doctors"], dependencies=[Depends(verify_admin)])


@router.get("", response_model=list[DoctorPublic])
async def list_doctors(repos: Repositories = Depends(get_repositories)) -> list[DoctorPublic]:
    doctors = await repos.doctors.list_all()
    return [DoctorPublic.model_validate(d) for d in doctors]


@router.post("", response_model=DoctorPublic, status_code=status.HTTP_201_CREATED)
async def add_doctor(
    body: DoctorCreate,
    repos: Repositories = Depends(get_repositories),
) -> DoctorPublic:
    doctor = await repos.doctors.create(body)
    return DoctorPublic.model_validate(doctor)


@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_doctor(
    doctor_id: int,
    repos: Repositories = Depends(get_repositories),
) -> None:
    if not await repos.doctors.delete(doctor_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Doctor not found",
        )

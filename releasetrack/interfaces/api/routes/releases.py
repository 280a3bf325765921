"""Routes for managing releases."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.releases import (
    create_release as create_release_uc,
    delete_release as delete_release_uc,
    get_release as get_release_uc,
    list_releases as list_releases_uc,
    update_release as update_release_uc,
)
from releasetrack.infrastructure.database import get_db
from releasetrack.interfaces.api.schemas import (
    ReleaseCreate,
    ReleaseDetailRead,
    ReleaseRead,
    ReleaseUpdate,
)

router = APIRouter(prefix="/releases", tags=["releases"])


@router.post("/", response_model=ReleaseRead, status_code=status.HTTP_201_CREATED)
def create_release(release_in: ReleaseCreate, db: Session = Depends(get_db)) -> ReleaseRead:
    try:
        release = create_release_uc(
            db, release_id=release_in.id, **release_in.model_dump(exclude={"id"})
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ReleaseRead.model_validate(release)


@router.get("/", response_model=list[ReleaseRead])
def list_releases(
    status_filter: str | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
) -> list[ReleaseRead]:
    releases = list_releases_uc(db, status=status_filter)
    return [ReleaseRead.model_validate(release) for release in releases]


@router.get("/{release_id}", response_model=ReleaseDetailRead)
def read_release(release_id: str, db: Session = Depends(get_db)) -> ReleaseDetailRead:
    """Return a release with the tickets scheduled in it."""

    try:
        overview = get_release_uc(db, release_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ReleaseDetailRead.model_validate(overview)


@router.patch("/{release_id}", response_model=ReleaseRead)
def update_release(
    release_id: str, release_in: ReleaseUpdate, db: Session = Depends(get_db)
) -> ReleaseRead:
    try:
        get_release_uc(db, release_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    try:
        release = update_release_uc(
            db, release_id=release_id, changes=release_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ReleaseRead.model_validate(release)


@router.delete("/{release_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_release(release_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        delete_release_uc(db, release_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]

"""Routes for Salesforce metadata changes."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.metadata_items import (
    create_metadata_item as create_metadata_item_uc,
    delete_metadata_item as delete_metadata_item_uc,
    get_metadata_item as get_metadata_item_uc,
    list_metadata_items as list_metadata_items_uc,
    update_metadata_item as update_metadata_item_uc,
)
from releasetrack.infrastructure.database import get_db
from releasetrack.interfaces.api.schemas import (
    MetadataItemCreate,
    MetadataItemRead,
    MetadataItemUpdate,
)

router = APIRouter(prefix="/metadata", tags=["metadata"])


@router.post("/", response_model=MetadataItemRead, status_code=status.HTTP_201_CREATED)
def create_metadata_item(
    item_in: MetadataItemCreate, db: Session = Depends(get_db)
) -> MetadataItemRead:
    try:
        item = create_metadata_item_uc(
            db, item_id=item_in.id, **item_in.model_dump(exclude={"id"})
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MetadataItemRead.model_validate(item)


@router.get("/", response_model=list[MetadataItemRead])
def list_metadata_items(
    ticket_id: str | None = None,
    release_id: str | None = None,
    type_filter: str | None = Query(None, alias="type"),
    db: Session = Depends(get_db),
) -> list[MetadataItemRead]:
    """Return metadata changes, newest first, optionally for one ticket or release."""

    items = list_metadata_items_uc(
        db, ticket_id=ticket_id, release_id=release_id, type=type_filter
    )
    return [MetadataItemRead.model_validate(item) for item in items]


@router.get("/{item_id}", response_model=MetadataItemRead)
def read_metadata_item(item_id: str, db: Session = Depends(get_db)) -> MetadataItemRead:
    try:
        item = get_metadata_item_uc(db, item_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MetadataItemRead.model_validate(item)


@router.patch("/{item_id}", response_model=MetadataItemRead)
def update_metadata_item(
    item_id: str, item_in: MetadataItemUpdate, db: Session = Depends(get_db)
) -> MetadataItemRead:
    try:
        get_metadata_item_uc(db, item_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    try:
        item = update_metadata_item_uc(
            db, item_id=item_id, changes=item_in.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MetadataItemRead.model_validate(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_metadata_item(item_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        delete_metadata_item_uc(db, item_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]

"""Router factory for the uniform record collections (inventory, orders, ...)."""

import logging
from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from smart_erp.api.dependencies import get_current_user
from smart_erp.database import get_db
from smart_erp.exceptions import Conflict, NotFound
from smart_erp.models.user import User
from smart_erp.schemas.auth import MessageResponse
from smart_erp.schemas.common import BulkDeleteRequest, BulkDeleteResponse

logger = logging.getLogger(__name__)

# Called after a record is committed: (db, record, current_user)
AfterCreateHook = Callable[[Session, Any, User], None]


def _commit(db: Session, label: str) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info(f"{label} write rejected by a constraint: {e.orig}")
        raise Conflict(f"{label} already exists") from e


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    model: Any,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
    label: str,
    after_create: AfterCreateHook | None = None,
) -> APIRouter:
    """Build list/create/update/delete/bulk-delete routes for one record type.

    Every route requires a signed-in account; records themselves are shared
    across accounts.

    Args:
        prefix: URL prefix, e.g. "/api/inventory"
        tag: OpenAPI tag
        model: SQLAlchemy model class
        create_schema: Request body for POST
        update_schema: Request body for PUT; unset fields are left alone
        response_schema: Response model for a single record
        label: Human-readable record name used in messages
        after_create: Optional side effect run once a new record is committed
    """
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_record(db: Session, record_id: int) -> Any:
        record = db.query(model).filter(model.id == record_id).first()
        if record is None:
            raise NotFound(f"{label} not found")
        return record

    @router.get("", response_model=list[response_schema])
    async def list_records(
        current_user: Annotated[User, Depends(get_current_user)],
        db: Annotated[Session, Depends(get_db)],
    ):
        """List every record, oldest first."""
        return db.query(model).order_by(model.id).all()

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_record(
        data: create_schema,  # type: ignore[valid-type]
        current_user: Annotated[User, Depends(get_current_user)],
        db: Annotated[Session, Depends(get_db)],
    ):
        """Create a record."""
        record = model(**data.model_dump())
        db.add(record)
        _commit(db, label)
        db.refresh(record)

        if after_create is not None:
            after_create(db, record, current_user)
        return record

    @router.put("/{record_id}", response_model=response_schema)
    async def update_record(
        record_id: int,
        data: update_schema,  # type: ignore[valid-type]
        current_user: Annotated[User, Depends(get_current_user)],
        db: Annotated[Session, Depends(get_db)],
    ):
        """Update the fields present in the body."""
        record = get_record(db, record_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            # An explicit null only clears optional columns
            if value is None and not model.__table__.c[field].nullable:
                continue
            setattr(record, field, value)
        _commit(db, label)
        db.refresh(record)
        return record

    @router.delete("/{record_id}", response_model=MessageResponse)
    async def delete_record(
        record_id: int,
        current_user: Annotated[User, Depends(get_current_user)],
        db: Annotated[Session, Depends(get_db)],
    ):
        """Delete one record."""
        record = get_record(db, record_id)
        db.delete(record)
        db.commit()
        return MessageResponse(message=f"{label} deleted")

    @router.post("/bulk-delete", response_model=BulkDeleteResponse)
    async def bulk_delete_records(
        request: BulkDeleteRequest,
        current_user: Annotated[User, Depends(get_current_user)],
        db: Annotated[Session, Depends(get_db)],
    ):
        """Delete every record whose id is listed. Unknown ids are ignored."""
        deleted = (
            db.query(model)
            .filter(model.id.in_(request.ids))
            .delete(synchronize_session=False)
        )
        db.commit()
        return BulkDeleteResponse(message="Items deleted successfully", deleted_count=deleted)

    return router

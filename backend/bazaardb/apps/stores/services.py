from __future__ import annotations

from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from bazaardb.utils.flags import normalise_active_flag
from . import models, schemas


def list_stores(db: Session) -> List[models.Store]:
    return db.query(models.Store).order_by(models.Store.store_id.asc()).all()


def get_store(db: Session, *, store_id: int) -> models.Store:
    store = db.query(models.Store).filter(models.Store.store_id == store_id).first()
    if not store:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Store not found")
    return store


def create_store(db: Session, *, payload: schemas.StoreCreate) -> models.Store:
    is_active = normalise_active_flag(payload.is_active)
    duplicate = (
        db.query(models.Store)
        .filter((models.Store.store_id == payload.store_id) | (models.Store.name == payload.name))
        .first()
    )
    if duplicate:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Store with this ID or name already exists",
        )
    store = models.Store(store_id=payload.store_id, name=payload.name, is_active=is_active)
    db.add(store)
    db.flush()
    return store


def update_store(db: Session, *, store_id: int, payload: schemas.StoreUpdate) -> models.Store:
    is_active = normalise_active_flag(payload.is_active)
    store = get_store(db, store_id=store_id)
    store.name = payload.name
    store.is_active = is_active
    db.flush()
    return store

from __future__ import annotations

from fastapi import APIRouter, Depends

from coffee_bot.api.dependencies import get_catalog
from coffee_bot.services.menu_catalog import Catalog

router = APIRouter()


@router.get("/healthz")
def healthz(catalog: Catalog = Depends(get_catalog)):
    return {"status": "ok", "menu_items": len(catalog.menu)}


@router.get("/")
def root():
    return {"status": "ok"}

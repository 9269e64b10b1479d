from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from bank import get_bank
from models import UnknownAgeGroup
from schemas.age_groups import AgeGroupOut

router = APIRouter(tags=["age-groups"])


@router.get("/age-groups", response_model=List[AgeGroupOut])
def list_age_groups():
    bank = get_bank()
    return [AgeGroupOut.from_config(g, bank.default_id) for g in bank.all()]


@router.get("/age-groups/{age_group_id}", response_model=AgeGroupOut)
def get_age_group(age_group_id: str):
    bank = get_bank()
    try:
        group = bank.get(age_group_id)
    except UnknownAgeGroup:
        raise HTTPException(status_code=404, detail="age group not found")
    return AgeGroupOut.from_config(group, bank.default_id)

# mathquiz/bank.py

from __future__ import annotations

import logging
from typing import Dict, List

from pydantic import ValidationError

import config
from age_groups import VARIANTS
from models import AgeGroupConfig, UnknownAgeGroup

logger = logging.getLogger("mathquiz.bank")


class AgeGroupBank:
    """Validated, read-only view of one catalog variant."""

    def __init__(self, variant: str = "extended", default: str | None = None):
        if variant not in VARIANTS:
            raise ValueError(f"unknown quiz variant {variant!r}; expected one of {sorted(VARIANTS)}")
        raw_rows, variant_default = VARIANTS[variant]

        groups: Dict[str, AgeGroupConfig] = {}
        for raw in raw_rows:
            try:
                group = AgeGroupConfig(**raw)
            except ValidationError:
                # shipped tables must validate
                logger.exception("invalid age group row in %s catalog: %r", variant, raw.get("id"))
                raise
            groups[group.id] = group

        self.variant = variant
        self._groups = groups
        self.default_id = default or variant_default
        if self.default_id not in groups:
            raise UnknownAgeGroup(self.default_id)

    def all(self) -> List[AgeGroupConfig]:
        return list(self._groups.values())

    def get(self, age_group_id: str) -> AgeGroupConfig:
        try:
            return self._groups[age_group_id]
        except KeyError:
            raise UnknownAgeGroup(age_group_id) from None

    @property
    def default(self) -> AgeGroupConfig:
        return self._groups[self.default_id]


_bank: AgeGroupBank | None = None


# Public API
def get_bank() -> AgeGroupBank:
    global _bank
    if _bank is None:
        _bank = AgeGroupBank(config.QUIZ_VARIANT, config.QUIZ_DEFAULT_AGE_GROUP or None)
        logger.info(
            "loaded %s catalog (%d age groups, default %s)",
            _bank.variant,
            len(_bank.all()),
            _bank.default_id,
        )
    return _bank

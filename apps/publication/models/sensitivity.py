from __future__ import annotations

from django.db import models


class Sensitivity(models.TextChoices):
    """
    Visibility tiers for a published list, least to most restricted.

    Anyone able to see a more restricted tier can see every less restricted
    tier, never the other way round.
    """
    PUBLIC = 'PUBLIC', 'Public'
    PRIVATE = 'PRIVATE', 'Private'
    CLASSIFIED = 'CLASSIFIED', 'Classified'

    @classmethod
    def parse(cls, value) -> 'Sensitivity':
        # Fail closed: anything that is not exactly PUBLIC or PRIVATE is CLASSIFIED
        if isinstance(value, str):
            if value == cls.PUBLIC.value:
                return cls.PUBLIC
            if value == cls.PRIVATE.value:
                return cls.PRIVATE
        return cls.CLASSIFIED


class Provenance(models.TextChoices):
    """Source system that sent an artefact. Recorded for audit only."""
    MANUAL_UPLOAD = 'MANUAL_UPLOAD', 'Manual Upload'
    XHIBIT = 'XHIBIT', 'XHIBIT'
    SNL = 'SNL', 'SNL'
    COMMON_PLATFORM = 'COMMON_PLATFORM', 'Common Platform'

    @classmethod
    def normalise(cls, value: str | None) -> str:
        """Map a known source tag to its canonical value; unknown tags pass through."""
        if not value:
            return ''
        candidate = str(value).strip().upper()
        if candidate in cls.values:
            return candidate
        return str(value).strip()

    @classmethod
    def label_for(cls, value: str | None) -> str:
        if value in cls.values:
            return cls(value).label
        return value or ''


class Language(models.TextChoices):
    ENGLISH = 'ENGLISH', 'English'
    WELSH = 'WELSH', 'Welsh'
    BI_LINGUAL = 'BI_LINGUAL', 'Bilingual'

"""Built-in contract templates, in gallery order"""

from artist_contracts.data.templates.artist_agreement import (
    ARTIST_AGREEMENT,
    ARTIST_AGREEMENT_SAMPLE_DATA,
)
from artist_contracts.data.templates.license_agreement import LICENSE_AGREEMENT
from artist_contracts.data.templates.tour_agreement import TOUR_AGREEMENT
from artist_contracts.data.templates.sample_agreement import SAMPLE_AGREEMENT
from artist_contracts.data.templates.work_for_hire_agreement import WORK_FOR_HIRE_AGREEMENT

ALL_TEMPLATES = [
    ARTIST_AGREEMENT,
    LICENSE_AGREEMENT,
    TOUR_AGREEMENT,
    SAMPLE_AGREEMENT,
    WORK_FOR_HIRE_AGREEMENT,
]

__all__ = [
    "ALL_TEMPLATES",
    "ARTIST_AGREEMENT",
    "ARTIST_AGREEMENT_SAMPLE_DATA",
    "LICENSE_AGREEMENT",
    "TOUR_AGREEMENT",
    "SAMPLE_AGREEMENT",
    "WORK_FOR_HIRE_AGREEMENT",
]

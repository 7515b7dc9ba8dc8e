from dataclasses import dataclass
from enum import StrEnum

from src.nearcare_client.types import ProfessionalRecord


class Category(StrEnum):
    DOCTOR = "doctor"
    NURSE = "nurse"
    AMBULANCE = "ambulance"


class FilterSelection(StrEnum):
    ALL = "all"
    DOCTORS = "doctors"
    NURSES = "nurses"
    AMBULANCES = "ambulances"


@dataclass(frozen=True)
class CategoryDisplay:
    label: str
    plural_label: str
    role_label: str | None
    accent: str


CATEGORY_DISPLAY: dict[Category, CategoryDisplay] = {
    Category.DOCTOR: CategoryDisplay(label="Doctor", plural_label="Doctors", role_label=None, accent="#1976D2"),
    Category.NURSE: CategoryDisplay(
        label="Nurse", plural_label="Nurses", role_label="Registered Nurse", accent="#E91E63"
    ),
    Category.AMBULANCE: CategoryDisplay(
        label="Ambulance", plural_label="Ambulances", role_label="Ambulance Service", accent="#F44336"
    ),
}

FILTER_CATEGORIES: dict[FilterSelection, tuple[Category, ...]] = {
    FilterSelection.ALL: (Category.DOCTOR, Category.NURSE, Category.AMBULANCE),
    FilterSelection.DOCTORS: (Category.DOCTOR,),
    FilterSelection.NURSES: (Category.NURSE,),
    FilterSelection.AMBULANCES: (Category.AMBULANCE,),
}


def role_label(record: ProfessionalRecord, category: Category) -> str:
    display = CATEGORY_DISPLAY[category]
    if display.role_label is not None:
        return display.role_label
    return record.get("specialization", "")


def filter_label(selection: FilterSelection) -> str:
    categories = FILTER_CATEGORIES[selection]
    if len(categories) > 1:
        return "All"
    return CATEGORY_DISPLAY[categories[0]].plural_label


def accent_rgb(category: Category) -> tuple[int, int, int]:
    accent = CATEGORY_DISPLAY[category].accent.lstrip("#")
    return int(accent[0:2], 16), int(accent[2:4], 16), int(accent[4:6], 16)

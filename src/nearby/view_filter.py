from typing import Sequence

from src.nearby.aggregator import TaggedProfessional
from src.nearby.categories import FILTER_CATEGORIES, Category, FilterSelection


def select(
    doctors: Sequence[TaggedProfessional],
    nurses: Sequence[TaggedProfessional],
    ambulances: Sequence[TaggedProfessional],
    selected_filter: FilterSelection,
) -> list[TaggedProfessional]:
    sets_by_category = {
        Category.DOCTOR: doctors,
        Category.NURSE: nurses,
        Category.AMBULANCE: ambulances,
    }

    combined: list[TaggedProfessional] = []
    for category in FILTER_CATEGORIES[FilterSelection(selected_filter)]:
        combined.extend(sets_by_category[category])
    return combined


def count_by_filter(
    doctors: Sequence[TaggedProfessional],
    nurses: Sequence[TaggedProfessional],
    ambulances: Sequence[TaggedProfessional],
) -> dict[FilterSelection, int]:
    return {
        FilterSelection.ALL: len(doctors) + len(nurses) + len(ambulances),
        FilterSelection.DOCTORS: len(doctors),
        FilterSelection.NURSES: len(nurses),
        FilterSelection.AMBULANCES: len(ambulances),
    }

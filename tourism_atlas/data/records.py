"""
Category catalogue and typed record variants for the four tourism datasets.

Each dataset arrives as a JSON array of loosely shaped objects. Records are
parsed into one dataclass per category so the attribute that drives the
display category (rating, type, cuisine) is explicit, while every attribute
the dashboard does not know about is carried through untouched in `extra`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Mapping, Optional, Tuple, Type, Union

from tourism_atlas.errors import AtlasConfigError


class Category(str, Enum):
    HOTEL = "hotel"
    BEACH = "beach"
    RESTAURANT = "restaurant"
    CULTURAL_SITE = "culturalSite"


@dataclass(frozen=True)
class CategorySpec:
    category: Category
    data_key: str
    label: str
    icon: str
    stat_label: str
    color: str
    fallback: str


# Ordered: aggregation concatenates categories in this order.
CATEGORY_SPECS: Dict[Category, CategorySpec] = {
    Category.HOTEL: CategorySpec(
        Category.HOTEL, "hotels", "فندق", "fas fa-hotel", "الفنادق", "#1a5276", "غير مصنف"
    ),
    Category.BEACH: CategorySpec(
        Category.BEACH, "beaches", "شاطئ", "fas fa-umbrella-beach", "الشواطئ", "#2980b9", "شاطئ عام"
    ),
    Category.RESTAURANT: CategorySpec(
        Category.RESTAURANT, "restaurants", "مطعم", "fas fa-utensils", "المطاعم", "#f39c12", "متنوع"
    ),
    Category.CULTURAL_SITE: CategorySpec(
        Category.CULTURAL_SITE,
        "culturalSites",
        "موقع ثقافي",
        "fas fa-landmark",
        "المواقع الثقافية",
        "#27ae60",
        "موقع تاريخي",
    ),
}

CATEGORY_ORDER: Tuple[Category, ...] = tuple(CATEGORY_SPECS)


def resolve_category(value: Union[Category, str]) -> Category:
    """Accept a Category, its value ("hotel") or its data key ("hotels")."""
    if isinstance(value, Category):
        return value
    for spec in CATEGORY_SPECS.values():
        if value in (spec.category.value, spec.data_key):
            return spec.category
    raise AtlasConfigError(f"Unknown category: {value!r}")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _format_rating(rating: Any) -> str:
    if isinstance(rating, float) and rating.is_integer():
        return str(int(rating))
    return str(rating).strip()


_BOOKKEEPING_FIELDS = frozenset({"extra", "present_keys"})


@dataclass
class CategoryRecord(ABC):
    name: Optional[str] = None
    city: Optional[str] = None
    status: Optional[str] = None
    date: Any = None
    description: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    # Known keys the source object carried, even when their value was null.
    present_keys: FrozenSet[str] = field(default_factory=frozenset, repr=False, compare=False)

    category: ClassVar[Category]

    @property
    def spec(self) -> CategorySpec:
        return CATEGORY_SPECS[self.category]

    @abstractmethod
    def derived_category(self) -> str:
        """Display category shown in the activity table."""

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a JSON-style mapping, unknown attributes included."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            if f.name in _BOOKKEEPING_FIELDS:
                continue
            value = getattr(self, f.name)
            if value is not None or f.name in self.present_keys:
                data[f.name] = value
        data.update(self.extra)
        return data


@dataclass
class HotelRecord(CategoryRecord):
    rating: Any = None

    category: ClassVar[Category] = Category.HOTEL

    def derived_category(self) -> str:
        if _is_blank(self.rating) or self.rating == 0:
            return self.spec.fallback
        return f"{_format_rating(self.rating)} نجوم"


@dataclass
class BeachRecord(CategoryRecord):
    type: Optional[str] = None

    category: ClassVar[Category] = Category.BEACH

    def derived_category(self) -> str:
        return self.spec.fallback if _is_blank(self.type) else str(self.type)


@dataclass
class RestaurantRecord(CategoryRecord):
    cuisine: Optional[str] = None

    category: ClassVar[Category] = Category.RESTAURANT

    def derived_category(self) -> str:
        return self.spec.fallback if _is_blank(self.cuisine) else str(self.cuisine)


@dataclass
class CulturalSiteRecord(CategoryRecord):
    type: Optional[str] = None

    category: ClassVar[Category] = Category.CULTURAL_SITE

    def derived_category(self) -> str:
        return self.spec.fallback if _is_blank(self.type) else str(self.type)


RECORD_TYPES: Dict[Category, Type[CategoryRecord]] = {
    Category.HOTEL: HotelRecord,
    Category.BEACH: BeachRecord,
    Category.RESTAURANT: RestaurantRecord,
    Category.CULTURAL_SITE: CulturalSiteRecord,
}


def record_from_mapping(category: Union[Category, str], raw: Mapping[str, Any]) -> CategoryRecord:
    """Split a raw JSON object into known attributes and pass-through extras."""
    record_type = RECORD_TYPES[resolve_category(category)]
    known = {f.name for f in fields(record_type) if f.name not in _BOOKKEEPING_FIELDS}
    kwargs: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in known:
            kwargs[key] = value
        else:
            extra[key] = value
    return record_type(extra=extra, present_keys=frozenset(kwargs), **kwargs)


def ensure_record(
    category: Union[Category, str],
    record: Union[CategoryRecord, Mapping[str, Any]],
) -> CategoryRecord:
    resolved = resolve_category(category)
    if isinstance(record, CategoryRecord):
        if record.category is not resolved:
            raise AtlasConfigError(
                f"{type(record).__name__} cannot be stored under category {resolved.value!r}"
            )
        return record
    return record_from_mapping(resolved, record)


NOT_SPECIFIED = "غير محدد"
DEFAULT_STATUS = "pending"
STATUS_TEXT: Dict[str, str] = {
    "active": "نشط",
    "pending": "قيد المراجعة",
    "inactive": "غير نشط",
}


def status_key(status: Any) -> str:
    """Normalise a record status to active/pending/inactive; unknown values are pending."""
    return status if isinstance(status, str) and status in STATUS_TEXT else DEFAULT_STATUS


def status_text(status: Any) -> str:
    return STATUS_TEXT[status_key(status)]

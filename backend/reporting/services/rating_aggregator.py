"""Group flat module ratings and derive averages and star renderings."""
import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from .record_filter import field_text

MAX_STARS = 5
FULL_STAR = '★'
HALF_STAR = '½'
EMPTY_STAR = '☆'


def _get(record: Any, key: str) -> Any:
    if isinstance(record, dict):
        return record.get(key)
    return getattr(record, key, None)


def average_rating(values: Iterable[float]) -> float:
    """Mean rounded half-up to one decimal; an empty sequence averages 0."""
    values = list(values)
    if not values:
        return 0
    total = sum(Decimal(str(v)) for v in values)
    mean = (total / Decimal(len(values))).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
    return float(mean)


class StarRating(NamedTuple):
    full: int
    half: int
    empty: int

    def as_text(self) -> str:
        return FULL_STAR * self.full + HALF_STAR * self.half + EMPTY_STAR * self.empty


def render_stars(mean: float) -> StarRating:
    mean = max(0.0, min(float(mean or 0), float(MAX_STARS)))
    full = math.floor(mean)
    half = 1 if (mean - full) >= 0.5 else 0
    empty = MAX_STARS - full - half
    return StarRating(full, half, empty)


@dataclass
class RatingEntry:
    id: Optional[int]
    rating: float
    comments: Optional[str]
    created_at: Any
    rated_by_name: str


@dataclass
class ModuleRatingGroup:
    module_id: Any
    module_name: str
    program_name: str
    program_code: str
    ratings: List[RatingEntry] = field(default_factory=list)

    @property
    def average(self) -> float:
        return average_rating(r.rating for r in self.ratings)

    @property
    def stars(self) -> StarRating:
        return render_stars(self.average)

    def as_dict(self) -> Dict[str, Any]:
        stars = self.stars
        return {
            'id': self.module_id,
            'module_id': self.module_id,
            'module_name': self.module_name,
            'program_name': self.program_name,
            'program_code': self.program_code,
            'average_rating': self.average,
            'rating_count': len(self.ratings),
            'stars': {'full': stars.full, 'half': stars.half, 'empty': stars.empty, 'text': stars.as_text()},
            'ratings': [
                {
                    'id': r.id,
                    'rating': r.rating,
                    'comments': r.comments,
                    'created_at': r.created_at,
                    'rated_by_name': r.rated_by_name,
                }
                for r in self.ratings
            ],
        }


def group_by_module(records: Iterable[Any]) -> List[ModuleRatingGroup]:
    """One group per distinct module_id, in first-seen order.

    Module metadata comes from the rating that opened the group; later
    ratings for the same module only append to `ratings`.
    """
    groups: Dict[Any, ModuleRatingGroup] = {}
    for record in records:
        module_id = _get(record, 'module_id')
        group = groups.get(module_id)
        if group is None:
            group = ModuleRatingGroup(
                module_id=module_id,
                module_name=field_text(record, 'module_name') or f'Module {module_id}',
                program_name=field_text(record, 'program_name') or 'Unknown Program',
                program_code=field_text(record, 'program_code') or 'N/A',
            )
            groups[module_id] = group
        group.ratings.append(RatingEntry(
            id=_get(record, 'id'),
            rating=_get(record, 'rating'),
            comments=_get(record, 'comments'),
            created_at=_get(record, 'created_at'),
            rated_by_name=field_text(record, 'rated_by_name') or 'Anonymous',
        ))
    return list(groups.values())

from .ordering import Ord, OrdMixin, Ordering, clamp, cmp, eq, ge, gt, le, lt, max_by, min_by
from .semigroup import Semigroup, cmb, cmb_all

__all__ = (
    # Ordering
    "Ord",
    "OrdMixin",
    "Ordering",
    "clamp",
    "cmp",
    "eq",
    "ge",
    "gt",
    "le",
    "lt",
    "max_by",
    "min_by",
    # Semigroup
    "Semigroup",
    "cmb",
    "cmb_all",
)

from .builder import Builder, DictBuilder, IndexedListBuilder, ListBuilder, NoOpBuilder
from .par import ParPolicy, traverse_into_parM
from .traverse import GoRunner, liftM, reduceM, traverse_entries_intoM, traverse_intoM

__all__ = (
    # Builders
    "Builder",
    "DictBuilder",
    "IndexedListBuilder",
    "ListBuilder",
    "NoOpBuilder",
    # Policy
    "ParPolicy",
    # Generic
    "GoRunner",
    "liftM",
    "reduceM",
    "traverse_entries_intoM",
    "traverse_intoM",
    "traverse_into_parM",
)

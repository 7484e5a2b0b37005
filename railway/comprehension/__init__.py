from .step import Halt, Resume, Visit, stepM
from .step_async import step_asyncM

__all__ = (
    "Halt",
    "Resume",
    "Visit",
    "stepM",
    "step_asyncM",
)

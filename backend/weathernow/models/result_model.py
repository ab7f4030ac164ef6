from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union
from pydantic import BaseModel

T = TypeVar("T")
E = TypeVar("E")

class ErrorKind(str, Enum):
    LOOKUP_FAILED = "LOOKUP_FAILED"
    NOT_FOUND = "NOT_FOUND"
    FORECAST_FAILED = "FORECAST_FAILED"
    MALFORMED_FORECAST = "MALFORMED_FORECAST"

class SearchError(BaseModel):
    """Why a search stopped; `message` is shown to the user as-is."""
    kind: ErrorKind
    message: str = ""

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

Result = Union[Ok[T], Err[E]]

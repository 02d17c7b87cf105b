"""Canonical problem categories exposed to API clients.

Each category has exactly one :class:`ProblemType`. The uris are part of the
public contract: clients branch on them, so a published uri is never changed
or reused for another category.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, assert_never

from app.core.config import settings


class ProblemCategory(str, Enum):
    RESOURCE_NOT_FOUND = "resource-not-found"
    RESOURCE_IN_USE = "resource-in-use"
    BUSINESS_RULE_VIOLATION = "business-rule-violation"
    INVALID_PARAMETER = "invalid-parameter"
    UNREADABLE_MESSAGE = "unreadable-message"
    SYSTEM_ERROR = "system-error"


@dataclass(frozen=True, slots=True)
class ProblemType:
    uri: str
    title: str


def _title(category: ProblemCategory) -> str:
    match category:
        case ProblemCategory.RESOURCE_NOT_FOUND:
            return "Resource not found"
        case ProblemCategory.RESOURCE_IN_USE:
            return "Resource in use"
        case ProblemCategory.BUSINESS_RULE_VIOLATION:
            return "Business rule violation"
        case ProblemCategory.INVALID_PARAMETER:
            return "Invalid parameter"
        case ProblemCategory.UNREADABLE_MESSAGE:
            return "Unreadable message"
        case ProblemCategory.SYSTEM_ERROR:
            return "System error"
        case _:
            assert_never(category)


def build_registry(base_uri: str) -> Mapping[ProblemCategory, ProblemType]:
    """Build the read-only category -> ProblemType table.

    Every member of :class:`ProblemCategory` gets an entry, so ``lookup`` has
    no missing case.
    """
    base = base_uri.rstrip("/")
    return MappingProxyType(
        {
            category: ProblemType(uri=f"{base}/{category.value}", title=_title(category))
            for category in ProblemCategory
        }
    )


PROBLEM_TYPES = build_registry(settings.problem_base_uri)


def lookup(category: ProblemCategory) -> ProblemType:
    return PROBLEM_TYPES[category]

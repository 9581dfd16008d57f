"""
Failure classification.

A classifier is either an exception type, matched with ``isinstance`` so
subclasses qualify too, or the canonical name of an exception type, matched
by exact string comparison. Name references cover failure kinds that cannot
be imported where the configuration is written (optional dependencies,
modules loaded later).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

import httpx

FailureClassifier = Union[type[BaseException], str]

# Transient conditions worth failing over on:
# - TimeoutError: connection timed out (OSError with errno ETIMEDOUT and
#   socket.timeout are both mapped onto it by the interpreter)
# - httpx.TimeoutException: connect/read/write/pool timeouts
# - httpx.ConnectError: connection could not be established
DEFAULT_CLASSIFIERS: tuple[FailureClassifier, ...] = (
    TimeoutError,
    httpx.TimeoutException,
    httpx.ConnectError,
)


def canonical_name(kind: type[BaseException]) -> str:
    """Return the name a string classifier must equal to match ``kind``.

    Builtins are referred to by their bare name (``"TimeoutError"``),
    everything else as ``"module.QualName"`` (``"httpx.ConnectError"``).
    """
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


def _accepted_names(kind: type[BaseException]) -> tuple[str, ...]:
    name = canonical_name(kind)
    if kind.__module__ == "builtins":
        # "builtins.TimeoutError" is accepted as well as "TimeoutError"
        return (name, f"builtins.{name}")
    return (name,)


def classifier_matches(classifier: FailureClassifier, error: BaseException) -> bool:
    if isinstance(classifier, str):
        return classifier in _accepted_names(type(error))
    return isinstance(error, classifier)


def is_classified_failure(
    error: BaseException, classifiers: Iterable[FailureClassifier]
) -> bool:
    """Return True if any classifier matches ``error``."""
    return any(classifier_matches(c, error) for c in classifiers)


def describe_classifier(classifier: FailureClassifier) -> str:
    if isinstance(classifier, str):
        return classifier
    return canonical_name(classifier)

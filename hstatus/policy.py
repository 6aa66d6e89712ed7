"""
What a lookup does when its key is not in the table.

Two historical calling conventions exist, a boolean `throw_when_missing` flag
and a `fallback` callable; both collapse into one of the policies below.
"""

import logging
from typing import Any, Callable

from msgspec import Struct

from hstatus.errors import InvalidPolicyError, LookupKind, NotFoundError

logger = logging.getLogger("hstatus")

Fallback = Callable[[Any], Any]


class MissPolicy(Struct, frozen=True, tag=True):
    def on_missing(self, key: Any, kind: LookupKind) -> Any:
        raise NotImplementedError


class Throw(MissPolicy, frozen=True):
    "raise `NotFoundError` carrying the original key"

    def on_missing(self, key: Any, kind: LookupKind) -> Any:
        raise NotFoundError(key, kind)


class ReturnAbsent(MissPolicy, frozen=True):
    "return `None`"

    def on_missing(self, key: Any, kind: LookupKind) -> None:
        return None


class Invoke(MissPolicy, frozen=True):
    "return whatever `fallback(key)` returns"

    fallback: Fallback

    def on_missing(self, key: Any, kind: LookupKind) -> Any:
        logger.debug("%s %r not found, invoking %r", kind, key, self.fallback)
        return self.fallback(key)


THROW = Throw()
RETURN_ABSENT = ReturnAbsent()


def from_flag(throw_when_missing: bool) -> MissPolicy:
    return THROW if throw_when_missing else RETURN_ABSENT


def resolve_policy(
    default: MissPolicy,
    throw_when_missing: bool | None = None,
    fallback: Fallback | None = None,
    policy: MissPolicy | None = None,
) -> MissPolicy:
    """
    Pick the policy for a single lookup, the most specific argument wins:

    `policy` > `fallback` > `throw_when_missing` > `default`
    """
    if policy is not None:
        if not isinstance(policy, MissPolicy):
            raise InvalidPolicyError(policy)
        return policy
    if fallback is not None:
        return Invoke(fallback)
    if throw_when_missing is not None:
        return from_flag(throw_when_missing)
    return default

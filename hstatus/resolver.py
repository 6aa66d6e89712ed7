import warnings
from typing import Any

from msgspec import Struct

from hstatus.config import get_config
from hstatus.policy import THROW, Fallback, MissPolicy, resolve_policy
from hstatus.table import reason_table, reverse_table


class Resolver(Struct, frozen=True):
    """
    Bidirectional lookup between status codes and reason phrases.

    ```python
    resolver = Resolver(policy=ReturnAbsent())
    resolver.code_to_phrase(404)  # "Not Found"
    resolver.code_to_phrase(999)  # None
    ```
    """

    policy: MissPolicy = THROW

    def code_to_phrase(
        self,
        code: int | str,
        throw_when_missing: bool | None = None,
        *,
        fallback: Fallback | None = None,
        policy: MissPolicy | None = None,
    ) -> Any:
        "Returns the reason phrase for `code`, `404` and `'404'` are equivalent"
        phrase = reason_table().get(str(code))
        if phrase is not None:
            return phrase
        miss = resolve_policy(self.policy, throw_when_missing, fallback, policy)
        return miss.on_missing(code, "status code")

    def phrase_to_code(
        self,
        phrase: str,
        throw_when_missing: bool | None = None,
        *,
        fallback: Fallback | None = None,
        policy: MissPolicy | None = None,
    ) -> Any:
        "Returns the status code for `phrase`, compared exactly and case sensitively"
        code = reverse_table().get(phrase)
        if code is not None:
            return code
        miss = resolve_policy(self.policy, throw_when_missing, fallback, policy)
        return miss.on_missing(phrase, "reason phrase")

    def get_status_text(
        self,
        code: int | str,
        throw_when_missing: bool | None = None,
        *,
        fallback: Fallback | None = None,
        policy: MissPolicy | None = None,
    ) -> Any:
        warnings.warn(
            "get_status_text is deprecated, use code_to_phrase instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.code_to_phrase(
            code, throw_when_missing, fallback=fallback, policy=policy
        )


def default_resolver() -> Resolver:
    return Resolver(policy=get_config().policy)


def code_to_phrase(
    code: int | str,
    throw_when_missing: bool | None = None,
    *,
    fallback: Fallback | None = None,
    policy: MissPolicy | None = None,
) -> Any:
    """
    Returns the reason phrase for the given status code.

    On a miss:
    - `throw_when_missing=True` (the default) raises `NotFoundError`
    - `throw_when_missing=False` returns `None`
    - `fallback` is called with `code` and its result returned
    """
    return default_resolver().code_to_phrase(
        code, throw_when_missing, fallback=fallback, policy=policy
    )


def phrase_to_code(
    phrase: str,
    throw_when_missing: bool | None = None,
    *,
    fallback: Fallback | None = None,
    policy: MissPolicy | None = None,
) -> Any:
    """
    Returns the status code for the given reason phrase, e.g. `"Not Found"` -> `404`.

    Miss handling is the same as `code_to_phrase`.
    """
    return default_resolver().phrase_to_code(
        phrase, throw_when_missing, fallback=fallback, policy=policy
    )


def get_status_text(
    code: int | str,
    throw_when_missing: bool | None = None,
    *,
    fallback: Fallback | None = None,
    policy: MissPolicy | None = None,
) -> Any:
    "Deprecated, use `code_to_phrase`"
    warnings.warn(
        "get_status_text is deprecated, use code_to_phrase instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return code_to_phrase(code, throw_when_missing, fallback=fallback, policy=policy)


def is_status(code: int | str) -> bool:
    return str(code) in reason_table()


def is_phrase(phrase: str) -> bool:
    return phrase in reverse_table()

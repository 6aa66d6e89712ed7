from typing import Any, Literal

LookupKind = Literal["status code", "reason phrase"]


class HStatusError(Exception):
    __slots__ = ()
    ...


class NotFoundError(HStatusError, LookupError):
    "Raised when a status code or reason phrase has no entry in the table"

    def __init__(self, key: Any, kind: LookupKind):
        self.key = key
        self.kind = kind
        super().__init__(f"{kind.capitalize()} does not exist: {key}")


class InvalidPolicyError(HStatusError, TypeError):
    def __init__(self, policy: Any):
        super().__init__(f"Invalid miss policy {policy!r}")

from typing import Annotated

from msgspec import Struct
from typing_extensions import Doc

from hstatus.policy import MissPolicy, from_flag


class ConfigBase(Struct, forbid_unknown_fields=True, frozen=True): ...


class LookupConfig(ConfigBase):
    throw_when_missing: Annotated[
        bool,
        Doc("Raise `NotFoundError` on a miss when the caller does not say otherwise"),
    ] = True

    @property
    def policy(self) -> MissPolicy:
        return from_flag(self.throw_when_missing)


DEFAULT_CONFIG = LookupConfig()


def config_registry():
    _config: LookupConfig = DEFAULT_CONFIG

    def _set_config(config: LookupConfig | None = None) -> None:
        """
        ## Set Configuration

        Sets the process wide lookup configuration.

        ### Parameters
        - `config` (Optional[`LookupConfig`]):
            - If provided, module level lookups use it from now on.
            - If `None`, resets the configuration to the default (`DEFAULT_CONFIG`).

        ### Example
        ```python
        set_config(LookupConfig(throw_when_missing=False))
        set_config()  # Reset to default
        ```
        """
        nonlocal _config
        _config = DEFAULT_CONFIG if config is None else config

    def _get_config() -> LookupConfig:
        return _config

    return _set_config, _get_config


set_config, get_config = config_registry()

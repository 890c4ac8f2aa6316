"""ContextVar-based filter configuration for lineblocks.

Config is set once per conversion and read by the converter and the list
flavor factories.

Usage:
    from lineblocks.config import FilterConfig, filter_config_context

    with filter_config_context(FilterConfig(bullet_chars="*")):
        html = convert(source)

Thread Safety:
    ContextVars are thread-local by design, so concurrent conversions with
    different configs never see each other's settings.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Immutable filter configuration.

    Attributes:
        flavors: List flavors to run, in pipeline order
        bullet_chars: Characters that start a bulleted item
        ordered_delimiters: Characters that may follow the number of a
            numbered item

    """

    flavors: tuple[str, ...] = ("bulleted", "numbered")
    bullet_chars: str = "*+-"
    ordered_delimiters: str = "."

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FilterConfig":
        """Create FilterConfig from a dictionary.

        Unknown keys are ignored. A list of flavors becomes a tuple.

        Example:
            >>> FilterConfig.from_dict({"flavors": ["numbered"], "x": 1}).flavors
            ('numbered',)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "flavors" in filtered:
            filtered["flavors"] = tuple(filtered["flavors"])
        return cls(**filtered)


_DEFAULT_CONFIG: FilterConfig = FilterConfig()

_filter_config: ContextVar[FilterConfig] = ContextVar(
    "filter_config",
    default=_DEFAULT_CONFIG,
)


def get_filter_config() -> FilterConfig:
    """Get the filter configuration of the current context."""
    return _filter_config.get()


def set_filter_config(config: FilterConfig) -> None:
    """Set filter configuration for the current context."""
    _filter_config.set(config)


def reset_filter_config() -> None:
    """Reset to the default configuration."""
    _filter_config.set(_DEFAULT_CONFIG)


@contextmanager
def filter_config_context(config: FilterConfig) -> Iterator[None]:
    """Use ``config`` inside the block, restoring the previous one after.

    The previous config is restored even if the block raises.
    """
    previous = _filter_config.get()
    _filter_config.set(config)
    try:
        yield
    finally:
        _filter_config.set(previous)


__all__ = [
    "FilterConfig",
    "filter_config_context",
    "get_filter_config",
    "reset_filter_config",
    "set_filter_config",
]

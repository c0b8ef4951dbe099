"""Choice lists for select, radio and checkbox settings.

A setting's ``options`` column is either a literal list such as
``"0=disabled|1=enabled"`` or a directive ``"func:<provider>"`` naming a
callable registered with an :class:`OptionsRegistry`. Providers may be
path-qualified (``"func:blog/categories"``); the full name is tried first,
then the last path segment.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional

from .logging_config import get_logger
from .models.setting import OPTIONS_DIRECTIVE

logger = get_logger(__name__)

OptionsProvider = Callable[[], Any]
Translator = Callable[[str], Optional[str]]

NONE_LABEL = "-- None --"


class OptionsRegistry:
    """Named callables producing option lists at read time."""

    def __init__(self) -> None:
        self._providers: dict[str, OptionsProvider] = {}

    def register(self, name: str, provider: Optional[OptionsProvider] = None):
        """Register ``provider`` under ``name``; usable as a decorator."""

        def decorator(func: OptionsProvider) -> OptionsProvider:
            self._providers[name] = func
            return func

        if provider is not None:
            return decorator(provider)
        return decorator

    def resolve(self, name: str) -> Optional[OptionsProvider]:
        provider = self._providers.get(name)
        if provider is None and "/" in name:
            provider = self._providers.get(name.rsplit("/", 1)[1])
        return provider

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) is not None


def _split_pair(item: str) -> tuple[str, str]:
    value, sep, label = item.partition("=")
    return (value, label) if sep else (item, item)


def _as_pairs(produced: Any) -> Iterable[tuple[str, str]]:
    if isinstance(produced, Mapping):
        return [(str(value), str(label)) for value, label in produced.items()]
    if isinstance(produced, str):
        return [_split_pair(item) for item in produced.split("|")]
    pairs = []
    for item in produced:
        if isinstance(item, str):
            pairs.append(_split_pair(item))
        else:
            value, label = item
            pairs.append((str(value), str(label)))
    return pairs


def parse_options(
    raw: Optional[str],
    registry: Optional[OptionsRegistry] = None,
    *,
    none_label: str = NONE_LABEL,
    translate: Optional[Translator] = None,
) -> dict[str, str]:
    """Turn a raw ``options`` column into an ordered ``{value: label}`` mapping.

    ``translate`` is offered every label; a non-None result replaces it.
    """
    if not raw:
        return {}

    if raw.startswith(OPTIONS_DIRECTIVE):
        name = raw[len(OPTIONS_DIRECTIVE):].strip()
        provider = registry.resolve(name) if registry is not None else None
        if provider is None:
            logger.warning("No options provider registered for %r", name)
            return {"": none_label}
        pairs = _as_pairs(provider())
    else:
        pairs = _as_pairs(raw)

    options: dict[str, str] = {}
    for value, label in pairs:
        if translate is not None:
            translated = translate(label)
            if translated is not None:
                label = translated
        options[value] = label
    return options


__all__ = ["NONE_LABEL", "OptionsRegistry", "parse_options"]

"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import enum
import functools
import operator
import os
import types
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from gelf_logging.config.settings.base import Settings
from gelf_logging.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each field ``name`` is read from ``{PREFIX}_{NAME}``. Values are coerced
    from the field's annotation: booleans accept ``1/true/yes/on``, enums
    take member names, flags take ``A|B`` (or ``A,B``), and mappings take
    ``key=value,key2=value2`` with numeric values kept numeric.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, hints.get(field.name, str))
            except (KeyError, ValueError) as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = typing.get_origin(type_hint)
        if origin in (typing.Union, types.UnionType):
            non_null = [arg for arg in typing.get_args(type_hint) if arg is not type(None)]
            return self._coerce(value, non_null[0]) if non_null else value
        if type_hint is bool:
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int:
            return int(value)
        if type_hint is float:
            return float(value)
        if isinstance(type_hint, type) and issubclass(type_hint, enum.Flag):
            names = [n.strip().upper() for n in value.replace(",", "|").split("|") if n.strip()]
            return functools.reduce(operator.or_, (type_hint[n] for n in names), type_hint(0))
        if isinstance(type_hint, type) and issubclass(type_hint, enum.Enum):
            return type_hint[value.strip().upper()]
        if origin in (dict, Mapping):
            return dict(self._pair(item) for item in value.split(",") if item.strip())
        if origin is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value

    @staticmethod
    def _pair(item: str) -> tuple[str, Any]:
        key, sep, raw = item.partition("=")
        if not sep:
            raise ValueError(f"expected key=value, got {item.strip()!r}")
        raw = raw.strip()
        for convert in (int, float):
            try:
                return key.strip(), convert(raw)
            except ValueError:
                pass
        return key.strip(), raw


__all__ = ["EnvSettingsLoader", "SettingsLoader"]

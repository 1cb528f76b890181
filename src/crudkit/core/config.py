# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Layered configuration: packaged defaults, YAML/TOML files, profiles, env vars.

Keys are dot paths (``crudkit.paging.max-page-size``).  Every key can be
overridden by an environment variable named after it: the ``crudkit.``
prefix is dropped, the rest upper-cased with dots and dashes turned into
underscores, and ``CRUDKIT_`` put in front (``CRUDKIT_PAGING_MAX_PAGE_SIZE``).
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

T = TypeVar("T")

_PREFIX_ATTR = "__crudkit_config_prefix__"
_DEFAULTS_RESOURCE = "crudkit-defaults.yaml"
_REFERENCE = re.compile(r"\$\{(?P<name>[^}:]+)(?::(?P<fallback>[^}]*))?\}")
_TRUTHY = frozenset({"true", "1", "yes", "on"})


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Declare the configuration section a dataclass or Pydantic model binds to.

    Usage:
        @config_properties(prefix="crudkit.paging")
        @dataclass
        class PagingProperties:
            default_page_size: int = 10
    """

    def mark(cls: type[T]) -> type[T]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return mark


def env_name(key: str) -> str:
    """Environment variable that overrides *key*."""
    stem = key.removeprefix("crudkit.")
    return "CRUDKIT_" + re.sub(r"[.\-]", "_", stem).upper()


def _merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        merged[key] = _merge(current, value) if isinstance(current, Mapping) and isinstance(value, Mapping) else value
    return merged


def _read(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        return tomllib.loads(path.read_text()) or {}
    return yaml.safe_load(path.read_text()) or {}


def _coerce(value: Any, expected: Any) -> Any:
    # Environment overrides and placeholders always arrive as strings.
    if not isinstance(value, str):
        return value
    if expected is bool:
        return value.strip().lower() in _TRUTHY
    if expected in (int, float):
        return expected(value)
    return value


class Config:
    """Read-only configuration tree.

    Lookup order, first hit wins:

    1. ``CRUDKIT_*`` environment variable for the key
    2. profile overlays, then the main file
    3. packaged defaults (``crudkit-defaults.yaml``)
    4. defaults declared on the bound properties class
    """

    def __init__(self, data: Mapping[str, Any] | None = None, sources: list[str] | None = None) -> None:
        self._tree: dict[str, Any] = dict(data or {})
        self._sources = list(sources or [])

    @property
    def loaded_sources(self) -> list[str]:
        """Where the tree came from, lowest precedence first."""
        return list(self._sources)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def _packaged_defaults() -> dict[str, Any]:
        resource = importlib.resources.files("crudkit.resources").joinpath(_DEFAULTS_RESOURCE)
        return yaml.safe_load(resource.read_text()) or {}

    @classmethod
    def defaults(cls) -> Config:
        """Only the settings shipped with the package."""
        return cls(cls._packaged_defaults(), [f"{_DEFAULTS_RESOURCE} (defaults)"])

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Layer *path* and its profile overlays over the packaged defaults.

        A profile ``dev`` for ``crudkit.yaml`` reads ``crudkit-dev.yaml`` from
        the same directory.  A missing main file leaves only the defaults;
        missing overlays are skipped.
        """
        path = Path(path)
        layers: list[tuple[str, dict[str, Any]]] = []
        if load_defaults:
            layers.append((f"{_DEFAULTS_RESOURCE} (defaults)", cls._packaged_defaults()))

        if path.is_file():
            layers.append((str(path), _read(path)))
            for profile in active_profiles or ():
                overlay = path.with_name(f"{path.stem}-{profile}{path.suffix}")
                if overlay.is_file():
                    layers.append((f"{overlay} (profile: {profile})", _read(overlay)))

        tree: dict[str, Any] = {}
        for _, layer in layers:
            tree = _merge(tree, layer)
        return cls(tree, [name for name, _ in layers])

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _node(self, key: str) -> Any:
        node: Any = self._tree
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """Value at *key*, or *default* when neither env nor tree has it.

        String values may reference ``${ENV_VAR}``, ``${other.key}`` or
        ``${name:fallback}``.
        """
        override = os.environ.get(env_name(key))
        if override is not None:
            return override
        value = self._node(key)
        if value is None:
            return default
        if isinstance(value, str):
            return self._interpolate(value, frozenset({key}))
        return value

    def _interpolate(self, text: str, resolving: frozenset[str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            name, fallback = match.group("name"), match.group("fallback")
            if name in os.environ:
                return os.environ[name]
            if name in resolving:
                raise ValueError(f"Circular placeholder reference to '{name}' in '{text}'")
            found = self._node(name)
            if found is not None:
                return self._interpolate(str(found), resolving | {name})
            if fallback is not None:
                return fallback
            raise ValueError(f"Cannot resolve placeholder '{match.group(0)}': not found in environment or config")

        return _REFERENCE.sub(substitute, text)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """The mapping under *prefix*, or ``{}``."""
        node = self._node(prefix)
        return dict(node) if isinstance(node, Mapping) else {}

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind(self, config_cls: type[T]) -> T:
        """Build a ``@config_properties`` class from its section.

        Section keys may be dashed (``max-page-size``) or underscored;
        fields without a value keep the class default.
        """
        prefix = getattr(config_cls, _PREFIX_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        is_model = isinstance(config_cls, type) and issubclass(config_cls, BaseModel)
        names = list(config_cls.model_fields) if is_model else [f.name for f in dataclasses.fields(config_cls)]  # type: ignore[arg-type]

        values: dict[str, Any] = {}
        for name in names:
            for spelling in (name, name.replace("_", "-")):
                value = self.get(f"{prefix}.{spelling}")
                if value is not None:
                    values[name] = value
                    break

        if is_model:
            try:
                return config_cls.model_validate(values)  # type: ignore[attr-defined]
            except ValidationError as exc:
                raise ValueError(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
                ) from exc

        hints = get_type_hints(config_cls)
        return config_cls(**{name: _coerce(value, hints.get(name)) for name, value in values.items()})

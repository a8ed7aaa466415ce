"""
Catalog registry: loads the unit presets, connection descriptions and
calculator defaults from YAML at startup, validates them, and exposes a
read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
Nothing writes to the registry after startup. Preset sizes are reference
data only; the solvers take sizes as plain numbers and never consult the
catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from coursecalc.utilities.types import (
    Axis,
    ConnectionType,
    HeightConnection,
    LengthConnection,
    LengthUnit,
    connections_for_axis,
    parse_connection,
)

from .types import CUSTOM_PRESET, CalculatorDefaults, ConnectionInfo, UnitPreset

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class CatalogRegistry:
    """
    Read-only registry of the catalog lookup tables.

    Public dict attributes are wrapped in MappingProxyType after loading.
    Preset order follows the YAML file; the first preset seeds a fresh
    calculator.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        self._preset_errors: list[str] = []

        self.presets: MappingProxyType[str, UnitPreset]
        self.connections: MappingProxyType[ConnectionType, ConnectionInfo]
        self.defaults: CalculatorDefaults

        self._load_all()
        self._validate()
        logger.debug(
            "Loaded catalog from %s: %d presets, %d connection types",
            data_dir,
            len(self.presets),
            len(self.connections),
        )

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Catalog data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse catalog data file {path}: {exc}") from exc

    def _load_all(self) -> None:
        self._load_presets()
        self._load_connections()
        self._load_defaults()

    def _load_presets(self) -> None:
        data = self._load_yaml("unit_presets.yaml")
        result: dict[str, UnitPreset] = {}
        for entry in data["entries"]:
            name = str(entry["name"]).strip()
            if name in result:
                self._preset_errors.append(f"preset {name!r} is defined more than once")
                continue
            result[name] = UnitPreset(
                name=name,
                length_mm=float(entry["length_mm"]),
                height_mm=float(entry["height_mm"]),
            )
        self.presets = MappingProxyType(result)

    def _load_connections(self) -> None:
        data = self._load_yaml("connection_types.yaml")
        result: dict[ConnectionType, ConnectionInfo] = {}
        for entry in data["entries"]:
            axis = Axis(entry["axis"])
            connection = parse_connection(axis, entry["id"])
            result[connection] = ConnectionInfo(
                id=connection,
                axis=axis,
                label=entry["label"],
                description=entry["description"].strip(),
            )
        self.connections = MappingProxyType(result)

    def _load_defaults(self) -> None:
        data = self._load_yaml("defaults.yaml")
        self.defaults = CalculatorDefaults(
            mortar_joint_mm=float(data["mortar_joint_mm"]),
            target_dimension=float(data["target_dimension"]),
            target_unit=LengthUnit(data["target_unit"]),
            unit_count=float(data["unit_count"]),
            output_unit=LengthUnit(data["output_unit"]),
        )

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if a
        table is incomplete or holds values no calculation could use.
        """
        errors: list[str] = list(self._preset_errors)
        self._check_presets(errors)
        self._check_connection_completeness(errors)
        self._check_defaults(errors)
        if errors:
            raise ValueError(
                "Catalog validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_presets(self, errors: list[str]) -> None:
        if not self.presets:
            errors.append("unit_presets: at least one preset is required")
        if CUSTOM_PRESET in self.presets:
            errors.append(f"preset name {CUSTOM_PRESET!r} is reserved for free-form sizes")
        for preset in self.presets.values():
            if preset.length_mm <= 0 or preset.height_mm <= 0:
                errors.append(
                    f"preset {preset.name!r}: sizes must be positive, got "
                    f"{preset.length_mm} x {preset.height_mm}"
                )

    def _check_connection_completeness(self, errors: list[str]) -> None:
        """Every connection enum member must have exactly one description."""
        for member in (*LengthConnection, *HeightConnection):
            if member not in self.connections:
                errors.append(
                    f"connection {member.value!r} ({member.axis.value}): "
                    "no entry in connection_types"
                )

    def _check_defaults(self, errors: list[str]) -> None:
        d = self.defaults
        if d.mortar_joint_mm < 0:
            errors.append(f"defaults: mortar_joint_mm must be >= 0, got {d.mortar_joint_mm}")
        if d.target_dimension <= 0:
            errors.append(f"defaults: target_dimension must be positive, got {d.target_dimension}")
        if d.unit_count <= 0:
            errors.append(f"defaults: unit_count must be positive, got {d.unit_count}")

    # ── Query API ──────────────────────────────────────────────────────────────

    def preset_names(self) -> list[str]:
        """Preset names in catalog order."""
        return list(self.presets)

    def first_preset(self) -> UnitPreset:
        return next(iter(self.presets.values()))

    def get_preset(self, name: str) -> UnitPreset:
        """Return the preset called *name*.

        Raises KeyError for unknown names, including the custom sentinel,
        which has no sizes of its own.
        """
        try:
            return self.presets[name]
        except KeyError:
            raise KeyError(f"Unknown unit preset: {name!r}") from None

    def connection_info(self, connection: ConnectionType) -> ConnectionInfo:
        """Return the label and description for *connection*."""
        return self.connections[connection]

    def connections_for(self, axis: Axis) -> list[ConnectionInfo]:
        """Descriptions of every connection on *axis*, in enum order."""
        return [self.connections[c] for c in connections_for_axis(axis)]


# ── Module-level singleton ─────────────────────────────────────────────────────

_registry: CatalogRegistry = CatalogRegistry()


def get_registry() -> CatalogRegistry:
    """Return the module-level registry singleton."""
    return _registry

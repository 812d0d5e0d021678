"""Load noise presets from YAML configuration files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.color import RGB, hex_to_rgb
from .preset import NoisePreset

logger = logging.getLogger(__name__)


def default_presets_dir() -> Path:
    """Get the bundled presets directory (assets/presets/ at the project root)."""
    return Path(__file__).parent.parent.parent.parent / "assets" / "presets"


class PresetLoader:
    """Loads noise preset definitions from YAML files.

    YAML format:
    ```yaml
    name: clouds
    noise:
      type: perlin
      seed: 7
    fractal:
      mode: fbm
      octaves: 5
      persistence: 0.5
      lacunarity: 2.0
    size: [256, 256]
    scale: 4.0
    offset: [0.0, 0.0]
    colors:
      low: "#1a2a5a"
      high: [240, 240, 255]
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for preset YAML files.
                         Defaults to ['assets/presets/'] relative to project root.
        """
        if search_paths is None:
            self.search_paths = [default_presets_dir()]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._cache: dict[str, NoisePreset] = {}

    def load(self, name: str) -> NoisePreset:
        """Load a preset by name.

        Searches for {name}.yaml in search paths.

        Args:
            name: Preset name (without .yaml extension)

        Returns:
            NoisePreset instance

        Raises:
            FileNotFoundError: If preset YAML not found
            ValueError: If YAML format is invalid
        """
        if name in self._cache:
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Preset '{name}' not found in search paths: {self.search_paths}"
            )

        preset = self.load_file(yaml_path)
        self._cache[name] = preset
        return preset

    def load_file(self, path: Path) -> NoisePreset:
        """Load a preset from an explicit YAML file path (not cached)."""
        logger.debug("Loading preset from %s", path)
        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Preset file {path} must contain a mapping")
        data.setdefault("name", Path(path).stem)
        return self.parse(data)

    def available(self) -> list[str]:
        """Names of all presets found in the search paths."""
        names = set()
        for search_path in self.search_paths:
            if search_path.is_dir():
                names.update(p.stem for p in search_path.glob("*.yaml"))
        return sorted(names)

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file for preset name."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def parse(self, data: dict[str, Any]) -> NoisePreset:
        """Parse a preset definition from YAML data.

        Raises:
            ValueError: If a section has the wrong shape or a value cannot
                be converted
        """
        noise_data = self._section(data, "noise")
        fractal_data = self._section(data, "fractal")

        size = self._pair(data, "size", [256, 256])
        offset = self._pair(data, "offset", [0.0, 0.0])
        seed = noise_data.get("seed")
        z = data.get("z")

        return NoisePreset(
            name=str(data.get("name", "unnamed")),
            noise_type=noise_data.get("type", "perlin"),
            seed=self._convert(int, seed, "seed") if seed is not None else None,
            fractal=fractal_data.get("mode", "fbm"),
            octaves=self._convert(int, fractal_data.get("octaves", 4), "octaves"),
            persistence=self._convert(float, fractal_data.get("persistence", 0.5), "persistence"),
            lacunarity=self._convert(float, fractal_data.get("lacunarity", 2.0), "lacunarity"),
            size=(self._convert(int, size[0], "size"), self._convert(int, size[1], "size")),
            scale=self._convert(float, data.get("scale", 4.0), "scale"),
            offset=(self._convert(float, offset[0], "offset"), self._convert(float, offset[1], "offset")),
            z=self._convert(float, z, "z") if z is not None else None,
            colors=self._parse_colors(data.get("colors")),
        )

    def _section(self, data: dict[str, Any], key: str) -> dict[str, Any]:
        """Return a nested mapping such as 'noise' or 'fractal'."""
        section = data.get(key, {})
        if not isinstance(section, dict):
            raise ValueError(f"Section '{key}' must be a mapping, got {section!r}")
        return section

    def _pair(self, data: dict[str, Any], key: str, default: list[float]) -> list[Any]:
        """Return a two-entry list such as 'size' or 'offset'."""
        value = data.get(key, default)
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ValueError(f"'{key}' must be a list of two numbers, got {value!r}")
        return list(value)

    def _convert(self, kind: type, value: Any, key: str) -> Any:
        """Convert a scalar, rejecting booleans and lossy float-to-int casts."""
        if isinstance(value, bool):
            raise ValueError(f"Invalid {key}: {value!r}")
        if kind is int and isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{key} must be an integer, got {value!r}")
        try:
            return kind(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid {key}: {value!r}") from None

    def _parse_colors(self, data: dict[str, Any] | None) -> tuple[RGB, RGB] | None:
        """Convert the colors section to a (low, high) pair of RGB tuples."""
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ValueError(f"Section 'colors' must be a mapping, got {data!r}")
        if "low" not in data or "high" not in data:
            raise ValueError("Colors must define both 'low' and 'high'")
        return (self._parse_color(data["low"]), self._parse_color(data["high"]))

    def _parse_color(self, value: Any) -> RGB:
        """Accept '#rrggbb' / '#rgb' strings or [r, g, b] lists."""
        if isinstance(value, str):
            return hex_to_rgb(value)
        if isinstance(value, (list, tuple)) and len(value) == 3:
            return tuple(self._convert(int, c, "colour channel") for c in value)
        raise ValueError(f"Invalid colour: {value!r}")

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()

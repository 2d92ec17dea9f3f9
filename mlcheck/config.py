"""Configuration for mlcheck."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, Union
import os

import yaml

from mlcheck.exceptions import MlcheckConfigError
from mlcheck.models.enums import CountingMode, MatchPosition


@dataclass
class MultilineConfig:
    """Multiline rule and run settings."""

    # Multiline rule
    pattern: str = ""
    """Regular expression applied to every sample line."""

    negate: bool = True
    """Invert the raw pattern match before classification."""

    match: str = MatchPosition.AFTER.value
    """Where non-matching lines attach ('after' or 'before'). Informational."""

    # Boundary counting
    counting_mode: Union[CountingMode, str] = CountingMode.CONFIRMED
    """Policy used by the boundary tracker to count groups."""

    # Input
    sample_path: Optional[str] = None
    """Path of the sample file to check."""

    # Logging
    verbose: bool = False
    """Enable verbose logging output."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.pattern, str):
            raise MlcheckConfigError(
                f"pattern must be a string, got {type(self.pattern).__name__}",
                "pattern",
            )

        if not isinstance(self.negate, bool):
            raise MlcheckConfigError(
                f"negate must be a boolean, got {self.negate!r}",
                "negate",
            )

        if isinstance(self.match, MatchPosition):
            self.match = self.match.value

        valid_positions = [p.value for p in MatchPosition]
        if str(self.match).lower() not in valid_positions:
            raise MlcheckConfigError(
                f"match must be one of {valid_positions}, got {self.match!r}",
                "match",
            )
        self.match = str(self.match).lower()

        if not isinstance(self.counting_mode, CountingMode):
            try:
                self.counting_mode = CountingMode.from_string(str(self.counting_mode))
            except ValueError:
                raise MlcheckConfigError(
                    f"counting_mode must be one of {[m.value for m in CountingMode]}, "
                    f"got {self.counting_mode!r}",
                    "counting_mode",
                )

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], prospector_index: int = 0
    ) -> "MultilineConfig":
        """Create configuration from dictionary.

        Accepts flat keys or a Filebeat config, where the multiline rule and
        sample path come from ``filebeat.prospectors`` (or ``filebeat.inputs``).

        Args:
            data: Parsed configuration mapping
            prospector_index: Which prospector/input to read the rule from
        """
        flat_data: Dict[str, Any] = {}

        # Extract from the Filebeat layout if present
        if "filebeat" in data:
            filebeat = data["filebeat"] or {}
            if not isinstance(filebeat, dict):
                raise MlcheckConfigError(
                    f"filebeat must be a mapping, got {type(filebeat).__name__}",
                    "filebeat",
                )
            prospector = cls._select_prospector(filebeat, prospector_index)

            multiline = prospector.get("multiline") or {}
            if not isinstance(multiline, dict):
                raise MlcheckConfigError(
                    f"multiline must be a mapping, got {type(multiline).__name__}",
                    "multiline",
                )
            if "pattern" in multiline:
                flat_data["pattern"] = multiline["pattern"]
            # Filebeat treats a missing negate as false
            flat_data["negate"] = multiline.get("negate", False)
            if "match" in multiline:
                flat_data["match"] = multiline["match"]

            paths = prospector.get("paths") or []
            if not isinstance(paths, list):
                raise MlcheckConfigError(
                    f"paths must be a list, got {type(paths).__name__}", "paths"
                )
            if paths:
                if not isinstance(paths[0], str):
                    raise MlcheckConfigError(
                        f"paths entries must be strings, got {type(paths[0]).__name__}",
                        "paths",
                    )
                flat_data["sample_path"] = paths[0]

        # Also accept flat keys
        for key in [
            "pattern",
            "negate",
            "match",
            "counting_mode",
            "sample_path",
            "verbose",
        ]:
            if key in data and key not in flat_data:
                flat_data[key] = data[key]

        return cls(**flat_data)

    @staticmethod
    def _select_prospector(filebeat: Dict[str, Any], index: int) -> Dict[str, Any]:
        """Pick one prospector/input section from a Filebeat config."""
        prospectors = filebeat.get("prospectors") or filebeat.get("inputs") or []
        if not isinstance(prospectors, list):
            raise MlcheckConfigError(
                f"prospectors must be a list, got {type(prospectors).__name__}",
                "prospectors",
            )
        if len(prospectors) == 0:
            raise MlcheckConfigError(
                "Must have at least one prospector config!", "prospectors"
            )

        if not 0 <= index < len(prospectors):
            raise MlcheckConfigError(
                f"Prospector index {index} out of range "
                f"(config has {len(prospectors)})",
                "prospectors",
            )

        prospector = prospectors[index] or {}
        if not isinstance(prospector, dict):
            raise MlcheckConfigError(
                f"Prospector {index} must be a mapping, got {type(prospector).__name__}",
                "prospectors",
            )

        return prospector

    @classmethod
    def from_yaml(cls, path: str, prospector_index: int = 0) -> "MultilineConfig":
        """Load configuration from YAML file."""
        file_path = Path(path)
        if not file_path.exists():
            raise MlcheckConfigError(f"Config file not found: {path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MlcheckConfigError(f"Invalid YAML in config file: {e}")

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise MlcheckConfigError(
                f"Config file must contain a mapping, got {type(data).__name__}"
            )

        # Handle environment variable substitution
        data = cls._substitute_env_vars(data)

        return cls.from_dict(data, prospector_index=prospector_index)

    @classmethod
    def _substitute_env_vars(cls, data: Any) -> Any:
        """Recursively substitute environment variables in config."""
        if isinstance(data, dict):
            return {k: cls._substitute_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars(item) for item in data]
        elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
            env_var = data[2:-1]
            return os.environ.get(env_var, "")
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "pattern": self.pattern,
            "negate": self.negate,
            "match": self.match,
            "counting_mode": CountingMode(self.counting_mode).value,
            "sample_path": self.sample_path,
            "verbose": self.verbose,
        }

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_CONFIG_FILENAME = "bindgen.json"


class GeneratorConfig:
    """
    Settings for a generation run, loaded from an optional bindgen.json.

    Every key is optional; anything not present in the file keeps its default.
    """

    DEFAULTS: Dict[str, Any] = {
        'helpers_include': 'QtScriptBindingsHelpers.h',
        'output_pattern': 'qscript_{class_name}.cpp',
        'indent_size': 4,
        'extra_pod_types': [],
    }

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._config: Dict[str, Any] = dict(self.DEFAULTS)
        if values:
            for key, value in values.items():
                if key not in self.DEFAULTS:
                    raise KeyError(f"Unknown setting '{key}' in {DEFAULT_CONFIG_FILENAME}")
                self._config[key] = value

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'GeneratorConfig':
        """
        Load settings from a JSON file.

        Args:
            config_path: Explicit path to the file. If None, bindgen.json in the
                current directory is used when present, otherwise defaults.

        Raises:
            FileNotFoundError: If an explicit config_path does not exist
        """
        if config_path is None:
            candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
            if not candidate.exists():
                return cls()
            config_path = candidate

        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"{DEFAULT_CONFIG_FILENAME} not found at {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            return cls(json.load(f))

    def get(self, key: str) -> Any:
        if key not in self._config:
            raise KeyError(f"Setting '{key}' not found in {DEFAULT_CONFIG_FILENAME}")
        return self._config[key]

    @property
    def helpers_include(self) -> str:
        return self.get('helpers_include')

    @property
    def output_pattern(self) -> str:
        return self.get('output_pattern')

    @property
    def indent_size(self) -> int:
        return int(self.get('indent_size'))

    @property
    def extra_pod_types(self) -> List[str]:
        return list(self.get('extra_pod_types'))

    def output_filename(self, class_name: str) -> str:
        return self.output_pattern.format(class_name=class_name)

from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml_model(path: str) -> Dict[str, Any]:
    """Read a host model document. JSON documents load too, being valid YAML."""
    model_path = Path(path)
    if not model_path.exists():
        raise FileNotFoundError(f"Host model file not found: {path}")

    with model_path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ValueError(f"Host model file {path} is not valid YAML/JSON: {exc}") from exc

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError("Host model document must parse to an object/map at root.")

    return data

"""Serialises a configuration into the JSON document read by the launcher."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jsonschema import validate

from .config import Config
from .models import LlapConfiguration

logger = logging.getLogger(__name__)

_OPTIONAL_STRING = {"type": ["string", "null"]}

CONFIGURATION_SCHEMA = {
    "type": "object",
    "properties": {
        "name": _OPTIONAL_STRING,
        "instances": {"type": "integer", "minimum": 1},
        "directory": _OPTIONAL_STRING,
        "executors": {"type": "integer"},
        "cache_size": {"type": "integer"},
        "container_size": {"type": "integer"},
        "heap_size": {"type": "integer"},
        "aux_jars": _OPTIONAL_STRING,
        "include_hbase_jars": {"type": "boolean"},
        "properties": {
            "type": "object",
            "additionalProperties": {"type": "string"}
        },
        "java_args": _OPTIONAL_STRING,
        "log_level": _OPTIONAL_STRING,
        "chaos_monkey": _OPTIONAL_STRING,
        "slider_keytab_dir": _OPTIONAL_STRING,
        "slider_keytab": _OPTIONAL_STRING,
        "slider_principal": _OPTIONAL_STRING,
        "slider_default_keytab": {"type": "boolean"}
    },
    "required": ["instances", "executors", "cache_size", "container_size",
                 "heap_size", "include_hbase_jars", "properties"],
    "additionalProperties": False
}


def to_document(configuration: LlapConfiguration) -> Dict[str, Any]:
    """Return the hand-off document, checked against CONFIGURATION_SCHEMA."""
    document = configuration.to_dict()
    validate(instance=document, schema=CONFIGURATION_SCHEMA)
    return document


def dumps(configuration: LlapConfiguration) -> str:
    return json.dumps(to_document(configuration), indent=2)


def write_document(
    configuration: LlapConfiguration,
    directory: Optional[Union[str, Path]] = None
) -> Path:
    """Write the hand-off document into directory, or the configured one.

    Raises:
        ValueError: If neither directory nor configuration.directory is set
    """
    target = directory or configuration.directory
    if not target:
        raise ValueError("No directory given for the launcher configuration")

    path = Path(target) / Config.HANDOFF_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(dumps(configuration))
    logger.info(f"Wrote launcher configuration to {path}")
    return path

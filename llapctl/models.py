"""Data models for the LLAP launcher."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .errors import ValidationError

UNSPECIFIED = -1


@dataclass(frozen=True)
class LlapConfiguration:
    """Validated request for an LLAP cluster.

    Sizes are in bytes. ``UNSPECIFIED`` (-1) in a numeric field means the
    launcher should pick its own default.

    ``java_args``, ``log_level``, ``chaos_monkey`` and the ``slider_*``
    fields are captured verbatim and never interpreted here; their
    grammar belongs to the launcher.

    Instances compare by value but are not hashable, since
    ``properties`` is a mapping.
    """
    __hash__ = None

    instances: int
    name: Optional[str] = None
    directory: Optional[str] = None
    executors: int = UNSPECIFIED
    cache_size: int = UNSPECIFIED
    container_size: int = UNSPECIFIED
    heap_size: int = UNSPECIFIED
    aux_jars: Optional[str] = None
    include_hbase_jars: bool = True
    properties: Mapping[str, str] = field(default_factory=dict)
    java_args: Optional[str] = None
    log_level: Optional[str] = None
    chaos_monkey: Optional[str] = None
    slider_keytab_dir: Optional[str] = None
    slider_keytab: Optional[str] = None
    slider_principal: Optional[str] = None
    slider_default_keytab: bool = False

    def __post_init__(self):
        if self.instances <= 0:
            raise ValidationError(
                f"Invalid configuration: {self.instances} (should be greater than 0)"
            )
        # Detach from the caller's dict and make it read-only
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view, suitable for JSON serialisation."""
        return {
            "name": self.name,
            "instances": self.instances,
            "directory": self.directory,
            "executors": self.executors,
            "cache_size": self.cache_size,
            "container_size": self.container_size,
            "heap_size": self.heap_size,
            "aux_jars": self.aux_jars,
            "include_hbase_jars": self.include_hbase_jars,
            "properties": dict(self.properties),
            "java_args": self.java_args,
            "log_level": self.log_level,
            "chaos_monkey": self.chaos_monkey,
            "slider_keytab_dir": self.slider_keytab_dir,
            "slider_keytab": self.slider_keytab,
            "slider_principal": self.slider_principal,
            "slider_default_keytab": self.slider_default_keytab,
        }

"""
Turns an LLAP launcher command line into a validated LlapConfiguration.
"""
import logging
from typing import Dict, Iterable, Mapping, Optional, Sequence

import click

from .config import Config
from .errors import ParseSyntaxError
from .models import LlapConfiguration
from .options import OptionSchema, default_schema
from .utils import parse_int, parse_suffixed, redact_sensitive_data

logger = logging.getLogger(__name__)


def parse_properties(pairs: Iterable[str]) -> Dict[str, str]:
    """Collect repeated ``property=value`` pairs into a dict.

    A pair without ``=`` sets the property to ``"true"``. Later pairs
    overwrite earlier ones.
    """
    properties: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        properties[key] = value if sep else "true"
    return properties


def parse_bool(value: str) -> bool:
    """Only a case-insensitive ``"true"`` is true; anything else is false."""
    return value.lower() == "true"


class LlapOptionsProcessor:
    """Parses and validates launcher arguments against the option schema."""

    def __init__(self, prog: Optional[str] = None, schema: Optional[OptionSchema] = None):
        self.prog = prog or Config.PROG_NAME
        self.schema = schema or default_schema()
        self._command = self.schema.to_command(self.prog)

    def parse(self, argv: Sequence[str]) -> Mapping[str, object]:
        """Parse argv into raw values keyed by option dest.

        Repeatable options map to a tuple of values, other value options
        to a single string or None.

        Raises:
            ParseSyntaxError: Unknown flag, missing value, stray argument or
                a non-repeatable option given more than once
        """
        try:
            ctx = self._command.make_context(self.prog, list(argv))
        except click.UsageError as e:
            raise ParseSyntaxError(e.format_message()) from e

        raw: Dict[str, object] = {}
        for spec in self.schema:
            value = ctx.params.get(spec.dest)
            if spec.takes_value and not spec.multiple:
                if len(value) > 1:
                    raise ParseSyntaxError(f"Option '--{spec.long_flag}' cannot be given more than once")
                value = value[0] if value else None
            raw[spec.dest] = value
        return raw

    def _value(self, raw: Mapping[str, object], name: str) -> Optional[str]:
        spec = self.schema[name]
        value = raw.get(spec.dest)
        return spec.default if value is None else value

    def process(self, argv: Sequence[str]) -> Optional[LlapConfiguration]:
        """Build a configuration from argv.

        Returns None after printing usage when help is requested or
        ``--instances`` is missing.

        Raises:
            ParseSyntaxError: If argv does not follow the flag grammar
            FormatError: If a numeric or size value cannot be parsed
            ValidationError: If the instance count is not positive
        """
        raw = self.parse(argv)
        if raw.get("help") or raw.get("instances") is None:
            # needs at least --instances
            self.print_usage()
            return None

        configuration = LlapConfiguration(
            name=self._value(raw, "name"),
            instances=parse_int(self._value(raw, "instances")),
            directory=self._value(raw, "directory"),
            executors=parse_int(self._value(raw, "executors")),
            cache_size=parse_suffixed(self._value(raw, "cache")),
            container_size=parse_suffixed(self._value(raw, "size")),
            heap_size=parse_suffixed(self._value(raw, "xmx")),
            aux_jars=self._value(raw, "auxjars"),
            include_hbase_jars=parse_bool(self._value(raw, "auxhbase")),
            properties=parse_properties(raw.get("hiveconf") or ()),
            java_args=self._value(raw, "args"),
            log_level=self._value(raw, "loglevel"),
            chaos_monkey=self._value(raw, "chaosmonkey"),
            slider_keytab_dir=self._value(raw, "slider-keytab-dir"),
            slider_keytab=self._value(raw, "slider-keytab"),
            slider_principal=self._value(raw, "slider-principal"),
            slider_default_keytab=bool(raw.get("slider_default_keytab")),
        )
        logger.debug(f"Parsed LLAP options: {redact_sensitive_data(configuration.to_dict())}")
        return configuration

    def print_usage(self) -> None:
        click.echo(self.schema.render_help(self.prog))

"""
Option schema for the LLAP launcher command line.

The schema is a fixed, ordered table of every recognized flag. The options
processor parses against it and the help text is rendered from it, so the
two can never disagree.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

import click

OPTION_SLIDER_KEYTAB_DIR = "slider-keytab-dir"
OPTION_SLIDER_KEYTAB = "slider-keytab"
OPTION_SLIDER_PRINCIPAL = "slider-principal"
OPTION_SLIDER_DEFAULT_KEYTAB = "slider-default-keytab"


@dataclass(frozen=True)
class OptionSpec:
    """A single recognized flag."""
    name: str
    short_flag: Optional[str]
    long_flag: str
    takes_value: bool
    arg_label: Optional[str]
    description: str
    multiple: bool = False
    default: Optional[str] = None

    @property
    def dest(self) -> str:
        """Identifier the parsed value is stored under."""
        return self.name.replace("-", "_")

    @property
    def help_text(self) -> str:
        if self.default is None:
            return self.description
        return f"{self.description} (default: {self.default})"

    def to_click_param(self) -> click.Option:
        decls = [f"--{self.long_flag}", self.dest]
        if self.short_flag:
            decls.insert(0, f"-{self.short_flag}")
        if not self.takes_value:
            return click.Option(decls, is_flag=True, help=self.help_text)
        return click.Option(
            decls,
            type=click.STRING,
            metavar=self.arg_label,
            # every occurrence is kept so repeats can be refused by the processor
            multiple=True,
            help=self.help_text,
        )


class OptionSchema:
    """Insertion-ordered mapping of flag name to OptionSpec."""

    def __init__(self, specs: Optional[List[OptionSpec]] = None):
        self._specs: Dict[str, OptionSpec] = {}
        for spec in specs or []:
            self.add(spec)

    def add(self, spec: OptionSpec) -> None:
        """Register a flag, refusing any name or flag already in use."""
        if spec.name in self._specs:
            raise ValueError(f"Duplicate option name: {spec.name}")
        for existing in self._specs.values():
            if spec.long_flag == existing.long_flag:
                raise ValueError(f"Duplicate long flag --{spec.long_flag}")
            if spec.short_flag and spec.short_flag == existing.short_flag:
                raise ValueError(f"Duplicate short flag -{spec.short_flag}")
        self._specs[spec.name] = spec

    def __getitem__(self, name: str) -> OptionSpec:
        return self._specs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def to_command(self, prog: str) -> click.Command:
        """Build the click command used to parse argument vectors."""
        return click.Command(
            prog,
            params=[spec.to_click_param() for spec in self],
            add_help_option=False,
        )

    def render_help(self, prog: str) -> str:
        """Usage text listing every flag with its label and description."""
        command = self.to_command(prog)
        with click.Context(command, info_name=prog) as ctx:
            return command.get_help(ctx)


def default_schema() -> OptionSchema:
    """The complete set of flags understood by the LLAP launcher."""
    return OptionSchema([
        # set the number of instances on which llap should run
        OptionSpec("instances", "i", "instances", True, "instances",
                   "Specify the number of instances to run this on"),
        OptionSpec("name", "n", "name", True, "name",
                   "Cluster name for YARN registry"),
        OptionSpec("directory", "d", "directory", True, "directory",
                   "Temp directory for jars etc."),
        # args, loglevel & chaosmonkey are interpreted by the launcher
        OptionSpec("args", "a", "args", True, "args",
                   "java arguments to the llap instance"),
        OptionSpec("loglevel", "l", "loglevel", True, "loglevel",
                   "log levels for the llap instance"),
        OptionSpec("chaosmonkey", "m", "chaosmonkey", True, "chaosmonkey",
                   "chaosmonkey interval"),
        OptionSpec("executors", "e", "executors", True, "executors",
                   "executor per instance", default="-1"),
        OptionSpec(OPTION_SLIDER_DEFAULT_KEYTAB, None, OPTION_SLIDER_DEFAULT_KEYTAB, False, None,
                   "try to set default settings for Slider AM keytab; mostly for dev testing"),
        OptionSpec(OPTION_SLIDER_KEYTAB_DIR, None, OPTION_SLIDER_KEYTAB_DIR, True,
                   OPTION_SLIDER_KEYTAB_DIR,
                   "Slider AM keytab directory on HDFS (where the headless user keytab is stored "
                   "by Slider keytab installation, e.g. .slider/keytabs/llap)"),
        OptionSpec(OPTION_SLIDER_KEYTAB, None, OPTION_SLIDER_KEYTAB, True, OPTION_SLIDER_KEYTAB,
                   f"Slider AM keytab file name inside {OPTION_SLIDER_KEYTAB_DIR}"),
        OptionSpec(OPTION_SLIDER_PRINCIPAL, None, OPTION_SLIDER_PRINCIPAL, True,
                   OPTION_SLIDER_PRINCIPAL,
                   "Slider AM principal; should be the user running the cluster, "
                   "e.g. hive@EXAMPLE.COM"),
        OptionSpec("cache", "c", "cache", True, "cache",
                   "cache size per instance", default="-1"),
        OptionSpec("size", "s", "size", True, "size",
                   "container size per instance", default="-1"),
        OptionSpec("xmx", "w", "xmx", True, "xmx",
                   "working memory size", default="-1"),
        OptionSpec("auxjars", "j", "auxjars", True, "auxjars",
                   "additional jars to package (by default, JSON SerDe jar is packaged if available)"),
        OptionSpec("auxhbase", "h", "auxhbase", True, "auxhbase",
                   "whether to package the HBase jars", default="true"),
        # --hiveconf x=y
        OptionSpec("hiveconf", None, "hiveconf", True, "property=value",
                   "Use value for given property", multiple=True),
        # [-H|--help]
        OptionSpec("help", "H", "help", False, None, "Print help information"),
    ])

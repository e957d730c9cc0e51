"""Create a new day's project: ``aoc<NN>/`` plus an empty ``input/``."""
import logging
import os
import shlex

from invoke import Context

from .config import DEFAULTS, AocConfig

log = logging.getLogger(__name__)


class ScaffoldError(Exception):
    exit_code = 1


class UsageError(ScaffoldError):
    pass


class LocationError(ScaffoldError):
    def __init__(self, marker):
        super().__init__(f"must be run from the repository root (no {marker} here)")
        self.marker = marker


class CommandFailure(ScaffoldError):
    def __init__(self, command, exit_code):
        super().__init__(f"'{command}' failed with exit status {exit_code}")
        self.command = command
        self.exit_code = exit_code


def parse_day(value):
    try:
        return int(value)
    except ValueError:
        raise UsageError(f"day number must be an integer, got {value!r}") from None


def project_name(day, template=DEFAULTS["template"]):
    return template.format(day=day)


def has_marker(marker=DEFAULTS["marker"], path="."):
    return os.path.exists(os.path.join(path, marker))


def _delegate(c, command):
    log.debug("running %s", command)
    result = c.run(command, warn=True)
    if not result.ok:
        raise CommandFailure(command, result.exited)


def _create(c, day):
    settings = c.config.aocnew
    name = project_name(parse_day(day), settings.template)

    _delegate(c, f"{settings.generator} {shlex.quote(name)}")
    # only reached once the generator has made the project directory
    _delegate(c, f"mkdir {shlex.quote(os.path.join(name, settings.input_dir))}")

    log.debug("created %s", name)
    return name


def newday(c, day):
    marker = c.config.aocnew.marker
    if not has_marker(marker):
        raise LocationError(marker)
    return _create(c, day)


def run(args, has_repo_marker, c=None, prog="aocnew"):
    """Scaffold the day named by ``args`` and return the process exit status.

    ``has_repo_marker`` is the caller's answer to "does the working directory
    hold the repository marker"; ``c`` defaults to a real invoke context.
    """
    if len(args) != 1:
        log.error("Usage: %s <day-number>", prog)
        return 1

    if c is None:
        c = Context(config=AocConfig())

    try:
        if not has_repo_marker:
            raise LocationError(c.config.aocnew.marker)
        _create(c, args[0])
    except ScaffoldError as e:
        log.error("%s: %s", prog, e)
        return e.exit_code

    return 0

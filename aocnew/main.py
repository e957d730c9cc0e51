import logging
import os
import sys

from invoke import Context

from .config import AocConfig
from .scaffold import has_marker, run


def load_config(path=None):
    config = AocConfig(project_location=path or os.getcwd())
    config.load_project()
    return config


def main(argv=None):
    logging.basicConfig(format="%(message)s", level=logging.INFO)

    if argv is None:
        argv = sys.argv[1:]

    c = Context(config=load_config())
    return run(argv, has_marker(c.config.aocnew.marker), c=c)


def cli():
    sys.exit(main())

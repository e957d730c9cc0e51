from invoke import Config
from invoke.config import merge_dicts

DEFAULTS = {
    "marker": ".git",
    "template": "aoc{day:02d}",
    "generator": "cargo new --bin",
    "input_dir": "input",
}


class AocConfig(Config):
    """Invoke config that also reads ``aocnew.yaml`` files."""

    prefix = "aocnew"

    @staticmethod
    def global_defaults():
        return merge_dicts(Config.global_defaults(), {"aocnew": dict(DEFAULTS)})

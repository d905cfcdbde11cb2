import json
import logging

from fractal_maker.core.catalog import FORMULA_COUNT
from fractal_maker.default_config import Config


logger = logging.getLogger(__name__)


def config_keys():
    return {k for k in vars(Config) if not k.startswith("_")}


def load_config(path=None):
    """
    Build configuration from `Config` defaults with overrides from a JSON file.

    Returns a subclass of `Config`, so the defaults stay untouched.
    """
    overrides = {}
    if path is not None:
        try:
            with open(path) as f:
                overrides = json.load(f)
        except (OSError, ValueError) as e:
            raise RuntimeError("Cannot load configuration from file {}: {}".format(path, e)) from e
        if not isinstance(overrides, dict):
            raise ValueError("Configuration in {} must be a JSON object".format(path))
        logger.debug("Loaded configuration overrides from %s: %s", path, overrides)

    unknown = set(overrides) - config_keys()
    if unknown:
        raise ValueError("Unknown configuration keys: {}".format(", ".join(sorted(unknown))))

    if isinstance(overrides.get("image_shape"), list):
        overrides["image_shape"] = tuple(overrides["image_shape"])

    cfg = type("Config", (Config,), overrides)
    validate(cfg)
    return cfg


def is_int(value):
    # JSON true/false load as bools, which are ints to isinstance
    return isinstance(value, int) and not isinstance(value, bool)


def validate(cfg):
    shape = cfg.image_shape
    if not isinstance(shape, tuple) or len(shape) != 2 or not all(is_int(v) and v > 0 for v in shape):
        raise ValueError("image_shape must be two positive integers, got {}".format(shape))
    if not is_int(cfg.formula) or not 0 <= cfg.formula < FORMULA_COUNT:
        raise ValueError("formula must be in [0, {}), got {}".format(FORMULA_COUNT, cfg.formula))
    if not is_int(cfg.workers) or cfg.workers < 1:
        raise ValueError("workers must be a positive integer, got {}".format(cfg.workers))
    if cfg.seed is not None and (not is_int(cfg.seed) or cfg.seed < 0):
        raise ValueError("seed must be a non-negative integer or null, got {}".format(cfg.seed))
    if not isinstance(cfg.use_alpha, bool):
        raise ValueError("use_alpha must be true or false, got {}".format(cfg.use_alpha))
    if not isinstance(cfg.title, str):
        raise ValueError("title must be a string, got {}".format(cfg.title))
    level = cfg.log_level
    if not is_int(level) and not (isinstance(level, str) and isinstance(logging.getLevelName(level), int)):
        raise ValueError("Unknown log level: {}".format(cfg.log_level))

from .catalog import FORMULAS, FORMULA_COUNT, evaluate, fill
from .random_source import RandomSource
from .selector import Selector
from .utils import alloc_pixels

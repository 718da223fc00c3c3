"""windowstats init."""

from windowstats.agreement import *
from windowstats.distance import *
from windowstats.diversity import *
from windowstats.window import *

__version__ = "0.1.0"

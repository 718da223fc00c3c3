"""windowstats settings."""

from os import environ

try:
    import dotenv

    # load environment variables from a '.env' file of a parent directory
    dotenv.load_dotenv(dotenv.find_dotenv())
except ImportError:
    pass

# BASIC DEFINITIONS
metric_label_dict = {
    # window-level metrics
    "contagion": "CONTAG",
    "kappa": "KAPPA",
    "simpson": "SIDI",
    "shannon": "SHDI",
    "shannon_evenness": "SHEI",
    # pairwise metrics
    "kappa_pairwise": "KAPPA_PW",
    "dist_euclidean": "EUCL",
    "dist_manhattan": "MANH",
    "dist_chebyshev": "CHEB",
    "rmse": "RMSE",
}

# CONVENTIONS
# contagion of a window with a single class, as a proportion (multiplied by 100 when
# the metric is expressed as percentage)
MAX_CONTAGION = 1
# kappa of a window (or pair of maps) with a single class
SINGLE_CLASS_KAPPA = 0.0
# kappa when the expected agreement is one (or more due to floating point errors)
DEGENERATE_KAPPA = 0.0

# SETTINGS
WARN_NOT_COMPUTABLE = environ.get(
    "WINDOWSTATS_WARN_NOT_COMPUTABLE", "false"
).lower() in ("1", "true", "yes")

# OTHER
DEFAULT_WINDOW_NODATA = None

"""Distance and error metrics between two maps."""

import numpy as np
import pandas as pd

from . import agreement, settings
from .utils import not_computable, to_paired_arrs

__all__ = [
    "dist_euclidean",
    "dist_manhattan",
    "dist_chebyshev",
    "rmse",
    "compute_pairwise_metrics_ser",
]

PAIRWISE_METRICS = [
    "kappa_pairwise",
    "dist_euclidean",
    "dist_manhattan",
    "dist_chebyshev",
    "rmse",
]


def _paired_diff_arr(x, y, nodata):
    x_arr, y_arr = to_paired_arrs(x, y, nodata=nodata)
    return x_arr - y_arr


def dist_euclidean(x, y, *, nodata=None):
    r"""Euclidean distance normalized by the number of jointly valid positions.

    .. math::
       EUCL = \frac{\sqrt{\sum \limits_{k=1}^{n} (x_k - y_k)^2}}{n}

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Co-located samples of both maps, of the same length.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    EUCL : numeric
        EUCL >= 0 ; nan if there are no jointly valid positions.
    """
    diff_arr = _paired_diff_arr(x, y, nodata)
    if diff_arr.size == 0:
        return not_computable("Distances require at least one jointly valid sample")

    return float(np.sqrt(np.sum(diff_arr**2)) / diff_arr.size)


def dist_manhattan(x, y, *, nodata=None):
    r"""Mean absolute difference.

    .. math::
       MANH = \frac{\sum \limits_{k=1}^{n} |x_k - y_k|}{n}

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Co-located samples of both maps, of the same length.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    MANH : numeric
        MANH >= 0 ; nan if there are no jointly valid positions.
    """
    diff_arr = _paired_diff_arr(x, y, nodata)
    if diff_arr.size == 0:
        return not_computable("Distances require at least one jointly valid sample")

    return float(np.sum(np.abs(diff_arr)) / diff_arr.size)


def dist_chebyshev(x, y, *, nodata=None):
    r"""Maximum absolute difference.

    .. math::
       CHEB = \max \limits_{k} |x_k - y_k|

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Co-located samples of both maps, of the same length.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    CHEB : numeric
        CHEB >= 0 ; nan if there are no jointly valid positions.
    """
    diff_arr = _paired_diff_arr(x, y, nodata)
    if diff_arr.size == 0:
        return not_computable("Distances require at least one jointly valid sample")

    return float(np.max(np.abs(diff_arr)))


def rmse(x, y, *, nodata=None):
    r"""Root mean square error.

    .. math::
       RMSE = \sqrt{\frac{\sum \limits_{k=1}^{n} (x_k - y_k)^2}{n}}

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Co-located samples of both maps, of the same length.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    RMSE : numeric
        RMSE >= 0 ; nan if there are no jointly valid positions.
    """
    diff_arr = _paired_diff_arr(x, y, nodata)
    if diff_arr.size == 0:
        return not_computable("Distances require at least one jointly valid sample")

    return float(np.sqrt(np.sum(diff_arr**2) / diff_arr.size))


def compute_pairwise_metrics_ser(x, y, *, metrics=None, abbrev=False, nodata=None):
    """Compute metrics between two maps.

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Co-located samples of both maps, of the same length.
    metrics : list-like, optional
        A list-like of strings with the names of the metrics that should be computed.
        If `None`, all the implemented pairwise metrics will be computed.
    abbrev : bool, default False
        Whether the metrics should be labelled by their abbreviation in
        `settings.metric_label_dict` instead of their function name.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    ser : pandas.Series
        Series with the value computed for each metric (index).
    """
    if metrics is None:
        metrics = PAIRWISE_METRICS

    metric_funcs = {
        "kappa_pairwise": agreement.kappa_pairwise,
        "dist_euclidean": dist_euclidean,
        "dist_manhattan": dist_manhattan,
        "dist_chebyshev": dist_chebyshev,
        "rmse": rmse,
    }
    metrics_dict = {}
    for metric in metrics:
        try:
            metric_func = metric_funcs[metric]
        except KeyError as metric_e:
            raise ValueError(
                "{metric} is not among {metrics}".format(
                    metric=metric, metrics=PAIRWISE_METRICS
                )
            ) from metric_e
        metrics_dict[metric] = metric_func(x, y, nodata=nodata)

    ser = pd.Series(metrics_dict, dtype=np.float64)
    ser.index.name = "metric"
    if abbrev:
        ser = ser.rename(settings.metric_label_dict)

    return ser

"""Agreement between two categorical maps."""

import numpy as np
import pandas as pd
from scipy.stats import contingency

from . import settings
from .utils import not_computable, to_paired_arrs

__all__ = ["compute_confusion_df", "kappa_pairwise"]


def compute_confusion_arr(x_arr, y_arr, classes):
    """Cross-tabulate the co-located classes of two maps.

    Parameters
    ----------
    x_arr, y_arr : numpy.ndarray
        Values of both maps at their jointly valid positions.
    classes : numpy.ndarray
        Sorted class values that label the rows and columns.

    Returns
    -------
    confusion_arr : numpy.ndarray
        Counts of the positions with class `classes[i]` in `x_arr` and class
        `classes[j]` in `y_arr` at `[i, j]`.
    """
    _, confusion_arr = contingency.crosstab(x_arr, y_arr, levels=(classes, classes))
    return confusion_arr


def compute_confusion_df(x, y, *, nodata=None):
    """Compute the confusion data frame of two maps.

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Co-located samples of both maps, of the same length.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    confusion_df : pandas.DataFrame
        Counts of jointly valid positions by class of `x` (index) and class of `y`
        (columns).
    """
    x_arr, y_arr = to_paired_arrs(x, y, nodata=nodata)
    classes = np.union1d(x_arr, y_arr)

    return pd.DataFrame(
        compute_confusion_arr(x_arr, y_arr, classes),
        index=pd.Index(classes, name="x_class_val"),
        columns=pd.Index(classes, name="y_class_val"),
    )


def kappa_pairwise(x, y, *, nodata=None):
    r"""Cohen's kappa between two maps.

    .. math::
       KAPPA = \frac{P_o - P_e}{1 - P_e}

    where :math:`P_o` is the proportion of positions where both maps agree and
    :math:`P_e = \sum_{i} P_{x,i} P_{y,i}` is the agreement expected by chance given
    the class proportions of each map.

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Co-located samples of both maps, of the same length.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    KAPPA : numeric
        -1 <= KAPPA <= 1 ; 1 for perfect agreement, 0 when both maps have the same
        single class. nan if there are less than two jointly valid positions.
    """
    x_arr, y_arr = to_paired_arrs(x, y, nodata=nodata)
    num_valid = x_arr.size
    if num_valid < 2:
        return not_computable("Kappa requires at least two jointly valid samples")

    classes = np.union1d(x_arr, y_arr)
    if classes.size == 1:
        return settings.SINGLE_CLASS_KAPPA

    confusion_arr = compute_confusion_arr(x_arr, y_arr, classes)
    po = np.trace(confusion_arr) / num_valid
    # marginal class proportions of each map
    x_proportions = confusion_arr.sum(axis=1) / num_valid
    y_proportions = confusion_arr.sum(axis=0) / num_valid
    pe = np.sum(x_proportions * y_proportions)
    if pe >= 1:
        return settings.DEGENERATE_KAPPA

    return float((po - pe) / (1 - pe))

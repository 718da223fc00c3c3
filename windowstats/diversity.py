"""Diversity and evenness indices."""

import numpy as np

from .utils import not_computable, to_sample_arr

__all__ = ["simpson", "shannon", "shannon_evenness"]


def compute_entropy(counts, base=None):
    """Compute the entropy for a set of category count values.

    The counts are given in integer amounts and the proportional abundances are computed
    inside the function.

    The base of the logarithm calculates the entropy in different units. Base e
    provides entropy in units of "nats", base 2 in "bits" or "shannons" and base 10 in
    "dits" or "bans".

    Parameters
    ----------
    counts: list-like
        The number of occurrences of each category
    base: numeric
        The base for logarithm calculation, with default as the natural logarithm
        (Euler's number).

    Returns
    -------
    entropy: numeric
    """
    counts = np.asarray(counts)
    pcounts = (counts / counts.sum())[counts > 0]
    entropy = -np.sum(pcounts * np.log(pcounts))
    if base:
        entropy /= np.log(base)
    return entropy


def compute_class_counts(samples, *, nodata=None):
    """Count the occurrences of each class among the non-missing samples.

    Parameters
    ----------
    samples : list-like or numpy.ndarray
        Sample values, see `utils.to_sample_arr`.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    classes, class_counts : numpy.ndarray
        Sorted distinct class values and their number of occurrences.
    """
    sample_arr = to_sample_arr(samples, nodata=nodata)
    return np.unique(sample_arr[~np.isnan(sample_arr)], return_counts=True)


def simpson(x, *, nodata=None):
    r"""Simpson's diversity index.

    .. math::
       SIDI = 1 - \sum \limits_{i=1}^{m} P_i^2

    Parameters
    ----------
    x : list-like or numpy.ndarray
        Sample values (class codes).
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    SIDI : numeric
        0 <= SIDI < 1 ; nan if there are no valid samples.
    """
    _, class_counts = compute_class_counts(x, nodata=nodata)
    num_valid = class_counts.sum()
    if num_valid == 0:
        return not_computable("Simpson's index requires at least one valid sample")

    proportions = class_counts / num_valid
    return float(1 - np.sum(proportions**2))


def shannon(x, *, base=None, nodata=None):
    r"""Shannon's diversity index.

    .. math::
       SHDI = - \sum \limits_{i=1}^{m} \Big( P_i \; ln P_i \Big)

    Parameters
    ----------
    x : list-like or numpy.ndarray
        Sample values (class codes).
    base : numeric, optional
        The base of the logarithm. If `None`, the natural logarithm is used.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    SHDI : numeric
        0 <= SHDI <= ln(m) ; nan if there are no valid samples.
    """
    _, class_counts = compute_class_counts(x, nodata=nodata)
    if class_counts.sum() == 0:
        return not_computable("Shannon's index requires at least one valid sample")

    # adding zero turns the entropy of a single class, i.e., -0.0, into 0.0
    return float(compute_entropy(class_counts, base=base) + 0.0)


def shannon_evenness(x, *, nodata=None):
    r"""Shannon's evenness index.

    .. math::
       SHEI = \frac{SHDI}{ln(m)}

    Parameters
    ----------
    x : list-like or numpy.ndarray
        Sample values (class codes).
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    SHEI : numeric
        0 <= SHEI <= 1 ; SHEI equals 1 when all the classes are equally abundant. nan
        if there are less than two valid samples or less than two classes.
    """
    _, class_counts = compute_class_counts(x, nodata=nodata)
    if class_counts.sum() < 2:
        return not_computable("Shannon's evenness requires at least two valid samples")
    num_classes = len(class_counts)
    if num_classes < 2:
        return not_computable("Shannon's evenness requires at least two classes")

    return float(compute_entropy(class_counts) / np.log(num_classes))

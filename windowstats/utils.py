"""Utilities to prepare the samples of a window."""

import warnings

import numpy as np

from . import settings

__all__ = [
    "to_sample_arr",
    "check_window_shape",
    "compute_window_size",
    "to_paired_arrs",
]


def to_sample_arr(samples, *, nodata=None):
    """Convert a list-like of samples into a flat float array.

    Parameters
    ----------
    samples : list-like or numpy.ndarray
        Sample values. Missing values can be represented as `None`, `numpy.nan` or
        masked entries of a `numpy.ma.MaskedArray`. Multi-dimensional arrays are
        flattened in row-major order.
    nodata : numeric, optional
        Value to be treated as missing. If no value is provided, the default value set
        in `settings.DEFAULT_WINDOW_NODATA` will be taken.

    Returns
    -------
    sample_arr : numpy.ndarray
        One-dimensional float array (always a copy) where missing values are
        `numpy.nan`.
    """
    if isinstance(samples, np.ma.MaskedArray):
        sample_arr = samples.astype(np.float64).filled(np.nan)
    else:
        # `None` values become nan when converting to float
        sample_arr = np.array(samples, dtype=np.float64)
    sample_arr = sample_arr.ravel()

    if nodata is None:
        nodata = settings.DEFAULT_WINDOW_NODATA
    if nodata is not None:
        sample_arr[sample_arr == nodata] = np.nan

    return sample_arr


def check_window_shape(window):
    """Check that a multi-dimensional window is a square array.

    Flat sequences are accepted as is, since their squareness depends on their number
    of samples only (see `compute_window_size`).

    Parameters
    ----------
    window : list-like or numpy.ndarray
        Samples of the window.
    """
    window_shape = np.shape(window)
    if len(window_shape) > 2 or (
        len(window_shape) == 2 and window_shape[0] != window_shape[1]
    ):
        raise ValueError(f"A window of shape {window_shape} is not a square array")


def compute_window_size(num_samples):
    """Compute the side length of a square window.

    Parameters
    ----------
    num_samples : int
        Number of samples of the flattened window.

    Returns
    -------
    window_size : int
        Number of rows (and columns) of the window.
    """
    window_size = int(round(np.sqrt(num_samples)))
    if window_size * window_size != num_samples:
        raise ValueError(
            f"The number of samples ({num_samples}) is not a perfect square, so they "
            "cannot be arranged as a square window"
        )
    return window_size


def to_paired_arrs(x, y, *, nodata=None):
    """Get the values of two sample sequences at their jointly valid positions.

    Parameters
    ----------
    x, y : list-like or numpy.ndarray
        Sample values of the same length.
    nodata : numeric, optional
        Value to be treated as missing in both `x` and `y`.

    Returns
    -------
    x_arr, y_arr : numpy.ndarray
        Values of `x` and `y` at the positions where both are not missing.
    """
    x_arr = to_sample_arr(x, nodata=nodata)
    y_arr = to_sample_arr(y, nodata=nodata)
    if x_arr.size != y_arr.size:
        raise ValueError(
            f"`x` and `y` must have the same length (got {x_arr.size} and "
            f"{y_arr.size})"
        )
    valid_cond = ~(np.isnan(x_arr) | np.isnan(y_arr))

    return x_arr[valid_cond], y_arr[valid_cond]


def not_computable(reason):
    """Return nan (warning about `reason` if `settings.WARN_NOT_COMPUTABLE`)."""
    if settings.WARN_NOT_COMPUTABLE:
        warnings.warn(f"{reason}. Returning nan", RuntimeWarning)
    return np.nan

"""Window analysis."""

import platform

import numpy as np
import pandas as pd
import transonic

from . import diversity, settings
from .utils import (
    check_window_shape,
    compute_window_size,
    not_computable,
    to_sample_arr,
)

if platform.system() == "Windows":
    backend = "numba"
else:
    backend = "pythran"

transonic.set_backend_for_this_module(backend)

__all__ = ["Window", "contagion", "kappa_self", "compute_window_metrics_ser"]

# type definitions
ADJ_ARR_DTYPE = np.uint32
# define type annotations outside signature to avoid ForwardAnnotationSyntaxError
# see https://github.com/PyCQA/pyflakes/issues/542
AdjacencyArray = transonic.Array[ADJ_ARR_DTYPE, "2d"]


@transonic.boost
def compute_adjacency_arr(padded_arr: AdjacencyArray, num_classes: "int"):
    # `padded_arr` holds class indices, where the value `num_classes` marks missing
    # cells and the padding of the last column and last row. Each cell is only paired
    # with its right and lower neighbors, so that every adjacency is counted once and in
    # the reading direction, i.e., at `[class_first, class_second]`
    num_cols_adjacency = num_classes + 1
    adjacency_arr = np.zeros(
        num_cols_adjacency * num_cols_adjacency, dtype=ADJ_ARR_DTYPE
    )
    num_cols_pixel = padded_arr.shape[1]
    flat_arr = padded_arr.ravel()
    neighbors = [1, num_cols_pixel]
    # the last (padding) row has no lower neighbors
    end = len(flat_arr) - num_cols_pixel
    for i in range(end):
        class_i = flat_arr[i]
        for neighbor in neighbors:
            adjacency_arr[class_i * num_cols_adjacency + flat_arr[i + neighbor]] += 1

    return adjacency_arr.reshape((num_cols_adjacency, num_cols_adjacency))


class Window:
    """Square window of categorical samples upon which metrics are computed."""

    def __init__(self, window, *, nodata=None):
        """Initialize the window instance.

        Parameters
        ----------
        window : list-like or numpy.ndarray
            Samples of a square window flattened in row-major order, i.e., the first
            `window_size` samples are the first row and so on. Missing values can be
            represented as `None`, `numpy.nan` or masked entries. A square 2-D array
            is flattened in row-major order, whereas non-square arrays raise a
            `ValueError`.
        nodata : numeric, optional
            Value to be treated as missing. If no value is provided, the default value
            set in `settings.DEFAULT_WINDOW_NODATA` will be taken.
        """
        check_window_shape(window)
        sample_arr = to_sample_arr(window, nodata=nodata)
        window_size = compute_window_size(sample_arr.size)

        self.window_size = window_size
        self.window_arr = sample_arr.reshape((window_size, window_size))

        valid_samples = sample_arr[~np.isnan(sample_arr)]
        self.num_valid = valid_samples.size
        # `np.unique` sorts the classes in ascending order, which fixes their index.
        # Note that class identity is exact floating point equality
        self.classes, self.class_counts = np.unique(valid_samples, return_counts=True)

    ###########################################################################
    # common utilities

    # constants

    WINDOW_METRICS = [
        "contagion",
        "kappa",
        "simpson",
        "shannon",
        "shannon_evenness",
    ]

    # compute methods

    def compute_reclassified_arr(self):
        """Compute the window array of class indices.

        Returns
        -------
        reclassified_arr : numpy.ndarray
            An integer array with the shape of the window, where each cell has the index
            of its class in `classes` and missing cells have the value `num_classes`.
        """
        num_classes = len(self.classes)
        reclassified_arr = np.full(
            self.window_arr.shape, num_classes, dtype=ADJ_ARR_DTYPE
        )
        valid_cond = ~np.isnan(self.window_arr)
        reclassified_arr[valid_cond] = np.searchsorted(
            self.classes, self.window_arr[valid_cond]
        )

        return reclassified_arr

    @property
    def adjacency_arr(self):
        """Directed adjacency counts between classes (rows: first cell)."""
        num_classes = len(self.classes)
        # pad the last column and the last row with the missing value index so that
        # the cells at the window's border do not pair with cells of the next row
        padded_arr = np.pad(
            self.compute_reclassified_arr(),
            pad_width=((0, 1), (0, 1)),
            mode="constant",
            constant_values=num_classes,
        )

        # drop the row/column of the missing value index
        return compute_adjacency_arr(padded_arr, num_classes)[
            :num_classes, :num_classes
        ]

    def compute_adjacency_df(self):
        """Compute the adjacency data frame.

        Returns
        -------
        adjacency_df: pandas.DataFrame
            Directed adjacency counts (horizontal and vertical) between the class of the
            first cell (index) and the class of the second cell (columns), where the
            first cell is either at the left or above the second one.
        """
        return pd.DataFrame(
            self.adjacency_arr,
            index=pd.Index(self.classes, name="class_val"),
            columns=pd.Index(self.classes, name="neighbor_class_val"),
        )

    ###########################################################################
    # window-level metrics

    def contagion(self, *, percent=True):
        r"""Measure of aggregation.

        Relative contagion index of Li and Reynolds, computed from the directed
        adjacencies of the window as in:

        .. math::
           CONTAG = 1 + \frac{
             \sum \limits_{i=1}^{m} \sum \limits_{k=1}^{m} g_{i,k} \; ln(g_{i,k})
           }{2 ln(m)}

        where :math:`g_{i,k}` is the proportion of adjacencies from class `i` to class
        `k` among all the adjacencies of the window.

        Parameters
        ----------
        percent : bool, default True
            Whether the index should be expressed as proportion or converted to
            percentage.

        Returns
        -------
        CONTAG : numeric
            0 <= CONTAG <= 100 (or 1 if `percent` is False) ; CONTAG equals its maximum
            when the window has a single class. nan if there are less than two valid
            samples or no adjacencies between valid cells.
        """
        if self.num_valid < 2:
            return not_computable("Contagion requires at least two valid samples")

        num_classes = len(self.classes)
        if num_classes == 1:
            contag = settings.MAX_CONTAGION
        else:
            adjacencies = self.adjacency_arr.ravel()
            if adjacencies.sum() == 0:
                return not_computable("Contagion requires at least one adjacency")
            contag = 1 - diversity.compute_entropy(adjacencies) / (
                2 * np.log(num_classes)
            )

        if percent:
            contag *= 100

        return float(contag)

    def kappa(self):
        r"""Kappa index of the window's adjacencies.

        Measures the agreement between the classes of adjacent cells beyond the one
        expected by chance. It is computed as in:

        .. math::
           KAPPA = \frac{P_o - P_e}{1 - P_e}

        where :math:`P_o = \sum_{i} g_{i,i}` is the proportion of like adjacencies and
        :math:`P_e = \sum_{i} P_i \sum_{k} g_{i,k}` weights the proportion of
        adjacencies starting at each class by its proportion :math:`P_i` of the valid
        cells.

        Returns
        -------
        KAPPA : numeric
            KAPPA <= 1 ; 0 for a window with a single class. Since the expected
            agreement is weighted by the proportions of all the valid cells, KAPPA can
            fall below -1, e.g., in windows with missing cells. nan if there are less
            than two valid samples or no adjacencies between valid cells.
        """
        if self.num_valid < 2:
            return not_computable("Kappa requires at least two valid samples")

        if len(self.classes) == 1:
            return settings.SINGLE_CLASS_KAPPA

        adjacency_arr = self.adjacency_arr
        num_adjacencies = adjacency_arr.sum()
        if num_adjacencies == 0:
            return not_computable("Kappa requires at least one adjacency")

        adjacency_proportions = adjacency_arr / num_adjacencies
        class_proportions = self.class_counts / self.num_valid
        po = np.trace(adjacency_proportions)
        pe = np.sum(class_proportions * adjacency_proportions.sum(axis=1))
        if pe >= 1:
            return settings.DEGENERATE_KAPPA

        return float((po - pe) / (1 - pe))

    def simpson(self):
        """Simpson's diversity index of the window, see `diversity.simpson`."""
        return diversity.simpson(self.window_arr)

    def shannon(self, *, base=None):
        """Shannon's diversity index of the window, see `diversity.shannon`."""
        return diversity.shannon(self.window_arr, base=base)

    def shannon_evenness(self):
        """Shannon's evenness index of the window, see `diversity.shannon_evenness`."""
        return diversity.shannon_evenness(self.window_arr)

    ###########################################################################
    # compute metrics series

    def compute_metrics_ser(self, *, metrics=None, metrics_kwargs=None, abbrev=False):
        """Compute window-level metrics.

        Parameters
        ----------
        metrics : list-like, optional
            A list-like of strings with the names of the metrics that should be
            computed. If `None`, all the implemented window-level metrics will be
            computed.
        metrics_kwargs : dict, optional
            Dictionary mapping the keyword arguments (values) that should be passed to
            each metric method (key), e.g., to compute `contagion` as a proportion
            instead of a percentage, metric_kwargs should map the string 'contagion'
            (method name) to {'percent': False}.
        abbrev : bool, default False
            Whether the metrics should be labelled by their abbreviation in
            `settings.metric_label_dict` instead of their method name.

        Returns
        -------
        ser : pandas.Series
            Series with the value computed for each metric (index).
        """
        if metrics is None:
            metrics = Window.WINDOW_METRICS

        if metrics_kwargs is None:
            metrics_kwargs = {}

        metrics_dict = {}
        for metric in metrics:
            if metric not in Window.WINDOW_METRICS:
                raise ValueError(
                    "{metric} is not among {metrics}".format(
                        metric=metric, metrics=Window.WINDOW_METRICS
                    )
                )
            try:
                metrics_dict[metric] = getattr(self, metric)(
                    **metrics_kwargs.get(metric, {})
                )
            except TypeError as metric_args_e:
                raise ValueError(
                    "{metric} cannot be computed with the provided keyword "
                    "arguments".format(metric=metric)
                ) from metric_args_e

        ser = pd.Series(metrics_dict, dtype=np.float64)
        ser.index.name = "metric"
        if abbrev:
            ser = ser.rename(settings.metric_label_dict)

        return ser


def contagion(window, *, percent=True, nodata=None):
    """Compute the contagion index of a window.

    Parameters
    ----------
    window : list-like or numpy.ndarray
        Samples of a square window flattened in row-major order.
    percent : bool, default True
        Whether the index should be expressed as proportion or converted to percentage.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    CONTAG : numeric
        See `Window.contagion`.

    Raises
    ------
    ValueError
        If the number of samples is not a perfect square.
    """
    return Window(window, nodata=nodata).contagion(percent=percent)


def kappa_self(window, *, nodata=None):
    """Compute the kappa index of the adjacencies of a window.

    Unlike `contagion`, samples that cannot be arranged as a square window are not an
    error: the index is just not computable.

    Parameters
    ----------
    window : list-like or numpy.ndarray
        Samples of a square window flattened in row-major order.
    nodata : numeric, optional
        Value to be treated as missing.

    Returns
    -------
    KAPPA : numeric
        See `Window.kappa`. nan if the samples do not form a square window.
    """
    sample_arr = to_sample_arr(window, nodata=nodata)
    try:
        check_window_shape(window)
        compute_window_size(sample_arr.size)
    except ValueError:
        return not_computable("Kappa requires a square window")

    return Window(sample_arr).kappa()


def compute_window_metrics_ser(
    window, *, metrics=None, metrics_kwargs=None, abbrev=False, nodata=None
):
    """Compute window-level metrics, see `Window.compute_metrics_ser`."""
    return Window(window, nodata=nodata).compute_metrics_ser(
        metrics=metrics, metrics_kwargs=metrics_kwargs, abbrev=abbrev
    )

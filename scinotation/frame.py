import numpy as np
import pandas as pd
import xarray as xr
from pandas.api.types import is_bool_dtype, is_numeric_dtype

from .config import DEFAULTS, defaults_or_kwargs
from .element_formatters import get_formatter
from .logging import LOGGER
from .scientific import check_precision

def cell_formatter(notation="plain", precision=3, na_rep="NaN"):
  """
  Build a one-argument formatter for array cells.

  Non-finite cells render as ``na_rep`` rather than raising, so the result
  can be mapped over data that contains missing values.
  """
  fmt = get_formatter(notation)
  check_precision(precision)
  def format_cell(x):
    if not np.isfinite(x):
      return na_rep
    return fmt(x, precision)
  return format_cell

def _log_non_finite(values, na_rep):
  count = np.count_nonzero(~np.isfinite(np.asarray(values, dtype=float)))
  if count:
    LOGGER.debug("rendering %d non-finite cell(s) as %r", count, na_rep)

def format_array(values, **kwargs):
  """
  Format every element of ``values``.

  Parameters
  ----------
  values : array-like or xarray.DataArray
      Numeric data.
  notation : {"plain", "latex", "mathml", "html"}, default "plain"
  precision : int, default 3
  na_rep : str, default "NaN"
      Text used for NaN and infinite cells.

  Returns
  -------
  numpy.ndarray or xarray.DataArray
      Object array of strings with the shape (and, for a DataArray, the
      dims and coords) of the input.
  """
  opts = defaults_or_kwargs(DEFAULTS, kwargs)
  if kwargs:
    raise TypeError("unexpected keyword arguments: {}".format(", ".join(kwargs)))
  format_cell = cell_formatter(**opts)
  _log_non_finite(values, opts["na_rep"])
  if isinstance(values, xr.DataArray):
    return xr.apply_ufunc(format_cell, values, vectorize=True, output_dtypes=[object], keep_attrs=True)
  values = np.asarray(values, dtype=float)
  return np.vectorize(format_cell, otypes=[object])(values)

def _is_number_column(series):
  return is_numeric_dtype(series.dtype) and not is_bool_dtype(series.dtype)

def format_frame(frame, **kwargs):
  """
  Format the numeric columns of a DataFrame (or a numeric Series).

  Non-numeric columns are returned unchanged. Takes the same keyword options
  as :func:`format_array`.
  """
  opts = defaults_or_kwargs(DEFAULTS, kwargs)
  if kwargs:
    raise TypeError("unexpected keyword arguments: {}".format(", ".join(kwargs)))
  format_cell = cell_formatter(**opts)
  if isinstance(frame, pd.Series):
    if not _is_number_column(frame):
      return frame.copy()
    _log_non_finite(frame, opts["na_rep"])
    return frame.map(format_cell)

  out = frame.copy()
  for col in frame.columns:
    if _is_number_column(frame[col]):
      _log_non_finite(frame[col], opts["na_rep"])
      out[col] = frame[col].map(format_cell)
  return out

def to_html(frame, **kwargs):
  """
  Render ``frame`` as an HTML table with numeric cells in engineering notation.

  ``precision`` and ``na_rep`` select the cell formatting; every other
  keyword argument is passed to :meth:`pandas.DataFrame.to_html`.
  Markup is not escaped unless ``escape=True`` is given explicitly.
  """
  opts = defaults_or_kwargs({"precision": DEFAULTS["precision"], "na_rep": DEFAULTS["na_rep"]}, kwargs)
  format_cell = cell_formatter("html", **opts)
  kwargs.setdefault("escape", False)
  # per-column formatters, pandas may swap a float_format for its own e-format
  formatters = {col: format_cell for col in frame.columns if _is_number_column(frame[col])}
  return frame.to_html(formatters=formatters, na_rep=opts["na_rep"], **kwargs)

import math
import numbers
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import NamedTuple

from .logging import LOGGER

MAX_PRECISION = 100

# wide enough to hold any double in fixed point
_CONTEXT = Context(prec=1000, rounding=ROUND_HALF_UP)

class ScientificNotationNumber(NamedTuple):
  """mantissa x 10^exponent, with the exponent a multiple of 3."""
  mantissa: float
  exponent: int

def check_precision(precision):
  if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
    raise TypeError("precision must be an int, not {typ}".format(typ=type(precision).__name__))
  if not 1 <= precision <= MAX_PRECISION:
    raise ValueError("precision must be between 1 and {}, got {}".format(MAX_PRECISION, precision))
  return precision

def check_finite(value):
  if not math.isfinite(value):
    raise ValueError("cannot format non-finite value {!r}".format(value))
  return value

def _round_half_away(x):
  return math.copysign(math.floor(abs(x) + 0.5), x)

def magnitude(f):
  return int(math.floor(math.log10(abs(f))))

def _scale(value, exponent):
  # 10.0 ** -324 underflows to 0, so subnormals are scaled in two steps
  if exponent < -300:
    return value * 10.0 ** 300 / 10.0 ** (exponent + 300)
  return value / 10.0 ** exponent

def to_scientific_notation(value, precision=3):
  """
  Split ``value`` into an engineering-notation mantissa and exponent.

  Parameters
  ----------
  value : float
      Finite number to convert.
  precision : int, default 3
      Number of significant figures kept in the mantissa.

  Returns
  -------
  ScientificNotationNumber
      ``(0, 0)`` for zero, otherwise a mantissa with ``1 <= |m| < 1000``
      (rounding may reach exactly 1000) and an exponent that is a multiple of 3.
  """
  check_precision(precision)
  check_finite(value)
  if value == 0:
    return ScientificNotationNumber(0, 0)

  exponent = 3 * (magnitude(value) // 3)
  mantissa = _scale(value, exponent)

  factor = 10.0 ** (precision - 1 - magnitude(mantissa))
  mantissa = _round_half_away(mantissa * factor) / factor
  if abs(mantissa) >= 1000:
    LOGGER.debug("mantissa of %r rounded up to %r at precision %d", value, mantissa, precision)
  return ScientificNotationNumber(mantissa, exponent)

def _quantize(d, decimals):
  return d.quantize(Decimal(1).scaleb(-decimals), context=_CONTEXT)

def _count_digits(s):
  return sum(c.isdigit() for c in s)

def to_mantissa_string(mantissa, precision=3):
  """
  Render ``mantissa`` with ``precision`` significant figures.

  Integer digits are never dropped, so the result may carry more than
  ``precision`` digits:

  >>> to_mantissa_string(1.23, 4)
  '1.230'
  >>> to_mantissa_string(123, 4)
  '123.0'
  >>> to_mantissa_string(123, 2)
  '123'
  """
  check_precision(precision)
  check_finite(mantissa)
  if mantissa == 0:
    s = "{:.{decimals}f}".format(0, decimals=precision - 1)
  else:
    # ties go away from zero on the exact binary value: 2.5 -> "3", 0.125 -> "0.13"
    d = Decimal(float(mantissa))
    rounded = _quantize(d, precision - 1 - d.adjusted())
    # magnitude after rounding, so 9.996 -> "10.0" and not "10.00"
    decimals = max(0, precision - 1 - rounded.adjusted())
    s = "{:f}".format(_quantize(d, decimals))

  digits = _count_digits(s)
  if digits < precision:
    if "." in s:
      return s + "0" * (precision - digits + 1)
    return s + "." + "0" * (precision - digits)
  return s

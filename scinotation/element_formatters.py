from .scientific import to_mantissa_string, to_scientific_notation

TIMES = chr(215)  # ×

def _number_string(x):
  # integral floats print without a trailing ".0": 1.0 -> "1"
  if float(x).is_integer():
    return str(int(x))
  return repr(float(x))

def _significand(mantissa, exponent, precision):
  if exponent == 1:
    return to_mantissa_string(mantissa * 10, precision)
  return to_mantissa_string(mantissa, precision)

def to_scientific_notation_string(value, precision=3):
  """
  >>> to_scientific_notation_string(1234567890.123456789, 3)
  '1.23e9'
  """
  mantissa, exponent = to_scientific_notation(value, precision)
  return "{}e{}".format(_number_string(mantissa), exponent)

def to_scientific_notation_latex(value, precision=3):
  """
  >>> to_scientific_notation_latex(1000, 3)
  '1.00 \\\\times 10^{3}'
  >>> to_scientific_notation_latex(10, 3)
  '10.0'
  """
  mantissa, exponent = to_scientific_notation(value, precision)
  significand = _significand(mantissa, exponent, precision)
  if exponent in (0, 1):
    return significand
  return "{} \\times 10^{{{}}}".format(significand, exponent)

def to_scientific_notation_mathml(value, precision=3):
  mantissa, exponent = to_scientific_notation(value, precision)
  significand = _significand(mantissa, exponent, precision)
  if exponent in (0, 1):
    return "<math><mrow><mn>{}</mn></mrow></math>".format(significand)
  return "<math><mrow><mn>{}</mn><mo>{}</mo><msup><mn>10</mn><mn>{}</mn></msup></mrow></math>".format(significand, TIMES, exponent)

def to_scientific_notation_html(value, precision=3):
  mantissa, exponent = to_scientific_notation(value, precision)
  significand = _significand(mantissa, exponent, precision)
  if exponent in (0, 1):
    return significand
  return "{} {} 10<sup>{}</sup>".format(significand, TIMES, exponent)

FORMATTERS = {
  "plain": to_scientific_notation_string,
  "latex": to_scientific_notation_latex,
  "mathml": to_scientific_notation_mathml,
  "html": to_scientific_notation_html,
}

def get_formatter(notation):
  try:
    return FORMATTERS[notation]
  except KeyError:
    raise ValueError("notation must be one of {}, got {!r}".format(", ".join(sorted(FORMATTERS)), notation)) from None

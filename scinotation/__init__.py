from .scientific import ScientificNotationNumber, to_scientific_notation, to_mantissa_string
from .element_formatters import (
  FORMATTERS,
  get_formatter,
  to_scientific_notation_string,
  to_scientific_notation_latex,
  to_scientific_notation_mathml,
  to_scientific_notation_html,
)
from .frame import format_array, format_frame, to_html
from .ticker import EngineeringFormatter

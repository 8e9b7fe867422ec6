from matplotlib.ticker import Formatter

from .config import DEFAULTS, defaults_or_kwargs
from .element_formatters import get_formatter
from .scientific import check_precision

class EngineeringFormatter(Formatter):
  """Tick labels in engineering notation, typeset with mathtext by default."""

  notations = ("latex", "plain")

  def __init__(self, **kwargs):
    opts = defaults_or_kwargs({"precision": DEFAULTS["precision"], "notation": "latex"}, kwargs)
    if kwargs:
      raise TypeError("unexpected keyword arguments: {}".format(", ".join(kwargs)))
    if opts["notation"] not in self.notations:
      raise ValueError("notation must be 'latex' or 'plain', got {!r}".format(opts["notation"]))
    self.precision = check_precision(opts["precision"])
    self.notation = opts["notation"]
    self._format = get_formatter(self.notation)

  def __call__(self, x, pos=None):
    if x == 0:
      return "0"
    s = self._format(x, self.precision)
    if self.notation == "latex":
      return "${}$".format(s)
    return s

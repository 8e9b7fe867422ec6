DEFAULTS = {
  "precision": 3,
  "notation": "plain",
  "na_rep": "NaN",
}

def defaults_or_kwargs(defaults, kwargs):
  """Pop the keys of ``defaults`` out of ``kwargs``, falling back to the defaults."""
  ret = { **defaults }
  for k in defaults:
    if k in kwargs:
      ret[k] = kwargs.pop(k)
  return ret

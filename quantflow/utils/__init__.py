"""
Utility functions module.

Time Semantics:
- Price samples carry epoch milliseconds exactly as the market-data provider
  reports them
- Conversion to ``datetime`` is always UTC and only done at the edges
  (parsing, display)
"""

"""Bet scoring and goal forecasting.

Pure computation over already-loaded records; nothing here persists data or
calls a network service.

- evidence: weighted confidence and commitment timelines from beliefs/actions
- valuation: upside, downside, expected value and the bet ranking score
- trends: look-back comparisons, deltas, goal progress and arrival forecasts
- config: tunable constants (overridable per call or via PRACTICE_* env vars)
- formatting: display strings for monetary figures
"""

__version__ = "0.1.0"

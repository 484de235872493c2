"""Top‑level package for the Finance Monitor.

A client for a personal finance REST backend.  The primary modules are:

* ``api_client`` – typed access to the transaction, category and report routes
* ``calendar_reconciler`` – fills sparse daily aggregates into a full month
* ``reports`` – shaping helpers for recaps, trends and daily reports
* ``visualization`` – functions that generate Plotly figures
* ``dashboard`` – a Streamlit app that ties everything together

To run the dashboard from the command line you can execute:

```bash
streamlit run finance_monitor/dashboard.py
```
"""

from . import calendar_reconciler  # noqa: F401  # re-exported for convenience
from . import reports  # noqa: F401  # re-exported for convenience
from .calendar_reconciler import reconcile  # noqa: F401

__all__ = ["calendar_reconciler", "reports", "reconcile"]

"""Budget tracking core: recurrence, reconciliation and period summaries."""

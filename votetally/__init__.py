"""Votetally - aggregate queries over county-level election results.

Votetally loads vote records (one per state, county, candidate and party)
from a delimited text file and answers questions about them.

The pieces are:

-   Vote records and the immutable store holding them, in the ``record``
    module. Records are loaded by the ``io`` subpackage, which also defines
    the errors raised when loading fails.
-   The fixed table of jurisdictions (U.S. states and the district), in the
    ``jurisdiction`` module.
-   Aggregations into ranked candidate totals and per-state tallies of a
    candidate, in the ``aggregate`` module.
-   The five queries (overview, national results, state results, candidate
    results and county search), in the ``query`` module. The ``format``
    module renders their results as text, the ``persist`` module as JSON.

Run ``python -m votetally`` for a commandline interface.
"""

"""State/store layer.

Holds the daily baseline across process restarts.  The polling loop is
the only writer; everything else receives the baseline as a value.
"""

from pyparkir.state.store import BaselineStore, JsonFileBaselineStore, MemoryBaselineStore

__all__ = [
    "BaselineStore",
    "JsonFileBaselineStore",
    "MemoryBaselineStore",
]

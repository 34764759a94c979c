"""Infrastructure layer: numeric backend and IO adapters for grill pairing."""

from .filesystem import JsonMepModelSource, JsonRoutingReportStore
from .memory import InMemoryRoutingReportStore, StaticMepModelSource
from .numpy_backend import NumpyGeometryBackend
from .python_backend import PythonGeometryBackend

__all__ = [
    "JsonMepModelSource",
    "JsonRoutingReportStore",
    "StaticMepModelSource",
    "InMemoryRoutingReportStore",
    "NumpyGeometryBackend",
    "PythonGeometryBackend",
]

from orderedbag.configurations import Configurations
from orderedbag.counting_multiset import CountingMultiset
from orderedbag.errors import InvariantViolation, NotFoundError, OrderedBagError
from orderedbag.ordered_map import Orderable, OrderedMap, OrderedMapView, natural_compare

__all__ = [
    "Configurations",
    "CountingMultiset",
    "InvariantViolation",
    "NotFoundError",
    "Orderable",
    "OrderedBagError",
    "OrderedMap",
    "OrderedMapView",
    "natural_compare",
]

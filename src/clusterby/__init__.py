from clusterby.groups import Group
from clusterby.eager import group_values_by
from clusterby.clustered import (
    ClusteredGrouper,
    GrouperState,
    group_clustered_by,
    group_clustered_values_by,
)
from clusterby._version import __version__

__all__ = [
    "Group",
    "GrouperState",
    "ClusteredGrouper",
    "group_values_by",
    "group_clustered_by",
    "group_clustered_values_by",
    "__version__",
]

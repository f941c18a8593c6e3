"""
Global constants used throughout the package
"""

import math

# Weight given to edges when the caller does not provide one
DEFAULT_WEIGHT = 1

# Distance of a vertex that has not been reached
INFINITY = math.inf

# The two sides of a bipartite graph
COLORS = (0, 1)

LOG_FORMAT = "%(levelname)s | %(message)s"

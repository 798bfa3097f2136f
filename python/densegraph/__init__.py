import logging

from .constants import Constants
from .graph import Graph, Edge, DenseGraphError, OutOfRangeError, StaleLabelRefError
from .labelref import LabelRef
from .densegraph import DenseGraph

logging.getLogger(__name__).addHandler(logging.NullHandler())

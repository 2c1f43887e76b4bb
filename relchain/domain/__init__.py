"""
Domain Boundary

Loading graphs from external payloads and rendering views back to plain data.
"""

from .loader import load_graph, load_graph_file
from .serialization import (
    GraphJSONEncoder, graph_to_dict, layer_result_to_dict,
    forest_to_dict, tree_to_dict
)

__all__ = [
    'load_graph', 'load_graph_file',
    'GraphJSONEncoder', 'graph_to_dict', 'layer_result_to_dict',
    'forest_to_dict', 'tree_to_dict',
]

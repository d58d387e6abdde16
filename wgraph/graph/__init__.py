"""Graph model and helpers.

`model` defines `Node`, `Edge` and `Graph`; `io` reads and writes the plain
text interchange format; `convert` bridges to NetworkX.
"""

from wgraph.graph.model import Edge, Graph, Node, NodeNotFoundError

__all__ = ["Edge", "Graph", "Node", "NodeNotFoundError"]

from typing import Iterable
import networkx as nx

from .models import Offering
from .overlap import offerings_overlap


def build_overlap_graph(offerings: Iterable[Offering]) -> nx.Graph:
    """Nodes are offerings; an edge joins two offerings that meet at the same time."""
    G = nx.Graph()
    nodes = list(offerings)
    G.add_nodes_from(nodes)
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            u, v = nodes[i], nodes[j]
            if offerings_overlap(u, v):
                G.add_edge(u, v)
    return G

# visualize_tour.py
from typing import Iterable, Optional

import matplotlib.pyplot as plt
import networkx as nx

import config
from point import Node
from tour import Tour, tour_edges

def tour_graph(cities: Iterable[Node], tour: Tour) -> nx.DiGraph:
    G = nx.DiGraph()
    for c in cities:
        G.add_node(c.id, x=c.x, y=c.y)
    for u, v, w in tour_edges(tour):
        if u.id != v.id:
            G.add_edge(u.id, v.id, weight=w)
    return G

def plot_tour(cities: Iterable[Node], tour: Tour, filepath: Optional[str] = None,
              title: Optional[str] = None):
    settings = config.VISUALIZATION_SETTINGS
    cities = list(cities)
    G = tour_graph(cities, tour)
    pos = {c.id: c.to_tuple() for c in cities}

    fig, ax = plt.subplots(figsize=settings['figsize'])
    fig.patch.set_facecolor(settings['bgcolor'])
    nx.draw_networkx_nodes(G, pos=pos, ax=ax, node_size=settings['node_size'],
                           node_color=settings['node_color'])
    nx.draw_networkx_edges(G, pos=pos, ax=ax, width=settings['edge_width'],
                           edge_color=settings['edge_color'], arrows=True)
    if tour.path:
        start = tour.path[0].id
        nx.draw_networkx_nodes(G, pos=pos, ax=ax, nodelist=[start],
                               node_size=settings['start_node_size'],
                               node_color=settings['start_node_color'])
    if settings['show_labels']:
        nx.draw_networkx_labels(G, pos=pos, ax=ax, font_size=settings['label_font_size'])
    ax.set_title(title or f"Nearest neighbor tour, total distance {tour.total_distance:.2f}")
    ax.set_aspect('equal', adjustable='datalim')

    if filepath:
        fig.savefig(filepath, dpi=settings['dpi'], bbox_inches='tight')
        plt.close(fig)
    return fig

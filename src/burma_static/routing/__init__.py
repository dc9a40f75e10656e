"""Routing — static route table generated from a directory tree.

Routes are discovered once at setup (pattern → file collection → URL
mapping) and frozen into an immutable ``RouteTable``.
"""

from burma_static.routing.route import Route, RouteKind
from burma_static.routing.table import RouteTable, generate_routes

__all__ = ["Route", "RouteKind", "RouteTable", "generate_routes"]

"""Graph algorithms: spanning trees and components on the grid, SCC and topological order on the random digraph."""

"""Road network graph construction.

Builds a weighted, bidirectional road graph from OpenStreetMap points and
ways, and reduces it to its largest connected component.
"""

__version__ = "0.1.0"

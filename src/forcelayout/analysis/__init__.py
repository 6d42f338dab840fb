"""
Force computation: the Barnes-Hut octree and the pairwise force laws.
This package is pure NumPy.
"""

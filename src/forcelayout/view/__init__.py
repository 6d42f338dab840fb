"""
The VIEW layer draws the graph with PyVista.
It only reads positions and never feeds back into the layout.
"""

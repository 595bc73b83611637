"""
The MODEL layer contains pure math and the observable application state.
It has NO knowledge of the plot widgets (pyqtgraph) or the window layout.
"""

"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt) or of how curves are evaluated.
It deals with control points, display style and the application state.
"""

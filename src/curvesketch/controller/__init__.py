"""
The CONTROLLER layer turns input events and user commands into state mutations
and redraw requests, and orchestrates drawing onto a surface.
"""

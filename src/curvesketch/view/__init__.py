"""
The VIEW layer: PySide6 widgets and the QPainter drawing surface.
Widgets forward input to the controllers and never mutate the state directly.
"""

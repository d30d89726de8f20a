"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers and color strings (e.g., "#22CCCC")
   scattered throughout the drawing and hit-testing code.
2. Defaults: `StyleConfig` and the command-line parser read their initial
   values from here, so the whole app starts from one consistent state.

Exports:
    NODE_RADIUS (int): Radius of a drawn node and half-width of its hit-box.
    DEFAULT_STEP (float): Parameter step used when sampling curves.
    HIGHLIGHT_BLEND_TARGET (str): Color the selected-node fill is blended toward.
"""
from __future__ import annotations

# Application identity
ORG_ID = "curvesketch"
APP_ID = "curvesketch"
VISIBLE_APP_NAME = "Curve Sketch"

# Main window
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 700
CANVAS_MIN_WIDTH = 400
CANVAS_MIN_HEIGHT = 400
CANVAS_BACKGROUND = "#ffffff"

# Nodes
NODE_RADIUS = 7
NODE_FILL_COLOR = "#22CCCC"
SELECTED_NODE_FILL_COLOR = "#88aaaa"
NODE_STROKE_COLOR = "#009999"

# Node labels
FONT_FAMILY = "Arial"
FONT_SIZE = 18
FONT_COLOR = "#000000"

# Lines & curve
LINE_COLOR = "#000000"
CURVE_COLOR = "#CC2222"
CURVE_LINE_WIDTH = 2

# Sampling
DEFAULT_STEP = 0.01
MIN_STEP = 0.001

# Selected-node fill = node fill blended 50 % toward this color
HIGHLIGHT_BLEND_TARGET = "#333333"
HIGHLIGHT_BLEND_RATIO = 0.5

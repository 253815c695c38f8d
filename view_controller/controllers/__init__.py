"""
Controllers for View Controller

The generic Controller base and the ViewController that owns one view.
"""

from .base import Controller
from .view_controller import ViewController, ViewState

__all__ = [
    "Controller",
    "ViewController",
    "ViewState",
]

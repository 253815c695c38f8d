"""View Controller - managed view lifecycles.

A ViewController owns exactly one view:
- Resolves the view descriptor (class, definition, or dotted path)
- Creates the view when the controller is constructed
- Renders it into a display-tree target, idempotently
- Resets (destroy and recreate) and destroys it with the controller
"""

__version__ = "0.1.0"

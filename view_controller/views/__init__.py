"""Views — the objects a ViewController owns and renders.

A view is an instance of a View subclass ("kind"). Kinds are written as
Python classes or synthesized from declarative ViewDefinitions, which can
be inlined in a controller or loaded from the definitions/ directory.
"""

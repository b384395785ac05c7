"""Application composition layer.

``AppContext`` wires settings, the subscription store, and view models into
one runnable unit without placing business logic in views.
"""

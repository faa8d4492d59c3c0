"""
View layer.

Components:
- render.py: pure state -> View description (stats, rows, empty state, bulk actions)
- html.py / text.py: turn a View into an HTML fragment or a console frame
- binder.py: routes view events into store operations and re-renders
"""

"""
App layer: web front end (FastAPI + HTMX).

- routes/ -> HTTP handlers
- views/ -> HTML components and page views
- providers/ -> data access behind NobtProvider
- templates/ -> Jinja2 HTML (landing page)
- static/ -> stylesheet, script and images served from memory
"""

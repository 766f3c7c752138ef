"""
WSGI entry point for deployment (Gunicorn).
Builds the Dash app once and exposes its Flask server.
"""
from ramen_console.app import create_app

app = create_app()

# Expose the Flask server for gunicorn
server = app.server

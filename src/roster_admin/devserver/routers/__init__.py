"""
roster_admin.devserver.routers

Route modules for the dev server.
"""

# Package marker.

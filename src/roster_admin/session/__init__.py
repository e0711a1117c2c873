"""
roster_admin.session

Session store and token persistence.
"""

# Package marker.

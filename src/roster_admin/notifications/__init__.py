"""
roster_admin.notifications

Notification queue (toasts) with auto-expiry.
"""

# Package marker.

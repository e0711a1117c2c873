"""
roster_admin.viewmodels

View-facing state and commands.

Responsibilities:
- `router`: which view to show for the current session.
- `login`: the sign-in form.
- `roster`: the employee dashboard (cache, search, add/edit, delete).

The view-models hold no transport or persistence logic; they talk to an
`EmployeeDirectory`, a `SessionStore` and a `NotificationQueue` passed in by
the composition root.
"""

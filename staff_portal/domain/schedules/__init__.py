"""
Schedules domain - weekly working windows of staff members.

A staff member declares at most one window per weekday. Submissions are
validated against the store's opening hours and applied all-or-nothing.
"""

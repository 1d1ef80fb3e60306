"""Bookings domain - read-only access to appointments assigned to staff."""

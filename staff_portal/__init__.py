"""Staff portal API: staff profiles, weekly schedules, bookings and store hours."""

__version__ = "1.0.0"

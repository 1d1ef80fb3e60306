"""Stores domain - store information and weekly opening hours."""

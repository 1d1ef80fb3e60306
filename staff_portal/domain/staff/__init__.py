"""Staff domain - profile of the authenticated staff member."""

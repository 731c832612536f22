"""Date-based navigation trees for periodical collections."""

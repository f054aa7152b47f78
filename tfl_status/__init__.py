"""TfL line status display."""

"""Services that drive the age monitors."""

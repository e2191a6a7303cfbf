"""可复用的视图基类."""

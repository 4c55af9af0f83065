"""Services wiring storage, segmentation and synthesis together."""

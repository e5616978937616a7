"""Application layer: use cases, ports and request/response models."""

"""Cross-cutting building blocks shared by services and routes."""

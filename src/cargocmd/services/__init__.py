"""Service layer: resolution and sequenced execution of manifest commands."""

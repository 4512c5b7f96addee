"""cargo-cmd: run custom commands declared in Cargo.toml."""

__version__ = "0.3.1"

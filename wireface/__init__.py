"""Data interfaces for wire-chamber detector simulation: wire planes, depositions, frames, frame tools and data-flow node bases."""

__version__ = "0.1.0"
__all__ = ["wireplaneid", "wires", "depos", "frames", "frametools", "nodes"]
"""Reading, inspecting and rewriting trigger UI definition files."""

__version__ = "0.1.0"
"""EDL Segments: turn EDL sidecar files into labeled media segments."""

__version__ = "0.1.0"

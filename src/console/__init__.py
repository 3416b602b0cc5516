"""Interactive text front end for the elevator simulation."""

from .render import format_requests, render_building, render_status
from .shell import ElevatorShell, main

__all__ = [
    "ElevatorShell",
    "format_requests",
    "main",
    "render_building",
    "render_status",
]

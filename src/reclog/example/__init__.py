"""Example component wired through a Recorder."""

from reclog.example.globber import Globber

__all__ = ["Globber"]

"""
Janus Platform - host OS version plugin for application shells.

Registers a method-call handler on the ``janus_flutter`` channel that
answers ``getPlatformVersion`` with the host operating system name and
version.
"""

__version__ = "0.1.0"
__author__ = "Sluggisty"

CHANNEL_NAME = "janus_flutter"

__all__ = ["__version__", "CHANNEL_NAME"]

"""BGP peering check - verify prefix announcements via expected peers."""

__version__ = "0.1.0"

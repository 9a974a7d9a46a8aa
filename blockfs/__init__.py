"""In-memory file system on a simulated block device, with a demo command."""

__version__ = "0.1.0"
__all__ = ["block_device", "filesystem", "demo"]
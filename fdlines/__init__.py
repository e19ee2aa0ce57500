"""Line-at-a-time reading from file descriptors, for one descriptor or many."""

__version__ = "0.1.0"
__all__ = ["multi", "reader"]
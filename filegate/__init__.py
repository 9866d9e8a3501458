"""HTTP gateway for uploading, listing and downloading files in an object-storage bucket."""

__version__ = "0.1.0"

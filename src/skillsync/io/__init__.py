"""File I/O for manifests and release archives."""

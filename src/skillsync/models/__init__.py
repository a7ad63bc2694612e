"""Data models for skillsync.

Import from submodules:
- component: Component, ComponentType, Template
- manifest: InstalledManifest
- extraction: ExtractionFailure, ExtractionResult
"""

"""
Feature modules.

- effort: settings, segment statistics, difficulty tiers
- segmentation: the stateful engine and its undo history
- project: versioned project files
- gpx: GPX track reader
"""

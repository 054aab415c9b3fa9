"""Test suite for icon-pipeline.

Test Structure:
- unit/: Unit tests mirroring packages/icon_pipeline
- integration/: End-to-end builds against real temporary directories
- fixtures/: Icon byte factories (SVG and PNG)
- conftest.py: Shared fixtures and test configuration
"""

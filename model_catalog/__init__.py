"""
model-catalog: metadata records for downloadable 3D model archives.
"""

__version__ = "1.0.0"

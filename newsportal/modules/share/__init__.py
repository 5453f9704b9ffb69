"""
Share Module
============

Static share-preview pages for social media link unfurling.

Provides:
- SharePageGenerator: renders <id>.html per news item
- `flask share regenerate` command to rebuild pages from the store
"""

from flask import Blueprint

share_bp = Blueprint('share', __name__)

from .generator import SharePageGenerator, artifact_name
from . import commands

__all__ = ['share_bp', 'SharePageGenerator', 'artifact_name']

"""
ParentCare Advisory Library
Gemini-backed advisory use cases for a toddler parenting assistant
"""

__version__ = "0.1.0"

from . import advisory
from . import gemini
from . import models
from . import utils

__all__ = ["advisory", "gemini", "models", "utils"]

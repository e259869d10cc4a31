"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the matrix toolkit:
the Matrix value type, rounding primitives and the linear algebra engine.
The core never prints; it logs only at DEBUG level through the "src" logger.
"""

import logging

logging.getLogger("src").addHandler(logging.NullHandler())

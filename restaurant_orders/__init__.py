"""
                Restaurant Ordering System

A command-line restaurant ordering demo backed by a document
database, with a hybrid MongoDB / in-memory store architecture.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"

"""
Recall Trainer - Speed Reading and Recall Practice Tool

Fetches a random Wikipedia article, times how long you study it, collects
what you remember, and keeps a self-graded score history.
"""

__version__ = "1.0.0"
__author__ = "Recall Trainer Contributors"

"""
Movie Review Sentiment Service

A FastAPI microservice that classifies movie reviews with a lexical scorer,
optionally backed by a hosted language model.
"""

__version__ = "1.0.0"

"""
Transaction Service - In-memory banking transaction API

A FastAPI-based microservice that stores banking transactions in memory,
rejects near-simultaneous duplicates per account, and caches reads.
"""

__version__ = "0.1.0"

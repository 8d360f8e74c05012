"""
Loan API - Multi-tenant Loan Origination Service

A FastAPI-based service that collects dynamic loan application forms,
simulates credit scoring and identity verification, and takes the final
approval decision for each application.
"""

__version__ = "0.1.0"

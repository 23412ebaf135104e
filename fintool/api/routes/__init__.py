"""
API route modules.

Contains FastAPI routers for the calculators.
"""

from fintool.api.routes import mortgage, compound_interest, fire, budget

__all__ = ["mortgage", "compound_interest", "fire", "budget"]

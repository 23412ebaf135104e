"""
FinTool - Personal Finance Calculator Engine

Pure calculation engine behind the site's interactive calculators:
- Mortgage amortization (equal-installment, equal-principal, interest-only)
- Compound interest projections
- FIRE planning and goal seeking
- 50/30/20 budget allocation
"""

__version__ = "1.0.0"
__author__ = "FinTool Contributors"

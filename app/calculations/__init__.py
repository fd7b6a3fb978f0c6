"""
Financial Calculation Engine

Pure calculators behind the compound interest and EMI forms.
"""

from app.calculations import compound_interest, emi

__all__ = ["compound_interest", "emi"]

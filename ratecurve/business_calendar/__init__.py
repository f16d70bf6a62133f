from .date_calculator import adjust_date, compute_maturity, get_spot_date

__all__ = ["adjust_date", "compute_maturity", "get_spot_date"]

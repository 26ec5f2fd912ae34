"""Reading plan core: normalization, day-of-cycle arithmetic and reading resolution."""
__all__ = ["normalizer", "day_number", "resolver", "service"]

from .validation import check_nonnegative_int, assert_1d, is_sorted

__all__ = ["check_nonnegative_int", "assert_1d", "is_sorted"]

from enum import Enum


class InterpolationStrategy(str, Enum):
    LINEAR = "linear"
    EVEN = "even"


class LineStrategy(str, Enum):
    STRAIGHT_LINES = "straightLines"
    CURVES = "curves"


class CellBoundsOrder(str, Enum):
    """
    Traversal order for all cell bounds.

    The first part names the outer loop, the second the inner loop:
    TTB/BTT walk rows top-to-bottom / bottom-to-top, LTR/RTL walk columns
    left-to-right / right-to-left.
    """
    TTB_LTR = "TTB_LTR"
    TTB_RTL = "TTB_RTL"
    BTT_LTR = "BTT_LTR"
    BTT_RTL = "BTT_RTL"
    LTR_TTB = "LTR_TTB"
    LTR_BTT = "LTR_BTT"
    RTL_TTB = "RTL_TTB"
    RTL_BTT = "RTL_BTT"

    @property
    def is_rows_outer(self) -> bool:
        return self.value[:3] in ("TTB", "BTT")

    @property
    def is_outer_reversed(self) -> bool:
        return self.value[:3] in ("BTT", "RTL")

    @property
    def is_inner_reversed(self) -> bool:
        return self.value[4:] in ("BTT", "RTL")

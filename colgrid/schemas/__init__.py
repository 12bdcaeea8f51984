from .background import (
    TRANSPARENT,
    BackgroundLayer,
    BackgroundResult,
    ColorStop,
    LinearGradient,
)
from .config import DEFAULT_RTL_SELECTOR, GridConfig, GridConfigurationError, GridNumbers
from .css import CssValue, Declaration, LayoutResult, NestedRule, RuleSet

__all__ = [
    # configuration
    "DEFAULT_RTL_SELECTOR",
    "GridConfig",
    "GridConfigurationError",
    "GridNumbers",
    # css output
    "CssValue",
    "Declaration",
    "NestedRule",
    "RuleSet",
    "LayoutResult",
    # background
    "TRANSPARENT",
    "ColorStop",
    "LinearGradient",
    "BackgroundLayer",
    "BackgroundResult",
]

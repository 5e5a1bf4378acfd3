from .base import PropertyCorrelator
from .components import COMPONENT_LIBRARY, ComponentConstants, PropertyCorrelation, PureComponent
from .correlations import CorrelationType
from .pure import PureComponentCorrelator

__all__ = [
    "PropertyCorrelator",
    "PureComponentCorrelator",
    "CorrelationType",
    "ComponentConstants",
    "PropertyCorrelation",
    "PureComponent",
    "COMPONENT_LIBRARY",
]

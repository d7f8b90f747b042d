from .back_stack import BackStack
from .errors import (
    NavigationError,
    EmptyStackError,
    UnknownDestinationError,
    ConfigurationMismatchError,
    MissingBindingError,
    TransactionStateError,
)
from .nav_graph import NavGraph, GraphHistory
from .nav_unit import NavigationUnit, GraphUnit
from .tab_registry import TabRegistry
from .visibility_transaction import VisibilityTransaction, TransactionStatus
from .navigation_controller import NavigationController

__all__ = [
    'BackStack',
    'NavigationError',
    'EmptyStackError',
    'UnknownDestinationError',
    'ConfigurationMismatchError',
    'MissingBindingError',
    'TransactionStateError',
    'NavGraph',
    'GraphHistory',
    'NavigationUnit',
    'GraphUnit',
    'TabRegistry',
    'VisibilityTransaction',
    'TransactionStatus',
    'NavigationController',
]

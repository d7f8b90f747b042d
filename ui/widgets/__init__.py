from .bottom_tab_bar import BottomTabBar
from .destination_page import DestinationPage
from .unit_stack import UnitStack

__all__ = [
    'BottomTabBar',
    'DestinationPage',
    'UnitStack'
]

from .platform import ConfirmPort, DialerPort, NotifierPort, ScreenPort
from .source import TrackingSourcePort
from .storage import LocalStoragePort

__all__ = [
    "ConfirmPort",
    "DialerPort",
    "NotifierPort",
    "ScreenPort",
    "TrackingSourcePort",
    "LocalStoragePort",
]

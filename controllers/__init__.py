from .errors import DuplicateError, TrackerError, ValidationError
from .shipment_controller import ShipmentController
from .contact_controller import ContactController, filter_contacts

__all__ = [
    "DuplicateError",
    "TrackerError",
    "ValidationError",
    "ShipmentController",
    "ContactController",
    "filter_contacts",
]

from .crud_event_child import CRUDEventChild
from eventboard.models.attachment import Attachment

attachment = CRUDEventChild(Attachment, "Attachment")

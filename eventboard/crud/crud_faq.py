from .crud_event_child import CRUDEventChild
from eventboard.models.faq import Faq

faq = CRUDEventChild(Faq, "FAQ")

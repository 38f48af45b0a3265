from .crud_event_child import CRUDEventChild
from eventboard.models.agenda import Agenda

agenda = CRUDEventChild(Agenda, "Agenda item")

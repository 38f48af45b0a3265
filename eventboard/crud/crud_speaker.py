from .crud_event_child import CRUDEventChild
from eventboard.models.speaker import Speaker

speaker = CRUDEventChild(Speaker, "Speaker")
